"""Unit tests for conlinks.api.settings.cmd_check module."""

import pytest

from conlinks.api.settings.cmd_check import cmd_check
from tests.conftest import run_cmd, write_settings_file

pytestmark = pytest.mark.settings


def test_cmd_check_processed_by_default():
    result = run_cmd(cmd_check, "notes/a.md")
    assert result.success is True
    assert result.output["is_ignored"] is False
    assert result.output["path"] == "notes/a.md"
    assert result.result == "notes/a.md is processed"
    assert [d["symbol"] for d in result.output["decisions"]] == ["•", "•"]


def test_cmd_check_default_report_is_ignored():
    result = run_cmd(cmd_check, "consistency-report.md")
    assert result.output["is_ignored"] is True
    assert result.output["reason"].startswith("Excluded by excludePaths")
    assert result.output["decisions"][-1]["symbol"] == "✗"


def test_cmd_check_outside_include_paths():
    write_settings_file({"includePaths": ["notes/"]})
    result = run_cmd(cmd_check, "other/a.md")
    assert result.success is True
    assert result.output["is_ignored"] is True
    assert result.output["reason"] == "Outside includePaths"


def test_cmd_check_included():
    write_settings_file({"includePaths": ["notes/"], "excludePaths": []})
    result = run_cmd(cmd_check, "notes/a.md")
    assert result.output["is_ignored"] is False
    assert result.output["decisions"][0]["symbol"] == "✓"
    assert result.output["reason"] == "No excludePaths defined; nothing excluded"


def test_cmd_check_load_failure():
    write_settings_file({"includePaths": ["/(/"]})
    result = run_cmd(cmd_check, "notes/a.md")
    assert result.success is False
    assert result.output["decisions"] == []
    assert result.output["errors"]
