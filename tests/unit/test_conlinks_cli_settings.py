"""CLI tests for the settings commands."""

import json

import pytest
from typer.testing import CliRunner

from conlinks.cli import main
from conlinks.cli._create_app import _create_app
from tests.conftest import legacy_settings_record, read_settings_file, write_settings_file

pytestmark = pytest.mark.cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def app():
    return _create_app()


@pytest.fixture(autouse=True)
def no_log_file(monkeypatch):
    monkeypatch.setattr("conlinks.utils.logger._CONFIGURED", True)


def test_show_yaml(runner, app):
    result = runner.invoke(app, ["settings", "show"])
    assert result.exit_code == 0
    assert "updateLinks: true" in result.stdout
    assert "includePaths: []" in result.stdout


def test_show_json(runner, app):
    result = runner.invoke(app, ["--display", "json", "settings", "show"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["content"]["showWarning"] is True


def test_bad_display(runner, app):
    result = runner.invoke(app, ["--display", "xml", "settings", "show"])
    assert result.exit_code == 1


def test_check(runner, app):
    write_settings_file({"excludePaths": ["Archive/"]})
    result = runner.invoke(app, ["-d", "json", "settings", "check", "Archive/old.md"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["is_ignored"] is True


def test_scan_missing_directory(runner, app, tmp_path):
    result = runner.invoke(app, ["settings", "scan", str(tmp_path / "missing")])
    assert result.exit_code == 1


def test_set(runner, app):
    result = runner.invoke(app, ["settings", "set", "updateLinks", "false"])
    assert result.exit_code == 0
    assert read_settings_file()["updateLinks"] is False


def test_set_dangerous_prompt_declined(runner, app):
    write_settings_file({"moveAttachmentsWithNote": False})
    result = runner.invoke(app, ["settings", "set", "moveAttachmentsWithNote", "true"], input="n\n")
    assert result.exit_code == 1
    assert read_settings_file()["moveAttachmentsWithNote"] is False


def test_set_dangerous_prompt_accepted(runner, app):
    write_settings_file({"moveAttachmentsWithNote": False})
    result = runner.invoke(app, ["settings", "set", "moveAttachmentsWithNote", "true"], input="y\n")
    assert result.exit_code == 0
    assert read_settings_file()["moveAttachmentsWithNote"] is True


def test_set_dangerous_yes_flag(runner, app):
    write_settings_file({"autoCollectAttachments": False})
    result = runner.invoke(app, ["settings", "set", "autoCollectAttachments", "true", "--yes"])
    assert result.exit_code == 0
    assert read_settings_file()["autoCollectAttachments"] is True


def test_paths(runner, app):
    result = runner.invoke(app, ["settings", "paths", "includePaths", "notes/", "/\\.canvas$/"])
    assert result.exit_code == 0
    assert read_settings_file()["includePaths"] == ["notes/", "/\\.canvas$/"]


def test_paths_from_file(runner, app, tmp_path):
    patterns = tmp_path / "exclude.txt"
    patterns.write_text("Templates/\n\n/\\.tmp$/\n")
    result = runner.invoke(app, ["settings", "paths", "excludePaths", "--file", str(patterns)])
    assert result.exit_code == 0
    assert read_settings_file()["excludePaths"] == ["Templates/", "/\\.tmp$/"]


def test_paths_invalid_regex(runner, app):
    result = runner.invoke(app, ["settings", "paths", "excludePaths", "/(/"])
    assert result.exit_code == 1
    assert "validation_failed: true" in result.stdout


def test_paths_requires_input(runner, app):
    result = runner.invoke(app, ["settings", "paths", "includePaths"])
    assert result.exit_code == 1


def test_migrate(runner, app):
    write_settings_file(legacy_settings_record())
    result = runner.invoke(app, ["settings", "migrate"])
    assert result.exit_code == 0
    assert "ignoreFiles" not in read_settings_file()


def test_main_exit_codes(capsys):
    assert main(["settings", "check", "notes/a.md"]) == 0
    assert main(["settings", "scan", "/nonexistent/vault/dir"]) == 1
    assert main(["settings", "set", "noSuchKey", "1"]) == 1
    assert main(["--no-such-option"]) == 2
    assert "Unhandled error: Unknown setting key" in capsys.readouterr().err


def test_main_json_display(capsys):
    write_settings_file({"excludePaths": ["Archive/"]})
    assert main(["--display", "json", "settings", "check", "Archive/old.md"]) == 0
    assert json.loads(capsys.readouterr().out)["is_ignored"] is True


def test_set_dangerous_prompt_aborted(runner, app):
    write_settings_file({"deleteAttachmentsWithNote": False})
    result = runner.invoke(app, ["settings", "set", "deleteAttachmentsWithNote", "true"], input="")
    assert result.exit_code == 1
    assert "Aborted" in result.output
    assert "Unhandled error" not in result.output
    assert read_settings_file()["deleteAttachmentsWithNote"] is False
