"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from conlinks.api.settings.PluginSettings import PluginSettings


def pytest_configure(config):
    for marker in ("unit", "integration", "settings", "cli", "utils"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def conlinks_home(tmp_path, monkeypatch) -> Path:
    """Isolate every test in its own CONLINKS_HOME."""
    home = tmp_path / ".conlinks"
    monkeypatch.setenv("CONLINKS_HOME", str(home))
    return home


# =============================================================================
# Settings Helpers
# =============================================================================


def legacy_settings_record() -> dict:
    """Settings record as stored by versions that had ignoreFiles/ignoreFolders."""
    return {
        "moveAttachmentsWithNote": False,
        "updateLinks": True,
        "ignoreFiles": ["secret"],
        "ignoreFolders": ["Archive/"],
        "excludePaths": ["keep.md"],
    }


def write_settings_file(record: dict) -> Path:
    """Write a raw settings record to the current settings file."""
    path = PluginSettings.get_settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(record))
    return path


def read_settings_file() -> dict:
    """Read the raw settings record from the current settings file."""
    return json.loads(PluginSettings.get_settings_path().read_text())


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
