"""Unit tests for conlinks.api.settings.migrate_legacy_settings module."""

import pytest

from conlinks.api.settings.migrate_legacy_settings import migrate_legacy_settings
from tests.conftest import legacy_settings_record

pytestmark = pytest.mark.settings


def test_files_become_suffix_regexes_and_folders_stay_literal():
    migrated = migrate_legacy_settings({"ignoreFiles": ["secret"], "ignoreFolders": ["Archive/"]})
    assert migrated == {"excludePaths": ["/secret$/", "Archive/"]}


def test_existing_exclude_paths_come_first():
    migrated = migrate_legacy_settings(legacy_settings_record())
    assert migrated["excludePaths"] == ["keep.md", "/secret$/", "Archive/"]
    assert migrated["moveAttachmentsWithNote"] is False
    assert migrated["updateLinks"] is True


def test_legacy_keys_are_removed():
    migrated = migrate_legacy_settings(legacy_settings_record())
    assert "ignoreFiles" not in migrated
    assert "ignoreFolders" not in migrated


def test_only_one_legacy_key_present():
    assert migrate_legacy_settings({"ignoreFolders": ["Templates/"]}) == {"excludePaths": ["Templates/"]}
    assert migrate_legacy_settings({"ignoreFiles": ["\\.tmp"]}) == {"excludePaths": ["/\\.tmp$/"]}


def test_empty_legacy_lists_leave_exclude_paths_absent():
    assert migrate_legacy_settings({"ignoreFiles": [], "ignoreFolders": None}) == {}


def test_empty_legacy_lists_keep_existing_exclude_paths():
    migrated = migrate_legacy_settings({"ignoreFiles": [], "excludePaths": ["a/"]})
    assert migrated == {"excludePaths": ["a/"]}


def test_no_legacy_keys_returns_equal_record():
    record = {"excludePaths": ["a/"], "updateLinks": False}
    assert migrate_legacy_settings(record) == record


def test_idempotent():
    once = migrate_legacy_settings(legacy_settings_record())
    assert migrate_legacy_settings(once) == once


def test_input_is_not_mutated():
    record = legacy_settings_record()
    migrate_legacy_settings(record)
    assert record == legacy_settings_record()


def test_non_list_legacy_value_rejected():
    with pytest.raises(ValueError, match="ignoreFolders must be a list"):
        migrate_legacy_settings({"ignoreFolders": "Archive/"})


def test_migration_is_logged(caplog):
    caplog.set_level("INFO", logger="conlinks")
    migrate_legacy_settings({"ignoreFiles": ["a", "b"], "ignoreFolders": ["c/"]})
    assert "Migrated 2 ignoreFiles and 1 ignoreFolders entries into excludePaths" in caplog.text
