"""Migrate legacy ignore settings into excludePaths."""

import logging
from collections.abc import Mapping
from typing import Any

from ._as_list import _as_list
from ._constants import LEGACY_IGNORE_FILES, LEGACY_IGNORE_FOLDERS

logger = logging.getLogger(__name__)


def migrate_legacy_settings(record: Mapping[str, Any]) -> dict[str, Any]:
    """Fold ``ignoreFiles`` and ``ignoreFolders`` into ``excludePaths``.

    ``ignoreFiles`` entries become ``/<entry>$/`` suffix patterns and
    ``ignoreFolders`` entries are appended as literal prefixes, after any
    existing ``excludePaths``. Both legacy keys are removed. Records without
    legacy keys come back unchanged, so running this twice is a no-op.

    Args:
        record: Raw settings as loaded from storage (not modified)

    Returns:
        New record in the current schema

    Raises:
        ValueError: If a legacy field or excludePaths is present but is not a list
    """
    migrated = dict(record)
    if LEGACY_IGNORE_FILES not in migrated and LEGACY_IGNORE_FOLDERS not in migrated:
        return migrated

    ignore_files = _as_list(migrated, LEGACY_IGNORE_FILES)
    ignore_folders = _as_list(migrated, LEGACY_IGNORE_FOLDERS)

    exclude_paths = _as_list(migrated, "excludePaths")
    exclude_paths.extend(f"/{entry}$/" for entry in ignore_files)
    exclude_paths.extend(ignore_folders)

    if exclude_paths:
        migrated["excludePaths"] = exclude_paths

    migrated.pop(LEGACY_IGNORE_FILES, None)
    migrated.pop(LEGACY_IGNORE_FOLDERS, None)

    if ignore_files or ignore_folders:
        logger.info(
            f"Migrated {len(ignore_files)} {LEGACY_IGNORE_FILES} and "
            f"{len(ignore_folders)} {LEGACY_IGNORE_FOLDERS} entries into excludePaths"
        )
    return migrated
