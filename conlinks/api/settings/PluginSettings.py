"""Plugin settings with include/exclude path rules."""

import json
import logging
import os
import re
from collections.abc import Iterable, Mapping
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError
from pydantic.alias_generators import to_camel

from ._as_list import _as_list
from ._constants import (
    ALWAYS_MATCH_REGEX,
    DEFAULT_CONSISTENCY_REPORT_FILE,
    DEFAULT_EXCLUDE_PATHS,
    HOME_DIR_NAME,
    NEVER_MATCH_REGEX,
    SETTINGS_FILE_NAME,
)
from .compile_patterns import compile_patterns
from .migrate_legacy_settings import migrate_legacy_settings

logger = logging.getLogger(__name__)


def _filter_patterns(values: Iterable[str | None]) -> list[str]:
    patterns: list[str] = []
    for value in values:
        if not value:
            continue
        if not isinstance(value, str):
            raise ValueError(f"Path pattern must be a string (found: {type(value).__name__} = {value!r})")
        patterns.append(value)
    return patterns


class PluginSettings(BaseModel):
    """Settings for consistent attachments and links.

    Scalar settings are regular fields, stored under camelCase keys. The two
    path lists are only changed through ``set_include_paths`` and
    ``set_exclude_paths``, which rebuild the compiled matcher together with
    the list.
    """

    model_config = ConfigDict(
        extra="ignore",
        strict=True,
        validate_assignment=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    auto_collect_attachments: bool = Field(False, description="Collect attachments when the note is edited")
    change_note_backlinks_alt: bool = Field(True, description="Update backlink text when a note is renamed")
    consistency_report_file: str = Field(DEFAULT_CONSISTENCY_REPORT_FILE, description="Consistency report file name")
    delete_attachments_with_note: bool = Field(True, description="Delete unused attachments with the note")
    delete_empty_folders: bool = Field(True, description="Delete folders left empty after a move")
    delete_exist_files_when_move_note: bool = Field(True, description="Delete duplicate attachments on note move")
    move_attachments_with_note: bool = Field(True, description="Move attachments when a note is moved")
    show_warning: bool = Field(True, description="Show warnings")
    update_links: bool = Field(True, description="Update links when notes or attachments move")

    _include_paths: list[str] = PrivateAttr(default_factory=list)
    _exclude_paths: list[str] = PrivateAttr(default_factory=list)
    _include_regex: re.Pattern[str] = PrivateAttr(default=ALWAYS_MATCH_REGEX)
    _exclude_regex: re.Pattern[str] = PrivateAttr(default=NEVER_MATCH_REGEX)

    def model_post_init(self, __context: Any) -> None:
        self.set_exclude_paths(DEFAULT_EXCLUDE_PATHS)

    @property
    def include_paths(self) -> list[str]:
        return list(self._include_paths)

    @property
    def exclude_paths(self) -> list[str]:
        return list(self._exclude_paths)

    @property
    def include_regex(self) -> re.Pattern[str]:
        return self._include_regex

    @property
    def exclude_regex(self) -> re.Pattern[str]:
        return self._exclude_regex

    def set_include_paths(self, values: Iterable[str | None]) -> re.Pattern[str]:
        """Replace include patterns and rebuild the include matcher.

        Empty entries are dropped. An empty list includes every path.
        Nothing changes if compilation fails.
        """
        patterns = _filter_patterns(values)
        regex = compile_patterns(patterns, ALWAYS_MATCH_REGEX)
        self._include_paths, self._include_regex = patterns, regex
        return regex

    def set_exclude_paths(self, values: Iterable[str | None]) -> re.Pattern[str]:
        """Replace exclude patterns and rebuild the exclude matcher.

        Empty entries are dropped. An empty list excludes nothing.
        Nothing changes if compilation fails.
        """
        patterns = _filter_patterns(values)
        regex = compile_patterns(patterns, NEVER_MATCH_REGEX)
        self._exclude_paths, self._exclude_regex = patterns, regex
        return regex

    def is_path_ignored(self, path: str) -> bool:
        """Return True if a vault path fails the include gate or hits the exclude gate."""
        if not self._include_regex.search(path):
            return True
        return self._exclude_regex.search(path) is not None

    @classmethod
    def from_record(cls, record: Mapping[str, Any] | None) -> "PluginSettings":
        """Build settings from a raw stored record.

        Legacy fields are migrated first. Unknown keys are ignored and absent
        keys keep their defaults.

        Raises:
            ValidationError: If a scalar setting has the wrong type
            PatternError: If a stored ``/regex/`` pattern is invalid
            ValueError: If the record or a path list has the wrong shape
        """
        if record is None:
            record = {}
        if not isinstance(record, Mapping):
            raise ValueError(f"settings must be a mapping, got {type(record).__name__}")

        migrated = migrate_legacy_settings(record)
        settings = cls.model_validate(migrated)
        if migrated.get("includePaths") is not None:
            settings.set_include_paths(_as_list(migrated, "includePaths"))
        if migrated.get("excludePaths") is not None:
            settings.set_exclude_paths(_as_list(migrated, "excludePaths"))
        return settings

    def to_record(self) -> dict[str, Any]:
        """Serialize to the stored record shape (patterns, never matchers)."""
        record = self.model_dump(by_alias=True)
        record["excludePaths"] = self.exclude_paths
        record["includePaths"] = self.include_paths
        return record

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get conlinks home directory based on CONLINKS_HOME or default to ~/.conlinks."""
        home_env = os.environ.get("CONLINKS_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / HOME_DIR_NAME

    @classmethod
    def get_settings_path(cls) -> Path:
        """Get path to the settings file."""
        return cls.get_home_dir() / SETTINGS_FILE_NAME

    @classmethod
    def read_record(cls) -> dict[str, Any]:
        """Read the raw stored record, or an empty record if no file exists.

        Raises:
            ValueError: If the file is not a JSON object
        """
        path = cls.get_settings_path()
        if not path.exists():
            logger.debug(f"No settings file at {path}; using defaults")
            return {}

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in settings file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Settings file {path} must contain a JSON object, got {type(raw).__name__}")
        return raw

    @classmethod
    def load(cls) -> "PluginSettings":
        """Load, migrate and validate settings from file.

        Raises:
            ValueError: If the file is invalid JSON or fails validation
        """
        raw = cls.read_record()
        try:
            return cls.from_record(raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Settings validation error: {detail}") from e
        except ValueError as e:
            raise ValueError(f"Settings validation error: {e}") from e

    def save(self) -> None:
        """Save the settings record to the settings file.

        Uses atomic write (write to temp file, then rename) so the existing
        file is never left half written.

        Raises:
            RuntimeError: If the file cannot be written
        """
        path = self.get_settings_path()
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w") as fh:
                json.dump(self.to_record(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save settings: {e}") from e
        logger.info(f"Saved settings to {path}")
