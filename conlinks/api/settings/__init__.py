"""Settings API module: include/exclude path rules and their commands."""

from .._output_schemas.settings import (
    SettingsCheckOutput,
    SettingsMigrateOutput,
    SettingsPathsOutput,
    SettingsScanOutput,
    SettingsSetOutput,
    SettingsShowOutput,
)
from .compile_patterns import compile_patterns
from .migrate_legacy_settings import migrate_legacy_settings
from .PatternError import PatternError
from .PluginSettings import PluginSettings
from .validate_patterns import validate_patterns

__all__ = [
    "PatternError",
    "PluginSettings",
    "SettingsCheckOutput",
    "SettingsMigrateOutput",
    "SettingsPathsOutput",
    "SettingsScanOutput",
    "SettingsSetOutput",
    "SettingsShowOutput",
    "compile_patterns",
    "migrate_legacy_settings",
    "validate_patterns",
]
