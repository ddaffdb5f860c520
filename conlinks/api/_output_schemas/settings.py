"""Output schemas for settings commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class SettingsShowOutput(BaseOutputSchema):
    """Output schema for settings show command."""
    settings_path: str = Field(..., description="Path to the settings file")
    content: dict[str, Any] = Field(..., description="Normalized settings record, empty if loading failed")
    success: bool = Field(..., description="Whether settings were loaded")


class SettingsCheckOutput(BaseOutputSchema):
    """Output schema for settings check command."""
    path: str = Field(..., description="Vault path that was checked")
    is_ignored: bool = Field(..., description="Whether the path is ignored")
    reason: str = Field(..., description="Final decision reason")
    decisions: list[dict[str, str]] = Field(..., description="Decision trace entries with symbol and message")
    success: bool = Field(..., description="Whether check completed successfully")


class SettingsScanOutput(BaseOutputSchema):
    """Output schema for settings scan command."""
    root: str = Field(..., description="Vault directory that was scanned")
    processed: list[str] = Field(..., description="Vault paths that pass both gates")
    ignored: list[str] = Field(..., description="Vault paths that are ignored")
    processed_count: int = Field(..., description="Number of processed paths")
    ignored_count: int = Field(..., description="Number of ignored paths")
    success: bool = Field(..., description="Whether scan completed successfully")


class SettingsSetOutput(BaseOutputSchema):
    """Output schema for settings set command."""
    key: str = Field(..., description="Settings key")
    value: Any = Field(None, description="Value stored, None if nothing was stored")
    confirmation_required: bool = Field(..., description="Whether the change is waiting for confirmation")
    success: bool = Field(..., description="Whether the value was stored")
    message: str = Field(..., description="Result message")


class SettingsPathsOutput(BaseOutputSchema):
    """Output schema for settings paths command."""
    list_name: str = Field(..., description="includePaths or excludePaths")
    items: list[str] = Field(..., description="Patterns in the list after the command")
    count: int = Field(..., description="Number of patterns in the list")
    validation_failed: bool = Field(..., description="Whether a pattern was rejected")
    success: bool = Field(..., description="Whether the list was stored")
    message: str = Field(..., description="Result message")


class SettingsMigrateOutput(BaseOutputSchema):
    """Output schema for settings migrate command."""
    settings_path: str = Field(..., description="Path to the settings file")
    migrated: bool = Field(..., description="Whether legacy fields were found and rewritten")
    exclude_paths: list[str] = Field(..., description="excludePaths after migration")
    success: bool = Field(..., description="Whether migration completed successfully")
    message: str = Field(..., description="Result message")


register_output_schema("settings", "show", SettingsShowOutput)
register_output_schema("settings", "check", SettingsCheckOutput)
register_output_schema("settings", "scan", SettingsScanOutput)
register_output_schema("settings", "set", SettingsSetOutput)
register_output_schema("settings", "paths", SettingsPathsOutput)
register_output_schema("settings", "migrate", SettingsMigrateOutput)
