"""Scalar setting keys as stored in the settings record."""

from pydantic.alias_generators import to_camel

from .PluginSettings import PluginSettings


def get_setting_keys() -> tuple[str, ...]:
    """Return the camelCase record keys of all scalar settings (single source of truth)."""
    return tuple(to_camel(name) for name in PluginSettings.model_fields)
