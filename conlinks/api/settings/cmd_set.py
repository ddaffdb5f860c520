"""Settings set API function.

Set a scalar setting. Switching on a setting that can move or delete vault
files requires confirmation.
Matches CLI: conlinks settings set <key> <value> [--yes]
"""

import json
from collections.abc import Iterator
from typing import Any

from pydantic import ValidationError

from ..StageResult import StageResult
from . import SettingsSetOutput
from ._parse_value import _parse_value
from .dangerous_setting_warning import dangerous_setting_warning
from .get_setting_keys import get_setting_keys
from .PluginSettings import PluginSettings


def cmd_set(key: str, value: str, confirmed: bool = False) -> StageResult:
    """Set a scalar setting by its record key."""

    def _build_result(
        result_obj: StageResult,
        success: bool,
        message: str,
        value_stored: Any = None,
        confirmation_required: bool = False,
        errors: list[str] | None = None,
        warnings: list[str] | None = None,
    ) -> None:
        """Helper to build and assign the output result."""
        result_obj.output = SettingsSetOutput(
            errors=errors or ([message] if not success and not confirmation_required else []),
            warnings=warnings or [],
            key=key,
            value=value_stored,
            confirmation_required=confirmation_required,
            success=success,
            message=message,
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = success

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        if key not in get_setting_keys():
            hint = " (use 'settings paths' for path lists)" if key in ("includePaths", "excludePaths") else ""
            _build_result(result_obj, success=False, message=f"Unknown setting key: {key!r}{hint}")
            yield (1.0, "Complete")
            raise ValueError(f"Unknown setting key: {key!r}")

        yield (0.2, "Loading settings...")
        try:
            settings = PluginSettings.load()
        except ValueError as e:
            _build_result(result_obj, success=False, message=f"Failed to load settings: {e}")
            yield (1.0, "Complete")
            return

        yield (0.4, f"Validating {key}...")
        record = settings.to_record()
        previous = record[key]
        record[key] = _parse_value(value)
        try:
            new_settings = PluginSettings.from_record(record)
        except ValidationError as e:
            error_msg = e.errors()[0].get("msg", str(e)) if e.errors() else str(e)
            _build_result(result_obj, success=False, message=f"Invalid value for {key}: {error_msg}")
            yield (1.0, "Complete")
            return

        new_value = new_settings.to_record()[key]
        warning = dangerous_setting_warning(record, key) if not previous else None
        if warning and not confirmed:
            _build_result(
                result_obj,
                success=False,
                message=f"Confirmation required to enable {key}",
                confirmation_required=True,
                warnings=[warning],
            )
            yield (1.0, "Complete")
            return

        yield (0.8, "Saving settings...")
        new_settings.save()

        _build_result(
            result_obj,
            success=True,
            message=f"Set {key} = {json.dumps(new_value)}",
            value_stored=new_value,
            warnings=[warning] if warning else [],
        )
        yield (1.0, "Complete")

    return StageResult(announce=f"Setting {key}...", progress_callback=do_work)
