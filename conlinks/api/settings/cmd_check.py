"""Settings check API function.

This function checks whether a vault path is ignored by the include/exclude rules.
Matches CLI: conlinks settings check <path>
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import SettingsCheckOutput
from .explain_path import explain_path
from .PluginSettings import PluginSettings


def cmd_check(path: str) -> StageResult:
    """Check whether a vault path is ignored."""

    def _build_result(
        result_obj: StageResult,
        success: bool,
        message: str,
        is_ignored: bool,
        reason: str,
        decisions: list[dict[str, str]],
        errors: list[str] | None = None,
    ) -> None:
        """Helper to build and assign the output result."""
        result_obj.output = SettingsCheckOutput(
            errors=errors or [],
            warnings=[],
            path=path,
            is_ignored=is_ignored,
            reason=reason,
            decisions=decisions,
            success=success,
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = success

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        yield (0.2, "Loading settings...")
        try:
            settings = PluginSettings.load()
        except ValueError as e:
            _build_result(
                result_obj,
                success=False,
                message=f"Failed to load settings: {e}",
                is_ignored=False,
                reason="Settings could not be loaded",
                decisions=[],
                errors=[str(e)],
            )
            yield (1.0, "Complete")
            return

        yield (0.6, "Checking path rules...")
        ignored, trace = explain_path(settings, path)

        yield (0.8, "Building decision trace...")
        decisions: list[dict[str, str]] = []
        for message in trace:
            lower = message.lower()
            if lower.startswith(("excluded", "outside")):
                symbol = "✗"
            elif lower.startswith("included"):
                symbol = "✓"
            else:
                symbol = "•"
            decisions.append({"symbol": symbol, "message": message})

        _build_result(
            result_obj,
            success=True,
            message=f"{path} is {'ignored' if ignored else 'processed'}",
            is_ignored=ignored,
            reason=trace[-1],
            decisions=decisions,
        )
        yield (1.0, "Complete")

    return StageResult(announce=f"Checking path: {path}", progress_callback=do_work)
