"""Settings paths API function.

Replace includePaths or excludePaths with a newline-separated block of patterns.
Matches CLI: conlinks settings paths <list-name> [<pattern> ...]
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import SettingsPathsOutput
from .parse_patterns import parse_patterns
from .PluginSettings import PluginSettings
from .validate_patterns import validate_patterns

PATH_LIST_NAMES = ("includePaths", "excludePaths")


def cmd_paths(list_name: str, text: str) -> StageResult:
    """Validate and store a block of patterns as the new include or exclude list."""

    def _build_result(
        result_obj: StageResult,
        success: bool,
        message: str,
        items: list[str],
        validation_failed: bool = False,
    ) -> None:
        """Helper to build and assign the output result."""
        result_obj.output = SettingsPathsOutput(
            errors=[] if success else [message],
            warnings=[],
            list_name=list_name,
            items=items,
            count=len(items),
            validation_failed=validation_failed,
            success=success,
            message=message,
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = success

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        if list_name not in PATH_LIST_NAMES:
            _build_result(result_obj, success=False, message=f"Unknown list_name: {list_name!r}", items=[])
            yield (1.0, "Complete")
            raise ValueError(f"Unknown list_name: {list_name!r}")

        yield (0.2, "Loading settings...")
        try:
            settings = PluginSettings.load()
        except ValueError as e:
            _build_result(result_obj, success=False, message=f"Failed to load settings: {e}", items=[])
            yield (1.0, "Complete")
            return

        current = settings.include_paths if list_name == "includePaths" else settings.exclude_paths

        yield (0.4, "Validating patterns...")
        error = validate_patterns(text)
        if error:
            _build_result(result_obj, success=False, message=error, items=current, validation_failed=True)
            yield (1.0, "Complete")
            return

        yield (0.6, f"Updating {list_name}...")
        patterns = parse_patterns(text)
        if list_name == "includePaths":
            settings.set_include_paths(patterns)
            items = settings.include_paths
        else:
            settings.set_exclude_paths(patterns)
            items = settings.exclude_paths

        yield (0.8, "Saving settings...")
        settings.save()

        _build_result(result_obj, success=True, message=f"Stored {len(items)} pattern(s) in {list_name}", items=items)
        yield (1.0, "Complete")

    return StageResult(announce=f"Updating {list_name}...", progress_callback=do_work)
