"""Settings migrate API function.

Rewrite a stored settings file that still uses ignoreFiles/ignoreFolders.
Matches CLI: conlinks settings migrate
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import SettingsMigrateOutput
from ._constants import LEGACY_IGNORE_FILES, LEGACY_IGNORE_FOLDERS
from .PluginSettings import PluginSettings


def cmd_migrate() -> StageResult:
    """Migrate legacy ignore fields in the stored settings file."""

    def _build_result(
        result_obj: StageResult,
        success: bool,
        message: str,
        migrated: bool,
        exclude_paths: list[str],
    ) -> None:
        """Helper to build and assign the output result."""
        result_obj.output = SettingsMigrateOutput(
            errors=[] if success else [message],
            warnings=[],
            settings_path=str(PluginSettings.get_settings_path()),
            migrated=migrated,
            exclude_paths=exclude_paths,
            success=success,
            message=message,
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = success

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        yield (0.2, "Reading settings file...")
        try:
            raw = PluginSettings.read_record()
        except ValueError as e:
            _build_result(result_obj, False, str(e), migrated=False, exclude_paths=[])
            yield (1.0, "Complete")
            return

        has_legacy = LEGACY_IGNORE_FILES in raw or LEGACY_IGNORE_FOLDERS in raw

        yield (0.5, "Migrating legacy fields...")
        try:
            settings = PluginSettings.load()
        except ValueError as e:
            _build_result(result_obj, False, str(e), migrated=False, exclude_paths=[])
            yield (1.0, "Complete")
            return

        if not has_legacy:
            _build_result(
                result_obj,
                success=True,
                message="Settings already use excludePaths; nothing to migrate",
                migrated=False,
                exclude_paths=settings.exclude_paths,
            )
            yield (1.0, "Complete")
            return

        yield (0.8, "Saving settings...")
        settings.save()

        _build_result(
            result_obj,
            success=True,
            message=f"Migrated legacy ignore settings into excludePaths ({len(settings.exclude_paths)} pattern(s))",
            migrated=True,
            exclude_paths=settings.exclude_paths,
        )
        yield (1.0, "Complete")

    return StageResult(announce="Migrating settings...", progress_callback=do_work)
