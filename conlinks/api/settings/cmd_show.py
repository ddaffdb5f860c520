"""Settings show API function.

Matches CLI: conlinks settings show
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import SettingsShowOutput
from .PluginSettings import PluginSettings


def cmd_show() -> StageResult:
    """Show the normalized settings record."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        settings_path = str(PluginSettings.get_settings_path())

        yield (0.3, "Loading settings...")
        try:
            settings = PluginSettings.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to load settings: {e}"
            result_obj.output = SettingsShowOutput(
                errors=[str(e)],
                warnings=[],
                settings_path=settings_path,
                content={},
                success=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.7, "Serializing settings...")
        content = settings.to_record()

        yield (1.0, "Complete")
        result_obj.result = f"Loaded settings from {settings_path}"
        result_obj.output = SettingsShowOutput(
            errors=[],
            warnings=[],
            settings_path=settings_path,
            content=content,
            success=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Showing settings...", progress_callback=do_work)
