"""Settings scan API function.

Classify every file of a vault directory as processed or ignored.
Matches CLI: conlinks settings scan <vault-dir>
"""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from . import SettingsScanOutput
from ._iter_vault_files import _iter_vault_files
from .PluginSettings import PluginSettings


def cmd_scan(root: str) -> StageResult:
    """Classify every file under a vault directory."""

    def _build_result(
        result_obj: StageResult,
        success: bool,
        message: str,
        processed: list[str],
        ignored: list[str],
        errors: list[str] | None = None,
    ) -> None:
        """Helper to build and assign the output result."""
        result_obj.output = SettingsScanOutput(
            errors=errors or [],
            warnings=[],
            root=root,
            processed=processed,
            ignored=ignored,
            processed_count=len(processed),
            ignored_count=len(ignored),
            success=success,
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = success

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        yield (0.1, "Loading settings...")
        try:
            settings = PluginSettings.load()
        except ValueError as e:
            _build_result(result_obj, False, f"Failed to load settings: {e}", [], [], errors=[str(e)])
            yield (1.0, "Complete")
            return

        root_path = Path(root).expanduser()
        if not root_path.is_dir():
            message = f"Vault directory not found: {root_path}"
            _build_result(result_obj, False, message, [], [], errors=[message])
            yield (1.0, "Complete")
            return

        yield (0.3, "Scanning vault...")
        processed: list[str] = []
        ignored: list[str] = []
        for vault_path in _iter_vault_files(root_path):
            if settings.is_path_ignored(vault_path):
                ignored.append(vault_path)
            else:
                processed.append(vault_path)

        _build_result(
            result_obj,
            success=True,
            message=f"{len(processed)} file(s) processed, {len(ignored)} ignored",
            processed=processed,
            ignored=ignored,
        )
        yield (1.0, "Complete")

    return StageResult(announce=f"Scanning vault: {root}", progress_callback=do_work)
