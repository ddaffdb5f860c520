"""Settings Typer app factory."""

from pathlib import Path

import typer

from conlinks.api.settings._parse_value import _parse_value
from conlinks.api.settings.cmd_check import cmd_check
from conlinks.api.settings.cmd_migrate import cmd_migrate
from conlinks.api.settings.cmd_paths import cmd_paths
from conlinks.api.settings.cmd_scan import cmd_scan
from conlinks.api.settings.cmd_set import cmd_set
from conlinks.api.settings.cmd_show import cmd_show
from conlinks.api.settings.dangerous_setting_warning import dangerous_setting_warning
from conlinks.api.settings.PluginSettings import PluginSettings

from ._handle_stage_result import _handle_stage_result


def _confirm_dangerous(key: str, value: str) -> bool:
    """Ask before switching on a setting that can move or delete vault files.

    Returns True when there is nothing to confirm or the user agreed.
    """
    try:
        current = PluginSettings.load().to_record()
    except ValueError:
        # cmd_set reports the load error
        return True
    if current.get(key):
        return True
    warning = dangerous_setting_warning({key: _parse_value(value)}, key)
    if warning is None:
        return True
    typer.echo(warning, err=True)
    return typer.confirm("Enable this setting?", default=False, err=True)


def settings() -> typer.Typer:
    """Create and configure the settings Typer app."""
    app = typer.Typer(
        name="settings",
        help="Include/exclude path rules and plugin settings",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="show")
    def show_cmd(ctx: typer.Context) -> None:
        """Show the normalized settings."""
        _handle_stage_result(cmd_show, ctx)()

    @app.command(name="check")
    def check_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Vault-relative path, e.g. notes/a.md"),
    ) -> None:
        """Check whether a vault path is ignored."""
        _handle_stage_result(cmd_check, ctx)(path)

    @app.command(name="scan")
    def scan_cmd(
        ctx: typer.Context,
        root: str = typer.Argument(..., help="Vault directory to scan"),
    ) -> None:
        """Classify every file of a vault as processed or ignored."""
        _handle_stage_result(cmd_scan, ctx)(root)

    @app.command(name="set")
    def set_cmd(
        ctx: typer.Context,
        key: str = typer.Argument(..., help="Setting key, e.g. updateLinks"),
        value: str = typer.Argument(..., help="New value (JSON, e.g. true or \"report.md\")"),
        yes: bool = typer.Option(False, "--yes", "-y", help="Enable dangerous settings without asking"),
    ) -> None:
        """Set a plugin setting."""
        confirmed = yes or _confirm_dangerous(key, value)
        _handle_stage_result(cmd_set, ctx)(key, value, confirmed)

    @app.command(name="paths")
    def paths_cmd(
        ctx: typer.Context,
        list_name: str = typer.Argument(..., help="includePaths or excludePaths"),
        patterns: list[str] | None = typer.Argument(None, help="Path prefixes or /regular expressions/"),
        file: Path | None = typer.Option(None, "--file", "-f", help="Read patterns from a file, one per line"),
        clear: bool = typer.Option(False, "--clear", help="Store an empty list"),
    ) -> None:
        """Replace the include or exclude pattern list."""
        if file is not None:
            text = file.read_text()
        elif patterns:
            text = "\n".join(patterns)
        elif clear:
            text = ""
        else:
            typer.echo("Error: Patterns, --file or --clear is required", err=True)
            raise typer.Exit(1)
        _handle_stage_result(cmd_paths, ctx)(list_name, text)

    @app.command(name="migrate")
    def migrate_cmd(ctx: typer.Context) -> None:
        """Rewrite legacy ignoreFiles/ignoreFolders into excludePaths."""
        _handle_stage_result(cmd_migrate, ctx)()

    return app
