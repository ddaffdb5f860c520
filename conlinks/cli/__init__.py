"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Usage errors and aborted prompts are reported by typer itself and come
    back as exit codes.
    """
    import typer

    from conlinks.cli._create_app import _create_app
    from conlinks.utils import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    configure_logging()

    app = _create_app()
    try:
        app(argv)
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except typer.Exit as e:
        return e.exit_code
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
