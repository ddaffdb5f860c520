"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution
from .display import CLIDisplay

F = TypeVar("F", bound=Callable)


def _extract_display_format(ctx: typer.Context) -> str:
    """Get the display format stored by the root callback, defaulting to yaml."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
        return obj["display_format"]
    return "yaml"


def _handle_stage_result(func: F, ctx: typer.Context) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as JSON or YAML)
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        _run_single_execution(func, args, kwargs, CLIDisplay(), _extract_display_format(ctx))

    return wrapper  # type: ignore[return-value]
