"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _handle_stage_result(func: F) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (one line per progress message)
    3. Result (print to stderr)
    4. Output (print to stdout as YAML or JSON)
    """

    def _extract_display_format() -> str:
        import click

        current = click.get_current_context(silent=True)
        while current is not None:
            obj = current.obj
            if isinstance(obj, dict) and "display_format" in obj:
                value = obj["display_format"]
                if value in ("json", "yaml"):
                    return value
                raise ValueError(f"Invalid display_format value: {value!r}")
            current = current.parent
        return "yaml"

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from svcinstall.cli.display import CLIDisplay

        _run_single_execution(func, args, kwargs, CLIDisplay(), _extract_display_format())

    return wrapper  # type: ignore[return-value]
