"""CLI console helpers with optional Rich support.

Rich is imported lazily so the usage path and plain error reporting keep
working when it is not installed.  All console output targets stderr.
"""

from __future__ import annotations

import sys
from typing import Any


def _load_rich_console_class() -> type[Any] | None:
    """Return ``rich.console.Console`` or ``None`` when Rich is missing."""
    try:
        from rich.console import Console
    except ModuleNotFoundError:
        return None
    return Console


def get_rich_console() -> Any | None:
    """Create a Rich console targeting stderr, if Rich is available."""
    console_class = _load_rich_console_class()
    if console_class is None:
        return None
    return console_class(stderr=True, emoji=False)


class _ConsoleProxy:
    """Minimal stderr printer with Rich fallback."""

    def error(self, message: str) -> None:
        """Print ``error: <message>`` as one unwrapped line."""
        rich_console = get_rich_console()
        if rich_console is None:
            print(f"error: {message}", file=sys.stderr)
            return
        from rich.markup import escape

        rich_console.print(
            f"[bold red]error:[/bold red] {escape(message)}",
            soft_wrap=True,
            highlight=False,
        )

    def notice(self, message: str) -> None:
        """Print a plain informational line."""
        rich_console = get_rich_console()
        if rich_console is None:
            print(message, file=sys.stderr)
            return
        rich_console.print(message, markup=False, highlight=False, soft_wrap=True)


console = _ConsoleProxy()
