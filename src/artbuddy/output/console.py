"""Rich Console factory and theme for artbuddy output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

AB_THEME = Theme(
    {
        "ab.ok": "bold green",
        "ab.error": "bold red",
        "ab.warning": "bold yellow",
        "ab.op": "bold cyan",
        "ab.key": "dim",
        "ab.name": "bold blue",
        "ab.title": "bold",
        "ab.fee": "magenta",
        "ab.status.done": "green",
        "ab.status.open": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=AB_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(completed: bool) -> str:
    """Return the Rich style name for a commission's completion status."""
    return "ab.status.done" if completed else "ab.status.open"
