"""Rich Console factory and theme for periodkit output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PK_THEME = Theme(
    {
        "pk.ok": "bold green",
        "pk.error": "bold red",
        "pk.warning": "bold yellow",
        "pk.op": "bold cyan",
        "pk.key": "dim",
        "pk.unit": "bold blue",
        "pk.bound": "bold",
        "pk.padding": "dim",
        "pk.today": "bold reverse",
        "pk.weekend": "magenta",
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
        theme=PK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
