"""Rich Console factory and theme for charwin output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CHARWIN_THEME = Theme(
    {
        "charwin.ok": "bold green",
        "charwin.error": "bold red",
        "charwin.warning": "bold yellow",
        "charwin.op": "bold cyan",
        "charwin.key": "dim",
        "charwin.grid": "",
        "charwin.index": "bold blue",
        "charwin.shape.circle": "magenta",
        "charwin.shape.square": "cyan",
    }
)

_SHAPE_STYLES: dict[str, str] = {
    "circle": "charwin.shape.circle",
    "square": "charwin.shape.square",
}

DEFAULT_WIDTH = 120


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width. Grids wider than this are never
            wrapped, callers pass the grid width to keep rows intact.
    """
    return Console(
        file=StringIO(),
        theme=CHARWIN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_shape(kind: str) -> str:
    """Return the Rich style name for a shape kind."""
    return _SHAPE_STYLES.get(kind, "")
