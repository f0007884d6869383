"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are dispatched by ``result.op`` in :func:`render_result`; ops without a
dedicated renderer print their message and, when present, the grid.

Grid text is always printed as a literal :class:`~rich.text.Text` so that
glyphs like ``[`` are never read as markup, and never wrapped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from charwin.output.console import create_console, get_output, style_for_shape

if TYPE_CHECKING:
    from rich.console import Console

    from charwin.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal, which is
    the case inside Click's CliRunner and piped output.
    """
    grid = result.data.get("grid", "")
    widest = max((len(row) for row in grid.split("\n")), default=0)
    console = create_console(width=max(widest + 1, 120))

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: the grid, or a status."""
    if not result.ok:
        return f"ERROR: {result.op} — {result.message}"
    grid = result.data.get("grid")
    if grid is not None:
        return str(grid)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _message_line(console: Console, result: ServiceResult) -> None:
    console.print(Text(result.message, style="charwin.ok"))


def _grid_block(console: Console, result: ServiceResult) -> None:
    grid = result.data.get("grid")
    if grid is None:
        return
    console.print(Text(grid, style="charwin.grid"), no_wrap=True, overflow="ignore", crop=False)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print data fields and meta beyond the message and grid (verbose only)."""
    extra = {k: v for k, v in result.data.items() if k not in ("message", "grid")}
    extra.update(result.meta or {})
    for key, value in extra.items():
        console.print(Text.assemble((f"  {key}: ", "charwin.key"), str(value)))


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Message, then the grid when the result carries one."""
    _message_line(console, result)
    _grid_block(console, result)
    if verbose:
        _render_meta(console, result)


def _render_help(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text(result.data.get("text", "")), no_wrap=True, overflow="ignore", crop=False)


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render registered shapes as a table."""
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        console.print("No shapes registered. Try 'new shape circle 3'.")
        return
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Index", style="charwin.index", justify="right", no_wrap=True)
    table.add_column("Kind")
    table.add_column("Shape")
    for item in items:
        kind = str(item.get("kind", ""))
        table.add_row(
            str(item.get("index", "")),
            Text(kind, style=style_for_shape(kind)),
            str(item.get("description", "")),
        )
    console.print(table)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    console.print(
        Text.assemble(
            ("ERROR", "charwin.error"),
            (f"  {result.op}", "charwin.op"),
            " — ",
            result.message or "Unknown error",
        )
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


_OP_RENDERERS: dict[str, Any] = {
    "help": _render_help,
    "list": _render_list,
}
