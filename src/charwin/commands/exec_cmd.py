"""Command: execute console lines given as arguments."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from charwin.commands._base import CharwinCommand

if TYPE_CHECKING:
    from charwin.commands._context import AppContext


@click.command(
    "exec",
    cls=CharwinCommand,
    examples="""\
  charwin exec "new 20 8" "new shape circle 3" "draw 0 10 4 o"
  charwin --json exec "fill #" "replace # ."
  charwin --quiet exec "new shape square 4 2" "draw 0 1 1 =" print""",
)
@click.argument("lines", nargs=-1, required=True)
@click.option("--strict", is_flag=True, help="Stop at the first rejected line.")
@click.pass_obj
def exec_cmd(app: AppContext, lines: tuple[str, ...], strict: bool) -> None:
    """Run each LINES argument as one console command."""
    if app.run_lines(lines, strict=strict):
        raise SystemExit(1)
