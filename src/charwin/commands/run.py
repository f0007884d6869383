"""Command: execute a script of console lines."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from charwin.commands._base import CharwinCommand

if TYPE_CHECKING:
    from charwin.commands._context import AppContext


@click.command(
    cls=CharwinCommand,
    examples="""\
  charwin run drawing.txt
  charwin --quiet run drawing.txt > out.txt
  echo "fill #" | charwin run -
  charwin run --strict drawing.txt""",
)
@click.argument("script", type=click.File("r", encoding="utf-8"))
@click.option("--strict", is_flag=True, help="Stop at the first rejected line.")
@click.pass_obj
def run(app: AppContext, script: TextIO, strict: bool) -> None:
    """Run each line of SCRIPT as a console command ('-' reads stdin).

    Blank lines and lines starting with '#' are ignored. Exits with
    status 1 if any line was rejected.
    """
    if app.run_lines(script, strict=strict):
        raise SystemExit(1)
