"""Command: interactive drawing console (read-eval-print loop)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from charwin import __version__
from charwin.commands._base import CharwinCommand

if TYPE_CHECKING:
    from charwin.commands._context import AppContext


def run_console(app: AppContext) -> None:
    """Read lines from stdin until ``quit`` or end of input.

    Each line is trimmed, executed against the session and rendered.
    Rejected input is reported on stderr and the loop continues.
    """
    stdin = click.get_text_stream("stdin")
    chrome = app.interactive_chrome
    if chrome and app.settings.console.greeting:
        click.echo(f"charwin {__version__} — type 'help' for commands, 'quit' to leave.")

    while True:
        if chrome:
            click.echo(app.settings.console.prompt, nl=False)
        raw = stdin.readline()
        if not raw:
            if chrome:
                click.echo()
            return
        line = raw.strip()
        if not line:
            continue
        result = app.session.execute(line)
        app.emit(result, exit_on_error=False)
        if result.data.get("exit"):
            return


@click.command(
    "console",
    cls=CharwinCommand,
    examples="""\
  charwin console
  charwin --width 40 --height 12 console
  charwin --fill ' ' console""",
)
@click.pass_obj
def console_cmd(app: AppContext) -> None:
    """Start the interactive drawing console (the default)."""
    run_console(app)
