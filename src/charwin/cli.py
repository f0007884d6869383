"""Root CLI group for charwin with global flags and command registration."""

from __future__ import annotations

import click

from charwin import __version__
from charwin.commands import register_commands
from charwin.commands._context import AppContext
from charwin.config.settings import CharwinSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="charwin")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the grid.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--width", type=click.IntRange(min=1), default=None, help="Initial window width.")
@click.option("--height", type=click.IntRange(min=1), default=None, help="Initial window height.")
@click.option("--fill", default=None, help="Default fill character.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    width: int | None,
    height: int | None,
    fill: str | None,
) -> None:
    """charwin — draw shapes on a character window from the terminal.

    Without a subcommand, starts the interactive console.
    """
    if fill is not None and len(fill) != 1:
        raise click.BadParameter("must be exactly one character", param_hint="'--fill'")
    settings = CharwinSettings.from_cli(
        config_path=config_path,
        window={"width": width, "height": height, "fill": fill},
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from charwin.commands.console_cmd import run_console

        run_console(ctx.obj)


register_commands(cli)
