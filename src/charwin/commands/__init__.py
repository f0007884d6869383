"""Subcommand modules for charwin.

Provides register_commands() which uses deferred imports to keep
``charwin --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from charwin.commands.console_cmd import console_cmd
    from charwin.commands.exec_cmd import exec_cmd
    from charwin.commands.run import run

    cli.add_command(console_cmd)
    cli.add_command(run)
    cli.add_command(exec_cmd)
