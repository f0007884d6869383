"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Owns the console session and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

import click

from charwin.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from charwin.config.settings import CharwinSettings
    from charwin.services.console import ConsoleService
    from charwin.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. The console session is
    created lazily so ``--help`` and ``--version`` never build a window.
    """

    def __init__(self, settings: CharwinSettings) -> None:
        self.settings = settings
        self._session: ConsoleService | None = None

        from charwin.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def session(self) -> ConsoleService:
        """The console session (created lazily on first access)."""
        if self._session is None:
            from charwin.services.console import ConsoleService

            window = self.settings.window
            self._session = ConsoleService(
                window.width,
                window.height,
                fill=window.fill,
                auto_print=self.settings.console.auto_print,
            )
            logger.debug("Session started with a %dx%d window", window.width, window.height)
        return self._session

    @property
    def interactive_chrome(self) -> bool:
        """Whether prompts and greetings may be written to stdout."""
        return not (self.settings.json_output or self.settings.quiet)

    def emit(self, result: ServiceResult, *, exit_on_error: bool = True) -> None:
        """Format and output a ServiceResult.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute piped output.
        * Failure: writes to stderr and, when *exit_on_error*, exits with
          code 1. The interactive loop passes False to keep going.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        if result.ok and result.op == "clear" and self.interactive_chrome:
            click.clear()
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            if exit_on_error:
                raise SystemExit(1)

    def run_lines(self, lines: Iterable[str], *, strict: bool = False) -> int:
        """Execute console lines in order, emitting each result.

        Blank lines and ``#`` comments are skipped. Stops at ``quit``, and
        at the first failure when *strict*.

        Returns:
            Number of failed lines.
        """
        failures = 0
        for lineno, raw in enumerate(lines, start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            result = self.session.execute(line)
            result = result.model_copy(update={"meta": {**(result.meta or {}), "line": lineno}})
            self.emit(result, exit_on_error=False)
            if not result.ok:
                failures += 1
                if strict:
                    break
            if result.data.get("exit"):
                break
        return failures
