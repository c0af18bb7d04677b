"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Loads the bootstrap files lazily so ``--help`` and
``--version`` never touch the disk, and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from rosterctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from rosterctl.config.settings import RosterSettings
    from rosterctl.infrastructure.store import StateStore
    from rosterctl.services.dispatcher import CommandDispatcher
    from rosterctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: RosterSettings) -> None:
        self.settings = settings
        self._store: StateStore | None = None
        self._dispatcher: CommandDispatcher | None = None

        from rosterctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from rosterctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def store(self) -> StateStore:
        """The state store, loaded from the bootstrap files on first access.

        A load failure aborts the command with exit code 1.
        """
        if self._store is None:
            from rosterctl.domain.errors import LoadError
            from rosterctl.infrastructure.loader import load_state
            from rosterctl.infrastructure.store import StateStore

            try:
                state = load_state(self.settings.profile_path, self.settings.roster_path)
            except LoadError as exc:
                raise click.ClickException(exc.message) from exc
            self._store = StateStore(state, unique_emails=self.settings.roster.unique_emails)
            logger.info("State store ready: %s", self._store.summary())
        return self._store

    @property
    def dispatcher(self) -> CommandDispatcher:
        if self._dispatcher is None:
            from rosterctl.services.dispatcher import CommandDispatcher

            self._dispatcher = CommandDispatcher(self.store)
        return self._dispatcher

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally. Warnings go to
          stderr so piped output stays clean.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON mode already carries them in the payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
