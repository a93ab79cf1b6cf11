"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Opens the working network lazily, so ``--help`` and
``--version`` never touch the filesystem, and routes every ServiceResult
to stdout/stderr with the right exit code.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from friendgraph.infrastructure.store import GraphStoreError
from friendgraph.output.formatters import OutputSettings, format_result
from friendgraph.services.result import ServiceResult

if TYPE_CHECKING:
    from friendgraph.config.settings import FriendGraphSettings
    from friendgraph.infrastructure.network import Network

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: FriendGraphSettings) -> None:
        self.settings = settings
        self._network: Network | None = None

        from friendgraph.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from friendgraph.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def network(self) -> Network:
        """The working network, opened from disk on first access."""
        if self._network is None:
            from friendgraph.infrastructure.network import Network

            network = Network(self.settings)
            try:
                network.open()
            except GraphStoreError as exc:
                raise click.ClickException(str(exc)) from exc

            from friendgraph.config.logging import bind_network

            bind_network(network.working_file)
            self._network = network
        return self._network

    def _output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def render(self, result: ServiceResult) -> None:
        """Print a ServiceResult without exiting.

        Success goes to stdout with warnings on stderr; failure goes to
        stderr. Used directly by the interactive shell.
        """
        settings = self._output_settings()
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)

    def emit(self, result: ServiceResult) -> None:
        """Commit pending changes, print the result, and exit 1 on failure.

        A successful mutation is written back to the working file before
        anything is printed, so a failed write is reported instead of the
        mutation's success.
        """
        if result.ok and self._network is not None and self._network.dirty:
            try:
                self._network.commit()
            except GraphStoreError as exc:
                logger.debug("Commit failed: %s", exc)
                result = ServiceResult.failure("save", "IO_ERROR", str(exc))
        self.render(result)
        if not result.ok:
            raise SystemExit(1)
