"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Turns adjacency text into a GraphService and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from pipegraph.output.formatters import OutputSettings, format_result
from pipegraph.services.result import ServiceResult

if TYPE_CHECKING:
    from pipegraph.config.settings import PipegraphSettings
    from pipegraph.services.graph import GraphService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: PipegraphSettings) -> None:
        self.settings = settings

        from pipegraph.config.logging import configure_logging
        from pipegraph.services.timing import enable_timing

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        enable_timing(settings.verbose)

    def load(self, text: str, *, op: str) -> GraphService:
        """Parse *text* into a GraphService, or emit the parse error and exit."""
        from pipegraph.services.graph import load_service

        loaded = load_service(text, op=op)
        if isinstance(loaded, ServiceResult):
            self.fail(loaded)
        return loaded

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        if not result.ok:
            self.fail(result)
        click.echo(format_result(result, settings=self._output_settings()))
        # In JSON mode, warnings are already in the serialized payload.
        if not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def fail(self, result: ServiceResult) -> NoReturn:
        """Write a failed result to stderr and exit with code 1."""
        click.echo(format_result(result, settings=self._output_settings()), err=True)
        raise SystemExit(1)

    def _output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            show_nodes=self.settings.output.show_nodes,
        )
