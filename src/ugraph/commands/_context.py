"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Loads graph files into a GraphService and
centralises result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ugraph.domain.errors import GraphReadError
from ugraph.output.formatters import OutputSettings, format_result
from ugraph.services.graph import GraphService
from ugraph.services.result import ServiceResult

if TYPE_CHECKING:
    from ugraph.config.settings import UgraphSettings


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: UgraphSettings) -> None:
        self.settings = settings

        from ugraph.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def load(self, path: str) -> GraphService:
        """Read *path* into a GraphService.

        A read failure is emitted as an error result and exits with code 1.
        """
        try:
            return GraphService.open(
                path,
                config=self.settings.graph,
                sort=self.settings.output.sort_nodes,
            )
        except GraphReadError as exc:
            self.emit(ServiceResult.failure("read_graph", exc))
            raise SystemExit(1) from exc

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
