"""Output mode dispatch for ServiceResult.

The CLI renders ServiceResult for humans (Rich tables and fields) or
machines (--json). ``--quiet`` reduces output to bare node ids or values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ugraph.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags resolved from :class:`~ugraph.config.settings.UgraphSettings`."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, and quiet wins over the Rich renderers.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    from ugraph.output.renderers import render_quiet, render_result

    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, width=settings.width)
