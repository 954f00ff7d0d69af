"""Derived-graph commands: complement, union, and the demo walkthrough."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ugraph.commands._base import UgraphCommand, graph_file_argument
from ugraph.domain.types import ComplementMode

if TYPE_CHECKING:
    from ugraph.commands._context import AppContext


@click.command(
    cls=UgraphCommand,
    examples="""\
  ugraph complement graph.txt
  ugraph complement graph.txt --mode full
  ugraph --json complement graph.txt""",
)
@graph_file_argument
@click.option(
    "--mode",
    type=click.Choice([m.value for m in ComplementMode]),
    default=None,
    help="anchor: only pairs with the first node; full: every pair. "
    "Defaults to [graph] complement_mode.",
)
@click.pass_obj
def complement(app: AppContext, graph_file: str, mode: str | None) -> None:
    """Build the complement of a graph that is not complete."""
    app.emit(app.load(graph_file).complement(mode))


@click.command(
    cls=UgraphCommand,
    examples="""\
  ugraph union first.txt second.txt
  ugraph --json union first.txt second.txt""",
)
@graph_file_argument
@click.argument("other_file", type=click.Path(dir_okay=False, path_type=str))
@click.pass_obj
def union(app: AppContext, graph_file: str, other_file: str) -> None:
    """Merge the edges of GRAPH_FILE and OTHER_FILE (the latter wins on weights)."""
    service = app.load(graph_file)
    other = app.load(other_file)
    app.emit(service.union(other.graph))


@click.command(
    cls=UgraphCommand,
    examples="""\
  ugraph demo graph.txt""",
)
@graph_file_argument
@click.pass_obj
def demo(app: AppContext, graph_file: str) -> None:
    """Show, remove edge 1-2, weigh edge 1-3, and list neighbourhoods of node 1."""
    app.emit(app.load(graph_file).demo())
