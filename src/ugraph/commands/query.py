"""Read-only graph commands: show, stats, weight, neighbors, complete."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ugraph.commands._base import UgraphCommand, graph_file_argument

if TYPE_CHECKING:
    from ugraph.commands._context import AppContext


@click.command(
    cls=UgraphCommand,
    examples="""\
  ugraph show graph.txt
  ugraph -v show graph.txt
  ugraph --json show graph.txt""",
)
@graph_file_argument
@click.pass_obj
def show(app: AppContext, graph_file: str) -> None:
    """List every node with its neighbours."""
    app.emit(app.load(graph_file).show())


@click.command(
    cls=UgraphCommand,
    examples="""\
  ugraph stats graph.txt
  ugraph --json stats graph.txt""",
)
@graph_file_argument
@click.pass_obj
def stats(app: AppContext, graph_file: str) -> None:
    """Summarise order, node and edge counts, and consistency."""
    app.emit(app.load(graph_file).stats())


@click.command(
    cls=UgraphCommand,
    examples="""\
  ugraph weight graph.txt 1 3
  ugraph -q weight graph.txt 1 3""",
)
@graph_file_argument
@click.argument("src", type=int)
@click.argument("dest", type=int)
@click.pass_obj
def weight(app: AppContext, graph_file: str, src: int, dest: int) -> None:
    """Show the weight of the edge SRC - DEST."""
    app.emit(app.load(graph_file).edge_weight(src, dest))


@click.command(
    cls=UgraphCommand,
    examples="""\
  ugraph neighbors graph.txt 2
  ugraph neighbors graph.txt 2 --closed
  ugraph -q neighbors graph.txt 2""",
)
@graph_file_argument
@click.argument("node", type=int)
@click.option(
    "--closed",
    is_flag=True,
    help="List the descriptors pointing at NODE from every other node.",
)
@click.pass_obj
def neighbors(app: AppContext, graph_file: str, node: int, closed: bool) -> None:
    """Show the open (default) or closed neighbourhood of NODE."""
    app.emit(app.load(graph_file).neighborhood(node, closed=closed))


@click.command(
    cls=UgraphCommand,
    examples="""\
  ugraph complete graph.txt
  ugraph -v complete graph.txt""",
)
@graph_file_argument
@click.pass_obj
def complete(app: AppContext, graph_file: str) -> None:
    """Check whether the graph is complete."""
    app.emit(app.load(graph_file).completeness())
