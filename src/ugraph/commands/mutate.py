"""Mutation commands: add-edge, remove-edge, remove-node.

Changes apply to the graph loaded in memory; the resulting adjacency is
printed and the input file is left untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ugraph.commands._base import UgraphCommand, graph_file_argument

if TYPE_CHECKING:
    from ugraph.commands._context import AppContext


@click.command(
    cls=UgraphCommand,
    name="add-edge",
    examples="""\
  ugraph add-edge graph.txt 1 4 9""",
)
@graph_file_argument
@click.argument("src", type=int)
@click.argument("dest", type=int)
@click.argument("weight", type=int)
@click.pass_obj
def add_edge(app: AppContext, graph_file: str, src: int, dest: int, weight: int) -> None:
    """Add an edge SRC - DEST with WEIGHT (>= 1) and show the result."""
    app.emit(app.load(graph_file).add_edge(src, dest, weight))


@click.command(
    cls=UgraphCommand,
    name="remove-edge",
    examples="""\
  ugraph remove-edge graph.txt 1 2
  ugraph --json remove-edge graph.txt 1 2""",
)
@graph_file_argument
@click.argument("src", type=int)
@click.argument("dest", type=int)
@click.pass_obj
def remove_edge(app: AppContext, graph_file: str, src: int, dest: int) -> None:
    """Remove the edge SRC - DEST and show the result."""
    app.emit(app.load(graph_file).remove_edge(src, dest))


@click.command(
    cls=UgraphCommand,
    name="remove-node",
    examples="""\
  ugraph remove-node graph.txt 3""",
)
@graph_file_argument
@click.argument("node", type=int)
@click.pass_obj
def remove_node(app: AppContext, graph_file: str, node: int) -> None:
    """Remove NODE and all of its edges, then show the result."""
    app.emit(app.load(graph_file).remove_node(node))
