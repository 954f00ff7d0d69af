"""Subcommand modules for ugraph.

Provides register_commands() which uses deferred imports to keep
``ugraph --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    # --- Queries ---
    from ugraph.commands.query import complete, neighbors, show, stats, weight

    cli.add_command(show)
    cli.add_command(stats)
    cli.add_command(weight)
    cli.add_command(neighbors)
    cli.add_command(complete)

    # --- Mutations ---
    from ugraph.commands.mutate import add_edge, remove_edge, remove_node

    cli.add_command(add_edge)
    cli.add_command(remove_edge)
    cli.add_command(remove_node)

    # --- Derived graphs ---
    from ugraph.commands.derive import complement, demo, union

    cli.add_command(complement)
    cli.add_command(union)
    cli.add_command(demo)
