"""Click base classes shared by every ugraph command.

``examples=`` on :class:`UgraphCommand` or :class:`UgraphGroup` adds an
eager ``--examples`` flag. It prints the examples and exits before
arguments such as GRAPH_FILE are validated, so ``ugraph show --examples``
works without a file.
"""

from __future__ import annotations

from typing import Any

import click


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples)
    ctx.exit(0)


class _ExamplesMixin:
    """Stores ``examples`` and registers the ``--examples`` flag."""

    params: list[click.Parameter]
    examples: str | None

    def _attach_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_show_examples,
                    help="Show usage examples and exit.",
                )
            )


class UgraphCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(examples)


class UgraphGroup(_ExamplesMixin, click.Group):
    """Root group; subcommands declared on it default to :class:`UgraphCommand`."""

    command_class = UgraphCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(examples)


# Existence is checked by the reader, so a missing file becomes a
# READ_ERROR result instead of a usage error.
graph_file_argument = click.argument(
    "graph_file",
    type=click.Path(dir_okay=False, path_type=str),
    metavar="GRAPH_FILE",
)
