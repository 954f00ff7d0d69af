"""Rich console and theme for ugraph output.

Renderers print into an in-memory console and hand back plain strings;
the command layer decides whether they go to stdout or stderr. Rich drops
ANSI codes by itself when the buffer is not a terminal, which covers
pipes and ``CliRunner``.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

UGRAPH_THEME = Theme(
    {
        # status line
        "ug.ok": "bold green",
        "ug.error": "bold red",
        "ug.warning": "bold yellow",
        "ug.op": "bold cyan",
        "ug.key": "dim",
        # graph values
        "ug.node": "bold blue",
        "ug.weight": "magenta",
        "ug.true": "green",
        "ug.false": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Return a console writing to a fresh StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=UGRAPH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Return everything printed to a console from :func:`create_console`."""
    buffer = console.file
    if not isinstance(buffer, StringIO):
        msg = "console was not created by create_console()"
        raise TypeError(msg)
    return buffer.getvalue()


def style_for_bool(value: bool) -> str:
    return "ug.true" if value else "ug.false"
