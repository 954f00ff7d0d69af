"""Root CLI group for ugraph with global flags and command registration."""

from __future__ import annotations

import click

from ugraph import __version__
from ugraph.commands import register_commands
from ugraph.commands._base import UgraphGroup
from ugraph.commands._context import AppContext
from ugraph.config.settings import UgraphSettings

_ROOT_EXAMPLES = """\
  ugraph show graph.txt
  ugraph weight graph.txt 1 2
  ugraph neighbors graph.txt 2 --closed
  ugraph complement graph.txt --mode full
  ugraph union first.txt second.txt
  ugraph --json stats graph.txt"""


@click.group(cls=UgraphGroup, invoke_without_command=True, examples=_ROOT_EXAMPLES)
@click.version_option(version=__version__, prog_name="ugraph")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """ugraph — undirected weighted graph toolkit."""
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    # Unset flags fall through to UGRAPH_* env vars and TOML.
    settings = UgraphSettings.from_cli(
        config_path=config_path,
        **{name: value for name, value in flags.items() if value},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
