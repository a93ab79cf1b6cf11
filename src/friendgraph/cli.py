"""Root CLI group for friendgraph with global flags and command registration."""

from __future__ import annotations

import click

from friendgraph import __version__
from friendgraph.commands import register_commands
from friendgraph.commands._context import AppContext
from friendgraph.config.settings import FriendGraphSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="friendgraph")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-f",
    "--file",
    "network_file",
    default=None,
    type=click.Path(dir_okay=False),
    help="Working network file (default: [network] file).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    network_file: str | None,
) -> None:
    """friendgraph: social network friendships, recommendations, and paths."""
    ctx.ensure_object(dict)
    settings = FriendGraphSettings.from_cli(
        config_path=config_path,
        network_file=network_file,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
