# ABOUTME: CLI package for tuimdb, built on Click.
# ABOUTME: Defines the root command group, loads configuration once and registers subcommands.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from tuimdb.cli.commands import images_cmd, lookup_cmd, parse_cmd, search_cmd
from tuimdb.config import DEFAULT_CONFIG_PATH, ConfigError, load_config
from tuimdb.log import configure_logging


@click.group()
@click.version_option(package_name="tuimdb")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help=f"Path to config file (default: {DEFAULT_CONFIG_PATH})",
)
@click.option(
    "--api-key",
    envvar="TUIMDB_API_KEY",
    default=None,
    help="Catalog API key; overrides the config file.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log resolution steps.")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, api_key: str | None, verbose: bool) -> None:
    """tuimdb - resolve media library items against the TUIMDB catalog."""
    configure_logging(verbose)
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        Console().print(f"[red]Config error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc
    ctx.obj = config.with_api_key(api_key)


cli.add_command(parse_cmd.parse)
cli.add_command(search_cmd.search)
cli.add_command(lookup_cmd.lookup)
cli.add_command(images_cmd.images)
