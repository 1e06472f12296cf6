# ABOUTME: The `tuimdb images` command for listing artwork candidates of an identified item.
# ABOUTME: Images are grouped by type with the primary image of each type first.

import click
from rich.console import Console
from rich.table import Table

from tuimdb.cli.options import id_option, kind_argument, language_option, series_id_option
from tuimdb.cli.session import run_with_resolver
from tuimdb.config import CatalogConfig
from tuimdb.metadata.images import flatten_images
from tuimdb.metadata.types import LookupQuery, MediaKind


@click.command("images")
@kind_argument
@id_option
@language_option
@series_id_option
@click.option("--season-id", default=None, help="Catalog ID of the season (seasons only).")
@click.pass_obj
def images(
    config: CatalogConfig,
    kind: MediaKind,
    known_id: str | None,
    language: str,
    series_id: str | None,
    season_id: str | None,
) -> None:
    """List artwork for a movie, series or season by catalog ID."""
    console = Console()
    query = LookupQuery(
        kind=kind,
        known_id=known_id,
        language=language,
        series_id=series_id,
        season_id=season_id,
    )
    grouped = run_with_resolver(config, lambda resolver: resolver.get_images(query))
    refs = flatten_images(grouped)

    if not refs:
        console.print("[yellow]No images found.[/yellow]")
        return

    table = Table()
    table.add_column("Type", style="bold", width=9)
    table.add_column("Lang", width=5)
    table.add_column("URL", overflow="fold")

    for ref in refs:
        table.add_row(ref.type.value, ref.language, ref.url)

    console.print(table)
    console.print(f"\n[dim]{len(refs)} image(s)[/dim]")
