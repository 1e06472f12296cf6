# ABOUTME: The `tuimdb search` command for listing catalog candidates for a title.
# ABOUTME: Candidates are shown in catalog order, which is the order lookup picks from.

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tuimdb.cli.options import kind_argument, language_option
from tuimdb.cli.session import run_with_resolver
from tuimdb.config import CatalogConfig
from tuimdb.metadata.naming import name_from_path
from tuimdb.metadata.types import LookupQuery, MediaKind


@click.command("search")
@kind_argument
@click.argument("name")
@click.option("-y", "--year", type=int, default=None, help="Release year to narrow the search.")
@language_option
@click.pass_obj
def search(
    config: CatalogConfig, kind: MediaKind, name: str, year: int | None, language: str
) -> None:
    """Search the catalog for movies or series matching NAME."""
    console = Console()
    if kind is MediaKind.SEASON:
        console.print("[yellow]Seasons cannot be searched; use lookup with --series-id.[/yellow]")
        return

    query = LookupQuery(kind=kind, name=name_from_path(name), year=year, language=language)
    results = run_with_resolver(config, lambda resolver: resolver.search(query))

    if not results:
        console.print("[yellow]No results found.[/yellow]")
        return

    table = Table()
    table.add_column("#", style="bold", width=3)
    table.add_column("ID", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Year", width=6)
    table.add_column("Score", justify="right")

    for i, candidate in enumerate(results, start=1):
        table.add_row(
            str(i),
            candidate.external_id,
            escape(candidate.title) or "[dim]untitled[/dim]",
            str(candidate.release_year) if candidate.release_year is not None else "?",
            str(candidate.match_score),
        )

    console.print(table)
    console.print(f"\n[dim]{len(results)} result(s)[/dim]")
