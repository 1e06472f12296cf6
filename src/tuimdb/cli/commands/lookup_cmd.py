# ABOUTME: The `tuimdb lookup` command for resolving one movie, series or season.
# ABOUTME: Prints the normalized record, including cast and the selected episode ordering.

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tuimdb.cli.options import id_option, kind_argument, language_option, series_id_option
from tuimdb.cli.session import run_with_resolver
from tuimdb.config import CatalogConfig
from tuimdb.metadata.naming import name_from_path
from tuimdb.metadata.types import DetailRecord, LookupQuery, MediaKind

_CAST_LIMIT = 10


def _record_table(record: DetailRecord) -> Table:
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=16)
    table.add_column("Value", overflow="fold")

    table.add_row("ID", record.external_id)
    table.add_row("Title", escape(record.title) or "[dim]untitled[/dim]")
    if record.release_year is not None:
        table.add_row("Year", str(record.release_year))
    if record.season_number is not None:
        table.add_row("Season", str(record.season_number))
    if record.series_id:
        table.add_row("Series ID", record.series_id)
    if record.overview:
        table.add_row("Overview", escape(record.overview))
    if record.genres:
        table.add_row("Genres", escape(", ".join(record.genres)))
    if record.content_rating:
        table.add_row("Rating", escape(record.content_rating))
    table.add_row("Language", record.result_language or "?")
    if record.original_language:
        table.add_row("Original Lang", record.original_language)
    if record.orders:
        names = ", ".join(f"{o.name} ({o.id})" for o in record.orders)
        table.add_row("Orderings", escape(names))
    if record.ordering_hint:
        table.add_row("Ordering Hint", escape(record.ordering_hint))
    if record.ordering_id is not None:
        table.add_row("Ordering ID", record.ordering_id)
    if record.cast:
        shown = record.cast[:_CAST_LIMIT]
        lines = [f"{p.name} as {p.role}" if p.role else p.name for p in shown]
        if len(record.cast) > len(shown):
            lines.append(f"... and {len(record.cast) - len(shown)} more")
        table.add_row("Cast", escape("\n".join(lines)))
    return table


@click.command("lookup")
@kind_argument
@click.argument("name", required=False, default="")
@id_option
@click.option("-y", "--year", type=int, default=None, help="Release year to narrow the search.")
@language_option
@series_id_option
@click.option("--season", "season_number", type=int, default=None, help="Season number.")
@click.option(
    "--order-id",
    "ordering_id",
    default=None,
    help="Episode-ordering scheme ID of the parent series (seasons only).",
)
@click.pass_obj
def lookup(
    config: CatalogConfig,
    kind: MediaKind,
    name: str,
    known_id: str | None,
    year: int | None,
    language: str,
    series_id: str | None,
    season_number: int | None,
    ordering_id: str | None,
) -> None:
    """Resolve metadata for NAME, or for a known catalog ID."""
    console = Console()
    query = LookupQuery(
        kind=kind,
        name=name_from_path(name),
        known_id=known_id,
        year=year,
        language=language,
        series_id=series_id,
        season_number=season_number,
        ordering_id=ordering_id,
    )
    record = run_with_resolver(config, lambda resolver: resolver.resolve(query))

    if record is None:
        console.print("[yellow]No metadata found.[/yellow]")
        raise SystemExit(1)

    console.print(_record_table(record))
