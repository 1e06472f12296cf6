# ABOUTME: The `tuimdb parse` command for checking how a file or folder name is read.
# ABOUTME: Shows title, year, bracketed provider IDs and the episode-ordering hint.

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tuimdb.metadata.naming import name_from_path, parse_name


@click.command()
@click.argument("name")
def parse(name: str) -> None:
    """Show how NAME (a bare name or a path) is parsed."""
    console = Console()
    bare = name_from_path(name)
    parsed = parse_name(bare)

    table = Table(title=escape(bare), show_header=False, pad_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Title", escape(parsed.title) or "[dim]empty[/dim]")
    table.add_row("Year", str(parsed.year) if parsed.year is not None else "[dim]none[/dim]")
    if parsed.external_ids:
        ids_str = ", ".join(f"{k}={v}" for k, v in parsed.external_ids.items())
        table.add_row("Provider IDs", escape(ids_str))
    else:
        table.add_row("Provider IDs", "[dim]none[/dim]")
    table.add_row("Ordering", escape(parsed.ordering_hint or "") or "[dim]none[/dim]")

    console.print(table)
