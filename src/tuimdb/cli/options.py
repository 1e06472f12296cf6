# ABOUTME: Shared Click arguments and options for tuimdb CLI commands.
# ABOUTME: Provides reusable decorators for the media kind, language and catalog IDs.

import click

from tuimdb.metadata.types import DEFAULT_LANGUAGE, MediaKind

kind_argument = click.argument(
    "kind",
    type=click.Choice([kind.value for kind in MediaKind]),
    callback=lambda _ctx, _param, value: MediaKind(value),
)

language_option = click.option(
    "-l",
    "--language",
    default=DEFAULT_LANGUAGE,
    show_default=True,
    help="Preferred metadata language code.",
)

id_option = click.option(
    "--id",
    "known_id",
    default=None,
    help="Catalog ID of the movie or series; skips the title search.",
)

series_id_option = click.option(
    "--series-id",
    default=None,
    help="Catalog ID of the parent series (seasons only).",
)
