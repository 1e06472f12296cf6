# ABOUTME: Picks which of a series' episode-ordering schemes applies.
# ABOUTME: A name hint from the folder name wins; otherwise the catalog's first scheme.

from collections.abc import Sequence

from tuimdb.metadata.types import EpisodeOrder


def select_ordering(schemes: Sequence[EpisodeOrder], hint: str | None = None) -> str | None:
    """Return the ID of the ordering scheme to use for a series.

    The hint is compared to scheme names exactly (case-sensitive). With no
    hint, or no scheme matching it, the first scheme is the fallback.
    Returns None only when the series defines no schemes.
    """
    if not schemes:
        return None
    if hint is not None:
        for scheme in schemes:
            if scheme.name == hint:
                return scheme.id
    return schemes[0].id
