# ABOUTME: SearchCandidate holds one row of a catalog search response.
# ABOUTME: The resolver picks among these; the CLI lists them for the user.

from dataclasses import dataclass

from tuimdb.metadata.types import MediaKind


@dataclass
class SearchCandidate:
    """A catalog entry returned by a title search.

    match_score is the catalog's own relevance number. It is carried for
    display only; candidate order is the order the catalog returned.
    """

    kind: MediaKind
    external_id: str
    title: str
    release_year: int | None = None
    match_score: int = 0
    image_url: str | None = None

    def __post_init__(self) -> None:
        if not self.external_id:
            msg = f"external_id must be non-empty for {self.title!r}"
            raise ValueError(msg)
