# ABOUTME: Core data structures for catalog lookups and their normalized results.
# ABOUTME: ParsedName, LookupQuery and DetailRecord flow through the resolution pipeline.

from collections.abc import Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field
from enum import Enum

DEFAULT_LANGUAGE = "en"

# Provider ID keys exposed to the host application.
PROVIDER_NAME = "TUIMDB"
EPISODE_ORDER_KEY = "TUIMDB_EpisodeOrder"
EPISODE_ORDER_UID_KEY = "TUIMDB_EpisodeOrderUid"


class MediaKind(str, Enum):
    """The kinds of catalog entity the resolver can look up."""

    MOVIE = "movie"
    SERIES = "series"
    SEASON = "season"


class ImageType(str, Enum):
    """Artwork slots an entity can fill."""

    PRIMARY = "Primary"
    BACKDROP = "Backdrop"
    LOGO = "Logo"


class ProviderIds(MutableMapping[str, str]):
    """String mapping with case-insensitive keys.

    The first spelling of a key is kept for display; later writes under any
    casing replace the value only.
    """

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        self._store: dict[str, tuple[str, str]] = {}
        if data:
            self.update(data)

    def __setitem__(self, key: str, value: str) -> None:
        folded = key.casefold()
        existing = self._store.get(folded)
        self._store[folded] = (existing[0] if existing else key, value)

    def __getitem__(self, key: str) -> str:
        return self._store[key.casefold()][1]

    def __delitem__(self, key: str) -> None:
        del self._store[key.casefold()]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return {k.casefold(): v for k, v in self.items()} == {
            str(k).casefold(): v for k, v in other.items()
        }

    def __repr__(self) -> str:
        return f"ProviderIds({dict(self.items())!r})"


@dataclass
class ParsedName:
    """Structured identity extracted from an on-disk name.

    Produced by parse_name; the bracket groups that fed year, external_ids
    and ordering_hint have already been removed from title.
    """

    title: str
    year: int | None = None
    external_ids: ProviderIds = field(default_factory=ProviderIds)
    ordering_hint: str | None = None


@dataclass
class LookupQuery:
    """One resolution attempt against the catalog.

    name is the bare on-disk name (no directory, no extension). Season
    lookups identify their parent through series_id, and either
    season_number (metadata) or season_id (images).
    """

    kind: MediaKind
    name: str = ""
    known_id: str | None = None
    year: int | None = None
    language: str = DEFAULT_LANGUAGE
    series_id: str | None = None
    season_id: str | None = None
    season_number: int | None = None
    ordering_id: str | None = None

    def __post_init__(self) -> None:
        if not self.language:
            self.language = DEFAULT_LANGUAGE


@dataclass
class Person:
    """A cast member attached to a movie record."""

    name: str
    role: str | None = None
    sort_order: int | None = None
    image_url: str | None = None


@dataclass
class EpisodeOrder:
    """A named episode-ordering scheme defined for a series."""

    id: str
    name: str


@dataclass
class DetailRecord:
    """A fully resolved movie, series or season.

    Fields that only apply to one kind stay at their empty defaults for the
    others: content_rating and cast for movies, orders and the ordering pair
    for series, season_number and series_id for seasons.
    """

    kind: MediaKind
    external_id: str
    title: str
    overview: str | None = None
    release_year: int | None = None
    original_language: str | None = None
    result_language: str | None = None
    genres: list[str] = field(default_factory=list)
    content_rating: str | None = None
    cast: list[Person] = field(default_factory=list)
    orders: list[EpisodeOrder] = field(default_factory=list)
    ordering_hint: str | None = None
    ordering_id: str | None = None
    season_number: int | None = None
    series_id: str | None = None

    @property
    def provider_ids(self) -> dict[str, str]:
        """Identifier map handed back to the host application."""
        ids = {PROVIDER_NAME: self.external_id}
        if self.ordering_hint and self.ordering_hint.strip():
            ids[EPISODE_ORDER_KEY] = self.ordering_hint
        if self.ordering_id is not None:
            ids[EPISODE_ORDER_UID_KEY] = self.ordering_id
        return ids


@dataclass(frozen=True)
class ImageRef:
    """A remote image candidate for one artwork slot."""

    url: str
    type: ImageType
    language: str
