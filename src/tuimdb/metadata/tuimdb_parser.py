# ABOUTME: Parsing functions for TUIMDB API JSON responses.
# ABOUTME: Converts catalog payloads into SearchCandidate and DetailRecord instances.

import re
from typing import Any

from tuimdb.metadata.candidate import SearchCandidate
from tuimdb.metadata.types import DetailRecord, EpisodeOrder, MediaKind, Person
from tuimdb.metadata.urls import join_url

_THUMBNAIL_PATH = "low-res/w400"

_INT_RE = re.compile(r"-?\d+", re.ASCII)


def _text(data: dict[str, Any], key: str) -> str | None:
    """Return a stripped string field, or None when missing or blank."""
    value = data.get(key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _int(data: dict[str, Any], key: str) -> int | None:
    value = data.get(key)
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_RE.fullmatch(value.strip()):
        return int(value)
    return None


def _id(value: Any) -> str | None:
    """Catalog IDs are integers on the wire; the engine keeps them as opaque strings."""
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    return text or None


def _uid(data: dict[str, Any]) -> str | None:
    return _id(data.get("UID"))


def _entries(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _image_name(value: Any) -> str | None:
    if not isinstance(value, dict):
        return None
    return _text(value, "Name")


def parse_genres(data: dict[str, Any]) -> list[str]:
    """Flatten the nested Genres list into unique names, in catalog order."""
    genres: list[str] = []
    for entry in _entries(data.get("Genres")):
        name = _text(entry, "Name")
        if name and name not in genres:
            genres.append(name)
    return genres


def parse_cast(data: dict[str, Any], person_images_url: str) -> list[Person]:
    """Map cast entries to Person records ordered by their Order field.

    The sort is stable, so equal Order values keep response order. Entries
    without an Order go last.
    """
    people: list[Person] = []
    for entry in _entries(data.get("Cast")):
        name = _text(entry, "Name")
        if not name:
            continue
        image = _image_name(entry.get("Primary Image"))
        people.append(
            Person(
                name=name,
                role=_text(entry, "Character"),
                sort_order=_int(entry, "Order"),
                image_url=join_url(person_images_url, image) if image else None,
            )
        )
    people.sort(key=lambda p: (p.sort_order is None, p.sort_order or 0))
    return people


def parse_orders(data: dict[str, Any]) -> list[EpisodeOrder]:
    """Read a series' episode-ordering schemes in catalog order."""
    orders: list[EpisodeOrder] = []
    for entry in _entries(data.get("Order")):
        uid = _uid(entry)
        if uid is None:
            continue
        orders.append(EpisodeOrder(id=uid, name=_text(entry, "Name") or ""))
    return orders


def parse_search_results(
    data: Any, kind: MediaKind, posters_url: str | None = None
) -> list[SearchCandidate]:
    """Parse a search response (a JSON array) into candidates.

    Response order is preserved. Rows without a UID are dropped. When
    posters_url is given, rows with a Primary Poster get a thumbnail URL.
    """
    results: list[SearchCandidate] = []
    for row in _entries(data):
        uid = _uid(row)
        if uid is None:
            continue

        image_url = None
        poster = _image_name(row.get("Primary Poster"))
        if posters_url and poster:
            image_url = join_url(posters_url, _THUMBNAIL_PATH, poster)

        results.append(
            SearchCandidate(
                kind=kind,
                external_id=uid,
                title=_text(row, "Title") or "",
                release_year=_int(row, "Release Year"),
                match_score=_int(row, "Match Score") or 0,
                image_url=image_url,
            )
        )
    return results


def parse_movie(data: dict[str, Any], person_images_url: str) -> DetailRecord:
    """Parse a movie detail response into a DetailRecord with genres and cast."""
    return DetailRecord(
        kind=MediaKind.MOVIE,
        external_id=_uid(data) or "",
        title=_text(data, "Title") or "",
        overview=_text(data, "Overview"),
        release_year=_int(data, "Release Year"),
        original_language=_text(data, "Original Language"),
        result_language=_text(data, "Language Code"),
        genres=parse_genres(data),
        content_rating=_text(data, "Content Rating"),
        cast=parse_cast(data, person_images_url),
    )


def parse_series(data: dict[str, Any]) -> DetailRecord:
    """Parse a series detail response into a DetailRecord with its ordering schemes.

    The ordering pair (hint and selected ID) is left for the resolver.
    """
    return DetailRecord(
        kind=MediaKind.SERIES,
        external_id=_uid(data) or "",
        title=_text(data, "Title") or "",
        overview=_text(data, "Overview"),
        release_year=_int(data, "Release Year"),
        original_language=_text(data, "Original Language"),
        result_language=_text(data, "Language Code"),
        genres=parse_genres(data),
        orders=parse_orders(data),
    )


def parse_season(data: dict[str, Any]) -> DetailRecord:
    """Parse a season detail response into a DetailRecord."""
    return DetailRecord(
        kind=MediaKind.SEASON,
        external_id=_uid(data) or "",
        title=_text(data, "Name") or "",
        overview=_text(data, "Overview"),
        result_language=_text(data, "Language Code"),
        ordering_id=_id(data.get("Order ID")),
        season_number=_int(data, "Season Number"),
        series_id=_id(data.get("Series ID")),
    )
