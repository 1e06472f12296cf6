# ABOUTME: MetadataResolver turns a LookupQuery into a normalized DetailRecord or image set.
# ABOUTME: Uses a known ID when there is one, otherwise searches and takes the catalog's first hit.

import logging

from tuimdb.config import CatalogConfig
from tuimdb.metadata.candidate import SearchCandidate
from tuimdb.metadata.images import aggregate_images
from tuimdb.metadata.naming import parse_name
from tuimdb.metadata.ordering import select_ordering
from tuimdb.metadata.provider import CatalogClient
from tuimdb.metadata.tuimdb_parser import parse_movie, parse_season, parse_series
from tuimdb.metadata.types import (
    DetailRecord,
    ImageRef,
    ImageType,
    LookupQuery,
    MediaKind,
    ParsedName,
)

logger = logging.getLogger(__name__)

# Keys under which a catalog ID may appear in a bracketed name tag, e.g. "[tuimdbid=42]".
_ID_TAGS = ("tuimdb", "tuimdbid")


def build_search_string(title: str, year: int | None) -> str:
    """Format the catalog query: "Title (Year)" when the year is known."""
    return f"{title} ({year})" if year is not None else title


class MetadataResolver:
    """Resolves movies, series and seasons against a catalog.

    Each call runs its catalog requests one after another (search, then
    detail) and keeps no state between calls. Failures of any kind come
    back as None, [] or {}; only task cancellation propagates.
    """

    def __init__(self, catalog: CatalogClient, config: CatalogConfig) -> None:
        self._catalog = catalog
        self._config = config

    async def search(self, query: LookupQuery) -> list[SearchCandidate]:
        """List catalog candidates for a name, with thumbnails, in catalog order.

        Seasons cannot be searched and always give an empty list.
        """
        if query.kind is MediaKind.SEASON:
            return []

        parsed = parse_name(query.name)
        if not parsed.title:
            logger.debug("Nothing to search for: empty %s name", query.kind.value)
            return []

        search_string = build_search_string(parsed.title, _query_year(query, parsed))
        logger.debug("Searching %s: %r", query.kind.value, search_string)
        return await self._catalog.search(
            query.kind, search_string, query.language, include_posters=True
        )

    async def resolve(self, query: LookupQuery) -> DetailRecord | None:
        """Resolve a query of any kind to its detail record."""
        if query.kind is MediaKind.MOVIE:
            return await self.resolve_movie(query)
        if query.kind is MediaKind.SERIES:
            return await self.resolve_series(query)
        return await self.resolve_season(query)

    async def resolve_movie(self, query: LookupQuery) -> DetailRecord | None:
        parsed = parse_name(query.name)
        movie_id = await self._acquire_id(query, parsed)
        if movie_id is None:
            return None

        data = await self._catalog.get_by_id(MediaKind.MOVIE, movie_id, query.language)
        if data is None:
            logger.debug("No movie details for ID %s", movie_id)
            return None

        record = parse_movie(data, self._config.person_images_url)
        record.external_id = record.external_id or movie_id
        return record

    async def resolve_series(self, query: LookupQuery) -> DetailRecord | None:
        """Resolve a series and settle which episode ordering applies.

        The ordering hint comes from a "{...}" group in the name. It is kept
        on the record even when no scheme carries that name, in which case
        the first scheme's ID is used.
        """
        parsed = parse_name(query.name)
        series_id = await self._acquire_id(query, parsed)
        if series_id is None:
            return None

        data = await self._catalog.get_by_id(MediaKind.SERIES, series_id, query.language)
        if data is None:
            logger.debug("No series details for ID %s", series_id)
            return None

        record = parse_series(data)
        record.external_id = record.external_id or series_id
        record.ordering_hint = parsed.ordering_hint
        record.ordering_id = select_ordering(record.orders, parsed.ordering_hint)
        logger.debug(
            "Series %s ordering: hint=%r, selected=%s",
            record.external_id,
            record.ordering_hint,
            record.ordering_id,
        )
        return record

    async def resolve_season(self, query: LookupQuery) -> DetailRecord | None:
        """Resolve a season from its series ID and season number.

        Both are required; without them nothing is requested.
        """
        if not query.series_id:
            logger.debug("Season lookup skipped: no series ID")
            return None
        if query.season_number is None:
            logger.debug("Season lookup skipped: no season number")
            return None

        data = await self._catalog.get_season(
            query.series_id, query.season_number, query.language, query.ordering_id
        )
        if data is None:
            logger.debug(
                "No season %d details for series %s", query.season_number, query.series_id
            )
            return None

        record = parse_season(data)
        record.series_id = record.series_id or query.series_id
        if record.season_number is None:
            record.season_number = query.season_number
        return record

    async def get_images(self, query: LookupQuery) -> dict[ImageType, list[ImageRef]]:
        """List candidate artwork per image type for an already identified item.

        Movies and series need their catalog ID; seasons need the series ID
        and the season ID. Nothing is searched here.
        """
        if query.kind is MediaKind.SEASON:
            entity_id = query.season_id
            if not query.series_id or not entity_id:
                logger.debug("Season images skipped: series and season IDs are required")
                return {}
        else:
            entity_id = query.known_id or _tagged_id(parse_name(query.name))
            if not entity_id:
                logger.debug("%s images skipped: no catalog ID", query.kind.value)
                return {}

        payload = await self._catalog.get_images(
            query.kind, entity_id, query.language, series_id=query.series_id
        )
        if payload is None:
            return {}
        return aggregate_images(payload, self._config.image_base_urls(query.kind), query.language)

    async def _acquire_id(self, query: LookupQuery, parsed: ParsedName) -> str | None:
        """Return the catalog ID to fetch: a trusted one, or the first search hit."""
        known = query.known_id or _tagged_id(parsed)
        if known:
            return known

        if not parsed.title:
            logger.debug("Lookup skipped: empty %s name", query.kind.value)
            return None

        search_string = build_search_string(parsed.title, _query_year(query, parsed))
        logger.debug("Searching %s: %r", query.kind.value, search_string)
        candidates = await self._catalog.search(query.kind, search_string, query.language)
        if not candidates:
            logger.debug("No %s results for %r", query.kind.value, search_string)
            return None

        # Catalog order is trusted as relevance order; match scores are not compared.
        best = candidates[0]
        logger.debug("Selected %r (%s)", best.title, best.external_id)
        return best.external_id


def _tagged_id(parsed: ParsedName) -> str | None:
    for key in _ID_TAGS:
        value = parsed.external_ids.get(key)
        if value:
            return value
    return None


def _query_year(query: LookupQuery, parsed: ParsedName) -> int | None:
    return query.year if query.year is not None else parsed.year
