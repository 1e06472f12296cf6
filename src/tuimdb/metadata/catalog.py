# ABOUTME: TUIMDB catalog client: search, detail and image endpoints for movies, series and seasons.
# ABOUTME: Absorbs fetch failures into empty results so the resolver never sees transport errors.

import logging
from typing import Any

from tuimdb.config import CatalogConfig
from tuimdb.metadata.candidate import SearchCandidate
from tuimdb.metadata.http import CatalogFetchError, HttpClient
from tuimdb.metadata.tuimdb_parser import parse_search_results
from tuimdb.metadata.types import PROVIDER_NAME, MediaKind
from tuimdb.metadata.urls import join_url

logger = logging.getLogger(__name__)

# Endpoint path segment per kind. Seasons live under their series.
_KIND_PATHS: dict[MediaKind, str] = {
    MediaKind.MOVIE: "movies",
    MediaKind.SERIES: "series",
}


class TuimdbCatalog:
    """Catalog client backed by the TUIMDB REST API.

    Uses a dependency-injected HttpClient for testability. Each method makes
    at most one request and returns [] or None on any failure.
    """

    def __init__(self, http_client: HttpClient, config: CatalogConfig) -> None:
        self._http = http_client
        self._config = config

    @property
    def name(self) -> str:
        return PROVIDER_NAME

    async def search(
        self,
        kind: MediaKind,
        query: str,
        language: str,
        include_posters: bool = False,
    ) -> list[SearchCandidate]:
        """Search the catalog by title, returning rows in catalog order."""
        path = _KIND_PATHS.get(kind)
        if path is None:
            logger.debug("Search is not supported for %s", kind.value)
            return []

        params: dict[str, Any] = {"queryString": query, "language": language}
        if include_posters:
            params["includePosters"] = True

        data = await self._fetch(self._endpoint(path, "search"), params)
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning("Unexpected %s search response for %r", kind.value, query)
            return []

        posters_url = self._config.posters_url(kind) if include_posters else None
        return parse_search_results(data, kind, posters_url)

    async def get_by_id(
        self, kind: MediaKind, external_id: str, language: str
    ) -> dict[str, Any] | None:
        """Fetch the detail payload for a movie or series."""
        path = _KIND_PATHS.get(kind)
        if path is None:
            logger.debug("Lookup by ID is not supported for %s", kind.value)
            return None
        data = await self._fetch(
            self._endpoint(path, "get"), {"uid": external_id, "language": language}
        )
        return self._as_object(data, f"{kind.value} {external_id}")

    async def get_season(
        self,
        series_id: str,
        season_number: int,
        language: str,
        ordering_id: str | None = None,
    ) -> dict[str, Any] | None:
        """Fetch a season by its series and season number."""
        params = {
            "seriesId": series_id,
            "seasonNumber": season_number,
            "orderId": ordering_id,
            "language": language,
        }
        data = await self._fetch(self._endpoint("series", "season", "get"), params)
        return self._as_object(data, f"season {season_number} of series {series_id}")

    async def get_images(
        self,
        kind: MediaKind,
        external_id: str,
        language: str,
        series_id: str | None = None,
    ) -> dict[str, Any] | None:
        """Fetch the images payload for an entity.

        For seasons, external_id is the season ID and series_id is required.
        """
        if kind is MediaKind.SEASON:
            if not series_id:
                logger.debug("Season images need a series ID")
                return None
            url = self._endpoint("series", "season", "posters")
            params = {"seriesId": series_id, "seasonId": external_id, "language": language}
        else:
            url = self._endpoint(_KIND_PATHS[kind], "images")
            params = {"uid": external_id, "language": language}

        data = await self._fetch(url, params)
        return self._as_object(data, f"{kind.value} {external_id} images")

    def _endpoint(self, *segments: str) -> str:
        # The API expects a trailing slash before the query string.
        return join_url(self._config.api_base_url, *segments) + "/"

    async def _fetch(self, url: str, params: dict[str, Any]) -> Any:
        try:
            return await self._http.get(url, params=params)
        except CatalogFetchError as exc:
            logger.warning("Catalog request failed: %s", exc)
            return None

    @staticmethod
    def _as_object(data: Any, context: str) -> dict[str, Any] | None:
        if data is None:
            return None
        if not isinstance(data, dict) or not data:
            logger.warning("Empty or unexpected response for %s", context)
            return None
        return data
