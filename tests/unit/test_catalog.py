# ABOUTME: Unit tests for TuimdbCatalog.
# ABOUTME: Uses a FakeHttpClient to test endpoints, parameters, and failure absorption.

import asyncio
import logging
from typing import Any

import pytest

from tuimdb.config import CatalogConfig
from tuimdb.metadata.catalog import TuimdbCatalog
from tuimdb.metadata.http import CatalogFetchError
from tuimdb.metadata.provider import CatalogClient
from tuimdb.metadata.types import MediaKind
from tests.fixtures.tuimdb_responses import (
    MOVIE_IMAGES_RESPONSE,
    MOVIE_RESPONSE,
    SEASON_RESPONSE,
    SERIES_SEARCH_RESPONSE,
)


class FakeHttpClient:
    """Fake HTTP client that returns canned responses based on URL patterns."""

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        self._responses = responses or {}
        self.request_log: list[tuple[str, dict[str, Any]]] = []

    async def get(self, url: str, params: dict[str, Any] | None = None) -> Any:
        self.request_log.append((url, dict(params or {})))
        for pattern, response in self._responses.items():
            if pattern in url:
                if isinstance(response, Exception):
                    raise response
                return response
        return {}


def _catalog(client: FakeHttpClient, config: CatalogConfig) -> TuimdbCatalog:
    return TuimdbCatalog(http_client=client, config=config)


class TestCatalogProtocol:
    """Tests that TuimdbCatalog satisfies CatalogClient."""

    def test_satisfies_protocol(self, config: CatalogConfig) -> None:
        """TuimdbCatalog implements the CatalogClient protocol."""
        assert isinstance(_catalog(FakeHttpClient(), config), CatalogClient)

    def test_name_property(self, config: CatalogConfig) -> None:
        """Catalog name is 'TUIMDB'."""
        assert _catalog(FakeHttpClient(), config).name == "TUIMDB"


class TestSearch:
    """Tests for title search."""

    def test_series_search_endpoint_and_params(self, config: CatalogConfig) -> None:
        """Series search hits /series/search/ with the query and language."""
        client = FakeHttpClient({"/series/search/": SERIES_SEARCH_RESPONSE})
        results = asyncio.run(
            _catalog(client, config).search(MediaKind.SERIES, "Friends (1994)", "de")
        )
        assert [c.external_id for c in results] == ["7", "9"]
        url, params = client.request_log[0]
        assert url == "https://catalog.test/api/series/search/"
        assert params == {"queryString": "Friends (1994)", "language": "de"}
        assert results[0].image_url is None

    def test_include_posters(self, config: CatalogConfig) -> None:
        """Requesting posters adds the flag and builds thumbnails from the posters URL."""
        client = FakeHttpClient({"/series/search/": SERIES_SEARCH_RESPONSE})
        results = asyncio.run(
            _catalog(client, config).search(
                MediaKind.SERIES, "Friends", "en", include_posters=True
            )
        )
        assert client.request_log[0][1]["includePosters"] is True
        assert results[0].image_url == (
            "https://img.test/series/posters/low-res/w400/friends-main.jpg"
        )

    def test_movie_search_endpoint(self, config: CatalogConfig) -> None:
        """Movie search hits /movies/search/."""
        client = FakeHttpClient({"/movies/search/": []})
        asyncio.run(_catalog(client, config).search(MediaKind.MOVIE, "Alien", "en"))
        assert client.request_log[0][0] == "https://catalog.test/api/movies/search/"

    def test_season_search_makes_no_request(self, config: CatalogConfig) -> None:
        """Seasons are not searchable."""
        client = FakeHttpClient()
        results = asyncio.run(_catalog(client, config).search(MediaKind.SEASON, "S1", "en"))
        assert results == []
        assert client.request_log == []

    def test_fetch_error_gives_empty_list(
        self, config: CatalogConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Transport failures are logged and absorbed."""
        client = FakeHttpClient({"/search/": CatalogFetchError("HTTP 503")})
        with caplog.at_level(logging.WARNING, logger="tuimdb"):
            results = asyncio.run(
                _catalog(client, config).search(MediaKind.MOVIE, "Alien", "en")
            )
        assert results == []
        assert "HTTP 503" in caplog.text

    def test_object_response_gives_empty_list(self, config: CatalogConfig) -> None:
        """A search response that is not an array yields nothing."""
        client = FakeHttpClient({"/search/": {"error": "bad key"}})
        results = asyncio.run(_catalog(client, config).search(MediaKind.MOVIE, "Alien", "en"))
        assert results == []


class TestGetById:
    """Tests for detail lookups."""

    def test_movie_detail(self, config: CatalogConfig) -> None:
        """Movie details come from /movies/get/ by uid."""
        client = FakeHttpClient({"/movies/get/": MOVIE_RESPONSE})
        data = asyncio.run(_catalog(client, config).get_by_id(MediaKind.MOVIE, "42", "en"))
        assert data == MOVIE_RESPONSE
        url, params = client.request_log[0]
        assert url == "https://catalog.test/api/movies/get/"
        assert params == {"uid": "42", "language": "en"}

    def test_empty_object_is_none(self, config: CatalogConfig) -> None:
        """An empty object means the entity was not found."""
        client = FakeHttpClient({"/series/get/": {}})
        assert asyncio.run(_catalog(client, config).get_by_id(MediaKind.SERIES, "7", "en")) is None

    def test_fetch_error_is_none(self, config: CatalogConfig) -> None:
        """Transport failures come back as None."""
        client = FakeHttpClient({"/get/": CatalogFetchError("HTTP 500")})
        assert asyncio.run(_catalog(client, config).get_by_id(MediaKind.MOVIE, "42", "en")) is None

    def test_season_kind_not_supported(self, config: CatalogConfig) -> None:
        """Seasons are fetched with get_season, not get_by_id."""
        client = FakeHttpClient()
        assert asyncio.run(_catalog(client, config).get_by_id(MediaKind.SEASON, "1", "en")) is None
        assert client.request_log == []


class TestGetSeason:
    """Tests for season lookups."""

    def test_season_params(self, config: CatalogConfig) -> None:
        """Season lookups send series, number, ordering and language."""
        client = FakeHttpClient({"/series/season/get/": SEASON_RESPONSE})
        data = asyncio.run(_catalog(client, config).get_season("7", 2, "en", "12"))
        assert data == SEASON_RESPONSE
        url, params = client.request_log[0]
        assert url == "https://catalog.test/api/series/season/get/"
        assert params == {"seriesId": "7", "seasonNumber": 2, "orderId": "12", "language": "en"}


class TestGetImages:
    """Tests for image payload lookups."""

    def test_movie_images(self, config: CatalogConfig) -> None:
        """Movie images come from /movies/images/ by uid."""
        client = FakeHttpClient({"/movies/images/": MOVIE_IMAGES_RESPONSE})
        data = asyncio.run(_catalog(client, config).get_images(MediaKind.MOVIE, "42", "en"))
        assert data == MOVIE_IMAGES_RESPONSE
        assert client.request_log[0] == (
            "https://catalog.test/api/movies/images/",
            {"uid": "42", "language": "en"},
        )

    def test_season_images(self, config: CatalogConfig) -> None:
        """Season posters are addressed by series and season ID."""
        client = FakeHttpClient({"/series/season/posters/": {"Posters": []}})
        asyncio.run(
            _catalog(client, config).get_images(MediaKind.SEASON, "501", "en", series_id="7")
        )
        url, params = client.request_log[0]
        assert url == "https://catalog.test/api/series/season/posters/"
        assert params == {"seriesId": "7", "seasonId": "501", "language": "en"}

    def test_season_images_need_series(self, config: CatalogConfig) -> None:
        """Without a series ID no season image request is made."""
        client = FakeHttpClient()
        data = asyncio.run(_catalog(client, config).get_images(MediaKind.SEASON, "501", "en"))
        assert data is None
        assert client.request_log == []

    def test_fetch_error_is_none(
        self, config: CatalogConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Failed image requests are logged and absorbed."""
        client = FakeHttpClient({"/images/": CatalogFetchError("timed out")})
        with caplog.at_level(logging.WARNING, logger="tuimdb"):
            data = asyncio.run(_catalog(client, config).get_images(MediaKind.SERIES, "7", "en"))
        assert data is None
        assert "timed out" in caplog.text
