# ABOUTME: Shared pytest fixtures for tuimdb tests.
# ABOUTME: Provides a test configuration and resets the package logger between tests.

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from tuimdb.config import CatalogConfig


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def config() -> CatalogConfig:
    """A catalog configuration pointing at a fake host."""
    return CatalogConfig(
        api_base_url="https://catalog.test/api",
        movie_posters_url="https://img.test/movies/posters",
        movie_backdrops_url="https://img.test/movies/backdrops",
        movie_logos_url="https://img.test/movies/logos",
        series_posters_url="https://img.test/series/posters",
        series_backdrops_url="https://img.test/series/backdrops",
        series_logos_url="https://img.test/series/logos",
        season_posters_url="https://img.test/seasons/posters",
        person_images_url="https://img.test/persons",
    )


@pytest.fixture(autouse=True)
def _reset_tuimdb_logger() -> Iterator[None]:
    """Undo handlers and levels installed by the CLI's logging setup."""
    yield
    logger = logging.getLogger("tuimdb")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
