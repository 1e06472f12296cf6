# ABOUTME: Catalog configuration: API base URL, per-image-type base URLs and the API key.
# ABOUTME: Loaded once from TOML and passed explicitly to the catalog client and resolver.

import logging
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from tuimdb.metadata.types import ImageType, MediaKind

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".tuimdb" / "config.toml"


class ConfigError(ValueError):
    """Raised when the configuration file is malformed or fails validation."""


@dataclass(frozen=True)
class CatalogConfig:
    """Where the catalog lives and how to reach it."""

    api_base_url: str = "https://tuimdb.com/api"
    api_key: str | None = None
    movie_posters_url: str = "https://tuimdb.com/movies/posters"
    movie_backdrops_url: str = "https://tuimdb.com/movies/backdrops"
    movie_logos_url: str = "https://tuimdb.com/movies/logos"
    series_posters_url: str = "https://tuimdb.com/series/posters"
    series_backdrops_url: str = "https://tuimdb.com/series/backdrops"
    series_logos_url: str = "https://tuimdb.com/series/logos"
    season_posters_url: str = "https://tuimdb.com/seasons/posters"
    person_images_url: str = "https://tuimdb.com/persons/images"

    def image_base_urls(self, kind: MediaKind) -> dict[ImageType, str]:
        """Base URL per image type the given kind supports."""
        if kind is MediaKind.MOVIE:
            return {
                ImageType.PRIMARY: self.movie_posters_url,
                ImageType.BACKDROP: self.movie_backdrops_url,
                ImageType.LOGO: self.movie_logos_url,
            }
        if kind is MediaKind.SERIES:
            return {
                ImageType.PRIMARY: self.series_posters_url,
                ImageType.BACKDROP: self.series_backdrops_url,
                ImageType.LOGO: self.series_logos_url,
            }
        return {ImageType.PRIMARY: self.season_posters_url}

    def posters_url(self, kind: MediaKind) -> str:
        return self.image_base_urls(kind)[ImageType.PRIMARY]

    def with_api_key(self, api_key: str | None) -> "CatalogConfig":
        """Return a copy with the API key replaced, when one is given."""
        if not api_key:
            return self
        return replace(self, api_key=api_key)


_FIELD_NAMES = frozenset(f.name for f in fields(CatalogConfig))


def _validate_section(section: Any) -> dict[str, str | None]:
    if not isinstance(section, dict):
        raise ConfigError("[catalog] must be a table")

    unknown = sorted(set(section) - _FIELD_NAMES)
    if unknown:
        raise ConfigError(f"Unknown [catalog] keys: {', '.join(unknown)}")

    values: dict[str, str | None] = {}
    for key, value in section.items():
        if not isinstance(value, str):
            raise ConfigError(f"catalog.{key} must be a string")
        stripped = value.strip()
        if key == "api_key":
            values[key] = stripped or None
            continue
        if not stripped:
            raise ConfigError(f"catalog.{key} must not be empty")
        values[key] = stripped.rstrip("/")
    return values


def load_config(path: Path | None = None) -> CatalogConfig:
    """Load catalog settings from a TOML file.

    The file holds a single [catalog] table whose keys mirror CatalogConfig
    fields. A missing file means all defaults.

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values.
    """
    config_path = path or DEFAULT_CONFIG_PATH
    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return CatalogConfig()

    try:
        with config_path.open("rb") as handle:
            raw = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Cannot read config {config_path}: {exc}") from exc

    values = _validate_section(raw.get("catalog", {}))
    return CatalogConfig(**values)
