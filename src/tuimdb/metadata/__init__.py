# ABOUTME: Metadata package for catalog lookups, name parsing and result normalization.
# ABOUTME: Exports the domain types and pure helpers; the catalog client and resolver live in submodules.

from tuimdb.metadata.candidate import SearchCandidate
from tuimdb.metadata.images import aggregate_images, flatten_images
from tuimdb.metadata.naming import name_from_path, parse_name
from tuimdb.metadata.ordering import select_ordering
from tuimdb.metadata.provider import CatalogClient
from tuimdb.metadata.types import (
    DetailRecord,
    EpisodeOrder,
    ImageRef,
    ImageType,
    LookupQuery,
    MediaKind,
    ParsedName,
    Person,
    ProviderIds,
)

__all__ = [
    "CatalogClient",
    "DetailRecord",
    "EpisodeOrder",
    "ImageRef",
    "ImageType",
    "LookupQuery",
    "MediaKind",
    "ParsedName",
    "Person",
    "ProviderIds",
    "SearchCandidate",
    "aggregate_images",
    "flatten_images",
    "name_from_path",
    "parse_name",
    "select_ordering",
]
