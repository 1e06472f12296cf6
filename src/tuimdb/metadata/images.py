# ABOUTME: Turns a catalog images payload into ordered ImageRef lists per artwork slot.
# ABOUTME: The primary image of each slot leads, followed by the slot's collection in payload order.

from collections.abc import Mapping
from typing import Any

from tuimdb.metadata.types import ImageRef, ImageType, MediaKind
from tuimdb.metadata.urls import join_url

# Payload keys per image type: (primary entry, collection).
_IMAGE_FIELDS: dict[ImageType, tuple[str, str]] = {
    ImageType.PRIMARY: ("Primary Poster", "Posters"),
    ImageType.BACKDROP: ("Primary Backdrop", "Backdrops"),
    ImageType.LOGO: ("Primary Logo", "Logos"),
}

SUPPORTED_IMAGE_TYPES: dict[MediaKind, tuple[ImageType, ...]] = {
    MediaKind.MOVIE: (ImageType.PRIMARY, ImageType.BACKDROP, ImageType.LOGO),
    MediaKind.SERIES: (ImageType.PRIMARY, ImageType.BACKDROP, ImageType.LOGO),
    MediaKind.SEASON: (ImageType.PRIMARY,),
}


def _image_name(entry: Any) -> str | None:
    if not isinstance(entry, dict):
        return None
    name = entry.get("Name")
    if isinstance(name, str) and name.strip():
        return name.strip()
    return None


def aggregate_images(
    payload: Mapping[str, Any],
    base_urls: Mapping[ImageType, str],
    language: str,
) -> dict[ImageType, list[ImageRef]]:
    """Build the candidate image list for each type in base_urls.

    The primary entry, when present, comes first even if the collection
    repeats it. Collection entries follow in payload order with no
    de-duplication or re-sorting. Entries without a filename are skipped.
    Every ref is tagged with the caller's language, not the per-image
    language the catalog reports.
    """
    images: dict[ImageType, list[ImageRef]] = {}
    for image_type, base_url in base_urls.items():
        primary_key, collection_key = _IMAGE_FIELDS[image_type]
        names: list[str] = []

        primary = _image_name(payload.get(primary_key))
        if primary:
            names.append(primary)

        collection = payload.get(collection_key) or []
        if isinstance(collection, list):
            for entry in collection:
                name = _image_name(entry)
                if name:
                    names.append(name)

        images[image_type] = [
            ImageRef(url=join_url(base_url, name), type=image_type, language=language)
            for name in names
        ]
    return images


def flatten_images(images: Mapping[ImageType, list[ImageRef]]) -> list[ImageRef]:
    """Concatenate per-type image lists in type order, as hosts expect a flat list."""
    flat: list[ImageRef] = []
    for image_type in ImageType:
        flat.extend(images.get(image_type, []))
    return flat
