# ABOUTME: URL helpers for catalog endpoints and image locations.
# ABOUTME: Handles separator joining and percent-encoding of path segments and query values.

from collections.abc import Mapping
from urllib.parse import quote, urlencode


def join_url(base: str, *segments: str) -> str:
    """Join a base URL and path segments with exactly one "/" between each.

    Segments are percent-encoded, so filenames with spaces or "#" stay
    intact; "/" inside a segment is kept as a separator. Surrogate-escaped
    bytes from undecodable file names are encoded as the original bytes.
    """
    parts = [base.rstrip("/")]
    for segment in segments:
        cleaned = segment.strip("/")
        if cleaned:
            parts.append(quote(cleaned, safe="/", errors="surrogateescape"))
    return "/".join(parts)


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_url(url: str, params: Mapping[str, object | None] | None = None) -> str:
    """Append percent-encoded query parameters to a URL.

    None values are dropped; booleans become "true"/"false". Spaces are
    encoded as %20 rather than "+". Surrogate-escaped bytes are encoded as
    the original bytes.
    """
    if not params:
        return url
    query = {key: _format_value(value) for key, value in params.items() if value is not None}
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    encoded = urlencode(query, quote_via=quote, errors="surrogateescape")
    return f"{url}{separator}{encoded}"
