# ABOUTME: HTTP client abstraction for catalog API calls.
# ABOUTME: Attaches the API key header, decodes JSON, and accepts an injectable transport for testing.

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

from tuimdb.metadata.urls import build_url

logger = logging.getLogger(__name__)

_USER_AGENT = "tuimdb/0.1.0"
_API_KEY_HEADER = "apiKey"


class CatalogFetchError(Exception):
    """Raised when an HTTP request to the catalog fails."""


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP GET operations against the catalog API."""

    async def get(self, url: str, params: dict[str, Any] | None = None) -> Any: ...


class TuimdbHttpClient:
    """Async HTTP client for the catalog API.

    Wraps httpx.AsyncClient. Makes exactly one attempt per call; timeouts
    are httpx's. Task cancellation is not caught and reaches the caller.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"User-Agent": _USER_AGENT}
        if api_key and api_key.strip():
            headers[_API_KEY_HEADER] = api_key.strip()
        client_kwargs: dict[str, Any] = {
            "headers": headers,
            "timeout": timeout,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**client_kwargs)

    async def get(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """Send a GET request and return the decoded JSON body.

        Args:
            url: The endpoint URL.
            params: Optional query parameters; None values are omitted.

        Returns:
            Parsed JSON response body (object or array).

        Raises:
            CatalogFetchError: On parameters that cannot be encoded, transport
                errors, non-2xx statuses or bodies that are not JSON.
        """
        try:
            full_url = build_url(url, params)
        except UnicodeEncodeError as exc:
            raise CatalogFetchError(f"Cannot encode request to {url}: {exc}") from exc
        logger.debug("GET %s", full_url)
        try:
            response = await self._client.get(full_url)
        except httpx.HTTPError as exc:
            raise CatalogFetchError(f"Request failed: {full_url}: {exc}") from exc

        if not response.is_success:
            raise CatalogFetchError(
                f"HTTP {response.status_code} from {full_url}: {response.text[:200]}"
            )

        try:
            return response.json()
        except ValueError as exc:
            raise CatalogFetchError(f"Invalid JSON from {full_url}") from exc

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "TuimdbHttpClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
