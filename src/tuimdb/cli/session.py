# ABOUTME: Builds the catalog stack (HTTP client, catalog, resolver) for one CLI invocation.
# ABOUTME: Commands run their coroutine through run_with_resolver, which closes the client afterwards.

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from tuimdb.config import CatalogConfig
from tuimdb.metadata.catalog import TuimdbCatalog
from tuimdb.metadata.http import TuimdbHttpClient
from tuimdb.metadata.resolver import MetadataResolver

T = TypeVar("T")


def _create_http_client(config: CatalogConfig) -> TuimdbHttpClient:
    """Create the default HTTP client for the configured catalog."""
    return TuimdbHttpClient(api_key=config.api_key)


def run_with_resolver(
    config: CatalogConfig, action: Callable[[MetadataResolver], Awaitable[T]]
) -> T:
    """Run an async resolver action to completion on a fresh event loop."""

    async def _run() -> T:
        async with _create_http_client(config) as http_client:
            resolver = MetadataResolver(TuimdbCatalog(http_client, config), config)
            return await action(resolver)

    return asyncio.run(_run())
