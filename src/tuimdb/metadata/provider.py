# ABOUTME: CatalogClient protocol defining the contract the resolver consumes.
# ABOUTME: Implementations absorb transport failures and return empty results instead of raising.

from typing import Any, Protocol, runtime_checkable

from tuimdb.metadata.candidate import SearchCandidate
from tuimdb.metadata.types import MediaKind


@runtime_checkable
class CatalogClient(Protocol):
    """Protocol for metadata catalog access.

    Every method returns an empty list or None when the catalog is
    unreachable, answers with an error, or has nothing to offer.
    Cancellation of the awaiting task is the one failure that propagates.
    """

    @property
    def name(self) -> str: ...

    async def search(
        self,
        kind: MediaKind,
        query: str,
        language: str,
        include_posters: bool = False,
    ) -> list[SearchCandidate]: ...

    async def get_by_id(
        self, kind: MediaKind, external_id: str, language: str
    ) -> dict[str, Any] | None: ...

    async def get_season(
        self,
        series_id: str,
        season_number: int,
        language: str,
        ordering_id: str | None = None,
    ) -> dict[str, Any] | None: ...

    async def get_images(
        self,
        kind: MediaKind,
        external_id: str,
        language: str,
        series_id: str | None = None,
    ) -> dict[str, Any] | None: ...
