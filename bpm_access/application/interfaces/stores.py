"""Store capability contracts (ports).

Both backing stores implement Store; repositories hold one reference of
each family and pick the target per call. Implementations report failures
through StoreResult.status instead of raising.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from bpm_access.application.dtos.search import (
        LookupSpec,
        SearchOptions,
        StoreResult,
    )
    from bpm_access.domain.enums import StoreFamily


class Store(Protocol):
    """Capability shared by every backing store."""

    family: StoreFamily

    async def search(
        self, storage_id: str, options: SearchOptions, *args: Any, **kwargs: Any
    ) -> StoreResult:
        """Return items of storage_id matching options."""

    async def aclose(self) -> None:
        """Release connections held by the store client."""


class DocumentStore(Store, Protocol):
    """Document store: system of record for roles and permissions."""

    async def search(
        self,
        storage_id: str,
        options: SearchOptions,
        lookups: list[LookupSpec] | None = None,
    ) -> StoreResult:
        """Return matching items with lookups applied; total_count is the unpaged count."""

    async def get(
        self,
        storage_id: str,
        item_id: str,
        lookups: list[LookupSpec] | None = None,
    ) -> StoreResult:
        """Return the item with id item_id (body None when absent)."""

    async def create(self, storage_id: str, payload: dict[str, Any]) -> StoreResult:
        """Insert one item; body is the stored item including its _id."""

    async def update(
        self, storage_id: str, item_id: str, payload: dict[str, Any]
    ) -> StoreResult:
        """Apply a partial update; body is the updated item."""

    async def delete(self, storage_id: str, item_id: str) -> StoreResult:
        """Delete one item; body is the deleted item."""

    async def is_item_unique(
        self, storage_id: str, conditions: list[dict[str, Any]]
    ) -> StoreResult:
        """body is True when no item matches conditions."""

    async def delete_many(
        self, storage_id: str, conditions: list[dict[str, Any]]
    ) -> StoreResult:
        """Delete every item matching conditions; body is the deleted count."""

    async def insert_many(
        self, storage_id: str, payloads: list[dict[str, Any]]
    ) -> StoreResult:
        """Insert all payloads; body is the stored items."""


class SearchIndexStore(Store, Protocol):
    """Search index: full-text / filter queries over catalog data."""

    async def search(
        self,
        storage_id: str,
        options: SearchOptions,
        use_lookups: bool = False,
    ) -> StoreResult:
        """Return matching hits flattened to items."""
