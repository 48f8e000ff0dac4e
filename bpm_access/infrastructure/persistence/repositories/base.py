"""Base federated repository: tenant routing of logical operations to stores.

Every operation resolves the tenant's physical identifier first, then calls
the store. Store status is passed through unchanged; nothing is retried.
"""

from __future__ import annotations

from typing import Any

from bpm_access.application.dtos.search import LookupSpec, SearchOptions, StoreResult
from bpm_access.application.interfaces.stores import DocumentStore, SearchIndexStore
from bpm_access.domain.enums import ResourceKind
from bpm_access.infrastructure.persistence.tenant_index import TenantIndexResolver


class FederatedRepository:
    """Uniform tenant-scoped operation set for one resource kind.

    Holds one document store and one search index; each method targets a
    store explicitly. Subclasses add kind-specific operations.
    """

    kind: ResourceKind

    def __init__(
        self,
        documents: DocumentStore,
        search_index: SearchIndexStore,
        index_resolver: TenantIndexResolver | None = None,
    ) -> None:
        self._documents = documents
        self._search_index = search_index
        self._indexes = index_resolver or TenantIndexResolver()

    def storage_id(self, tenant: str) -> str:
        """Document-store identifier of this repository's kind for tenant."""
        return self._indexes.document(self.kind, tenant)

    async def search(
        self,
        options: SearchOptions,
        tenant: str,
        relations: list[LookupSpec] | None = None,
    ) -> StoreResult:
        return await self._documents.search(self.storage_id(tenant), options, relations)

    async def search_paginated(
        self,
        options: SearchOptions,
        tenant: str,
        relations: list[LookupSpec] | None = None,
    ) -> StoreResult:
        return await self._documents.search(self.storage_id(tenant), options, relations)

    async def search_index(
        self, kind: ResourceKind, options: SearchOptions, tenant: str
    ) -> StoreResult:
        """Search kind on the search index (no lookups: the index cannot join)."""
        index = self._indexes.search_index(kind, tenant)
        return await self._search_index.search(index, options, False)

    async def get_by_id(
        self,
        item_id: str,
        tenant: str,
        relations: list[LookupSpec] | None = None,
    ) -> StoreResult:
        return await self._documents.get(self.storage_id(tenant), item_id, relations)

    async def create(self, payload: dict[str, Any], tenant: str) -> StoreResult:
        return await self._documents.create(self.storage_id(tenant), payload)

    async def update_by_id(
        self, item_id: str, payload: dict[str, Any], tenant: str
    ) -> StoreResult:
        return await self._documents.update(self.storage_id(tenant), item_id, payload)

    async def delete_by_id(self, item_id: str, tenant: str) -> StoreResult:
        return await self._documents.delete(self.storage_id(tenant), item_id)

    async def is_unique(
        self, conditions: list[dict[str, Any]], tenant: str
    ) -> StoreResult:
        return await self._documents.is_item_unique(self.storage_id(tenant), conditions)
