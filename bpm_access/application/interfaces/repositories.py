"""Repository interfaces (ports) for the application layer.

Protocols define contracts the federated repositories fulfill. All
operations are tenant-scoped and pass store status through unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from bpm_access.application.dtos.search import (
        LookupSpec,
        SearchOptions,
        StoreResult,
    )


class ITenantRepository(Protocol):
    """Operations shared by every tenant-scoped repository."""

    async def search(
        self,
        options: SearchOptions,
        tenant: str,
        relations: list[LookupSpec] | None = None,
    ) -> StoreResult:
        """Search the document store."""

    async def search_paginated(
        self,
        options: SearchOptions,
        tenant: str,
        relations: list[LookupSpec] | None = None,
    ) -> StoreResult:
        """Search the document store; result carries total_count."""

    async def get_by_id(
        self,
        item_id: str,
        tenant: str,
        relations: list[LookupSpec] | None = None,
    ) -> StoreResult:
        """Return one item (body None when absent)."""

    async def create(self, payload: dict[str, Any], tenant: str) -> StoreResult:
        """Insert one item."""

    async def update_by_id(
        self, item_id: str, payload: dict[str, Any], tenant: str
    ) -> StoreResult:
        """Partially update one item."""

    async def delete_by_id(self, item_id: str, tenant: str) -> StoreResult:
        """Delete one item."""

    async def is_unique(
        self, conditions: list[dict[str, Any]], tenant: str
    ) -> StoreResult:
        """body is True when nothing matches conditions."""


class IRoleRepository(ITenantRepository, Protocol):
    """Protocol for the role repository."""

    async def search_modules(self, options: SearchOptions, tenant: str) -> StoreResult:
        """Search the tenant's module catalog on the search index."""


class IPermissionRepository(ITenantRepository, Protocol):
    """Protocol for the permission repository."""

    async def replace_all_for_role(
        self, role_id: str, payloads: list[dict[str, Any]], tenant: str
    ) -> StoreResult:
        """Delete every permission of role_id, then insert payloads (not atomic)."""


class IRelationResolver(Protocol):
    """Builds the lookups that denormalize an entity kind's foreign references."""

    def build_relations(self, kind: str, tenant_prefix: str) -> list[LookupSpec]:
        """Ordered lookups for kind in tenant_prefix."""
