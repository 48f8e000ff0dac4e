"""Role repository. Also the entry point to the tenant's module catalog."""

from __future__ import annotations

from bpm_access.application.dtos.search import SearchOptions, StoreResult
from bpm_access.domain.enums import ResourceKind
from bpm_access.infrastructure.persistence.repositories.base import FederatedRepository


class RoleRepository(FederatedRepository):
    """Roles live in the document store; the module catalog in the search index."""

    kind = ResourceKind.ROLES

    async def search_modules(self, options: SearchOptions, tenant: str) -> StoreResult:
        """Query the tenant's module catalog (full-text / filter capable)."""
        return await self.search_index(ResourceKind.MODULES, options, tenant)
