"""Permission repository with the replace-all-grants-of-a-role operation."""

from __future__ import annotations

from typing import Any

from bpm_access.application.dtos.search import StoreResult
from bpm_access.domain.enums import ResourceKind
from bpm_access.infrastructure.persistence.repositories.base import FederatedRepository
from bpm_access.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class PermissionRepository(FederatedRepository):
    kind = ResourceKind.PERMISSIONS

    async def replace_all_for_role(
        self, role_id: str, payloads: list[dict[str, Any]], tenant: str
    ) -> StoreResult:
        """Delete every permission of role_id, then insert payloads.

        Two independent store calls without a transaction: if the insert
        fails the role is left with no permissions. A failed delete is
        returned as is and nothing is inserted.
        """
        storage_id = self.storage_id(tenant)
        deleted = await self._documents.delete_many(storage_id, [{"roleId": role_id}])
        if deleted.is_internal_error:
            logger.warning(
                "delete of permissions for role %s in %s failed: %s",
                role_id,
                storage_id,
                deleted.body,
            )
            return deleted
        return await self._documents.insert_many(storage_id, payloads)
