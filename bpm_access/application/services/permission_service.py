"""Permission application service: tenant-scoped grant CRUD and bulk replace."""

from __future__ import annotations

from dataclasses import replace

from bpm_access.application.dtos.permission import (
    MultiPermissionCreate,
    PermissionCreate,
    PermissionUpdate,
)
from bpm_access.application.dtos.response import ServiceResponse
from bpm_access.application.dtos.search import SearchOptions
from bpm_access.application.interfaces.repositories import (
    IPermissionRepository,
    IRelationResolver,
)
from bpm_access.application.services.error_classifier import (
    classify,
    error_response,
    raise_for_store_status,
)
from bpm_access.application.services.uniqueness_guard import PermissionUniquenessGuard
from bpm_access.core.constants import (
    DEFAULT_SORT_FIELD,
    HTTP_CREATED,
    PERMISSION_LIST_FIELDS,
)
from bpm_access.domain.enums import ResourceKind
from bpm_access.shared.telemetry.logging import save_log


class PermissionService:
    """Permission operations. Every method returns a ServiceResponse and never raises."""

    def __init__(
        self,
        permission_repo: IPermissionRepository,
        relation_resolver: IRelationResolver,
        guard: PermissionUniquenessGuard | None = None,
    ) -> None:
        self._repo = permission_repo
        self._relations = relation_resolver
        self._guard = guard or PermissionUniquenessGuard(permission_repo)

    async def list_all(self, tenant: str) -> ServiceResponse:
        """Every permission with its role and module joined."""
        try:
            options = SearchOptions(
                sort=[{DEFAULT_SORT_FIELD: "asc"}],
                source_include=PERMISSION_LIST_FIELDS,
            )
            relations = self._relations.build_relations(ResourceKind.PERMISSIONS, tenant)
            return classify(await self._repo.search(options, tenant, relations))
        except Exception as exc:
            save_log("ERROR", exc, "PermissionService_listAll", tenant)
            return error_response(exc)

    async def list_paginated(
        self, tenant: str, from_: int, size: int, word: str = ""
    ) -> ServiceResponse:
        try:
            options = SearchOptions(
                from_=from_,
                size=size,
                word=word,
                sort=[{DEFAULT_SORT_FIELD: "asc"}],
                source_include=PERMISSION_LIST_FIELDS,
            )
            relations = self._relations.build_relations(ResourceKind.PERMISSIONS, tenant)
            return classify(
                await self._repo.search_paginated(options, tenant, relations),
                with_total=True,
            )
        except Exception as exc:
            save_log("ERROR", exc, "PermissionService_listPaginated", tenant)
            return error_response(exc)

    async def get_item(self, tenant: str, permission_id: str) -> ServiceResponse:
        try:
            relations = self._relations.build_relations(ResourceKind.PERMISSIONS, tenant)
            result = await self._repo.get_by_id(permission_id, tenant, relations)
            return classify(result, not_found_on_empty=True)
        except Exception as exc:
            save_log("ERROR", exc, "PermissionService_getItem", tenant)
            return error_response(exc)

    async def create_item(
        self, tenant: str, payload: PermissionCreate
    ) -> ServiceResponse:
        """Create one grant; 409 if the role already has one for the module.

        actions are stored as supplied, whatever fullAccess is.
        """
        try:
            await self._guard.ensure_unique(payload.role_id, payload.module_id, tenant)
            result = raise_for_store_status(
                await self._repo.create(payload.to_document(), tenant)
            )
            created = result.body or {}
            return ServiceResponse(created, HTTP_CREATED, id=created.get("_id"))
        except Exception as exc:
            save_log("ERROR", exc, "PermissionService_createItem", tenant)
            return error_response(exc)

    async def create_multi_items(
        self, tenant: str, payload: MultiPermissionCreate
    ) -> ServiceResponse:
        """Replace every grant of payload.role_id with payload.permissions.

        Each entry is bound to payload.role_id and keeps its actions only
        when fullAccess is true. Duplicate modules collapse to the last
        entry. Not atomic: a failed insert leaves the role with no grants.
        """
        try:
            by_module: dict[str, dict] = {}
            for permission in payload.permissions:
                entry = replace(
                    permission,
                    role_id=payload.role_id,
                    actions=permission.actions if permission.full_access else [],
                )
                by_module[entry.module_id] = entry.to_document()
            async with self._guard.replace_transition(payload.role_id, tenant):
                result = await self._repo.replace_all_for_role(
                    payload.role_id, list(by_module.values()), tenant
                )
            return replace(classify(result), id=payload.role_id)
        except Exception as exc:
            save_log("ERROR", exc, "PermissionService_createMultiItems", tenant)
            return error_response(exc)

    async def update_item(
        self, tenant: str, permission_id: str, payload: PermissionUpdate
    ) -> ServiceResponse:
        try:
            result = await self._repo.update_by_id(
                permission_id, payload.to_document(), tenant
            )
            return replace(classify(result), id=permission_id)
        except Exception as exc:
            save_log("ERROR", exc, "PermissionService_updateItem", tenant)
            return error_response(exc)

    async def delete_item(self, tenant: str, permission_id: str) -> ServiceResponse:
        try:
            result = await self._repo.delete_by_id(permission_id, tenant)
            return replace(classify(result), id=permission_id)
        except Exception as exc:
            save_log("ERROR", exc, "PermissionService_deleteItem", tenant)
            return error_response(exc)
