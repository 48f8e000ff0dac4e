"""Role application service: tenant-scoped role CRUD and module access."""

from __future__ import annotations

from dataclasses import replace

from bpm_access.application.dtos.response import ServiceResponse
from bpm_access.application.dtos.role import RoleCreate, RoleUpdate
from bpm_access.application.dtos.search import SearchOptions
from bpm_access.application.interfaces.repositories import (
    IRelationResolver,
    IRoleRepository,
)
from bpm_access.application.services.access_resolution import AccessResolutionEngine
from bpm_access.application.services.error_classifier import (
    classify,
    error_response,
    raise_for_store_status,
)
from bpm_access.application.services.uniqueness_guard import RoleNameGuard
from bpm_access.core.constants import DEFAULT_SORT_FIELD, HTTP_CREATED, HTTP_OK
from bpm_access.domain.enums import ResourceKind
from bpm_access.shared.telemetry.logging import save_log


class RoleService:
    """Role operations. Every method returns a ServiceResponse and never raises."""

    def __init__(
        self,
        role_repo: IRoleRepository,
        relation_resolver: IRelationResolver,
        access_engine: AccessResolutionEngine,
        name_guard: RoleNameGuard | None = None,
    ) -> None:
        self._repo = role_repo
        self._relations = relation_resolver
        self._access = access_engine
        self._name_guard = name_guard or RoleNameGuard(role_repo)

    async def list_all(self, tenant: str) -> ServiceResponse:
        try:
            options = SearchOptions(sort=[{DEFAULT_SORT_FIELD: "asc"}])
            return classify(await self._repo.search(options, tenant))
        except Exception as exc:
            save_log("ERROR", exc, "RoleService_listAll", tenant)
            return error_response(exc)

    async def list_paginated(
        self, tenant: str, from_: int, size: int, word: str = ""
    ) -> ServiceResponse:
        """One page of roles; total_count is the number of matching roles."""
        try:
            options = SearchOptions(
                from_=from_,
                size=size,
                word=word,
                sort=[{DEFAULT_SORT_FIELD: "asc"}],
            )
            return classify(
                await self._repo.search_paginated(options, tenant), with_total=True
            )
        except Exception as exc:
            save_log("ERROR", exc, "RoleService_listPaginated", tenant)
            return error_response(exc)

    async def get_item(self, tenant: str, role_id: str) -> ServiceResponse:
        """Role with its permissions; 404 when absent."""
        try:
            relations = self._relations.build_relations(ResourceKind.ROLES, tenant)
            result = await self._repo.get_by_id(role_id, tenant, relations)
            return classify(result, not_found_on_empty=True)
        except Exception as exc:
            save_log("ERROR", exc, "RoleService_getItem", tenant)
            return error_response(exc)

    async def get_module_access(
        self,
        tenant: str,
        role_id: str,
        filters: str | None = None,
        fields: str | None = None,
    ) -> ServiceResponse:
        """Effective access of the role over the module catalog.

        filters and fields are URL-encoded JSON: a list of condition objects
        and a list of module field names.
        """
        try:
            access = await self._access.resolve(role_id, tenant, filters, fields)
            return ServiceResponse([item.to_dict() for item in access], HTTP_OK)
        except Exception as exc:
            save_log("ERROR", exc, "RoleService_getModuleAccess", tenant)
            return error_response(exc)

    async def create_item(self, tenant: str, payload: RoleCreate) -> ServiceResponse:
        """Create a role; the name is stored lowercased and must be unique."""
        try:
            payload = replace(payload, name=payload.name.lower())
            await self._name_guard.ensure_unique(payload.name, tenant)
            result = raise_for_store_status(
                await self._repo.create(payload.to_document(), tenant)
            )
            created = result.body or {}
            return ServiceResponse(created, HTTP_CREATED, id=created.get("_id"))
        except Exception as exc:
            save_log("ERROR", exc, "RoleService_createItem", tenant)
            return error_response(exc)

    async def update_item(
        self, tenant: str, role_id: str, payload: RoleUpdate
    ) -> ServiceResponse:
        """Write only the fields set on payload."""
        try:
            if payload.name is not None:
                payload = replace(payload, name=payload.name.lower())
            result = await self._repo.update_by_id(role_id, payload.to_document(), tenant)
            return replace(classify(result), id=role_id)
        except Exception as exc:
            save_log("ERROR", exc, "RoleService_updateItem", tenant)
            return error_response(exc)

    async def delete_item(self, tenant: str, role_id: str) -> ServiceResponse:
        try:
            result = await self._repo.delete_by_id(role_id, tenant)
            return replace(classify(result), id=role_id)
        except Exception as exc:
            save_log("ERROR", exc, "RoleService_deleteItem", tenant)
            return error_response(exc)
