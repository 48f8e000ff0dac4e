"""Effective access resolution: merge a role's grants with the module catalog."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from bpm_access.application.dtos.access import EffectiveAccess
from bpm_access.application.dtos.search import SearchOptions
from bpm_access.application.interfaces.repositories import (
    IRelationResolver,
    IRoleRepository,
)
from bpm_access.application.services.error_classifier import raise_for_store_status
from bpm_access.application.services.query_params import decode_fields, decode_filters
from bpm_access.core.config import Settings, get_settings
from bpm_access.core.constants import DEFAULT_SORT_FIELD, ROLE_PERMISSIONS_ALIAS
from bpm_access.domain.enums import ResourceKind
from bpm_access.domain.exceptions import ResourceNotFoundException


def active_actions(module: dict[str, Any]) -> list[str]:
    """Names of module.view.actions whose value is true, in the module's key order.

    A module without view metadata exposes no actions.
    """
    view = module.get("view") or {}
    actions = view.get("actions") or {}
    return [name for name, enabled in actions.items() if enabled is True]


def consolidate(
    permissions: Iterable[dict[str, Any]],
    modules: Iterable[dict[str, Any]],
) -> list[EffectiveAccess]:
    """One EffectiveAccess per module, in module order.

    fullAccess comes from the role's permission for the module (false when
    there is none; last one wins on duplicates). actions are the module's
    active actions; the permission's stored actions are not consulted.
    """
    by_module: dict[Any, dict[str, Any]] = {}
    for permission in permissions:
        by_module[permission.get("moduleId")] = permission

    consolidated: list[EffectiveAccess] = []
    for module in modules:
        module_id = module.get("_id")
        permission = by_module.get(module_id) or {}
        attributes = {key: value for key, value in module.items() if key != "view"}
        consolidated.append(
            EffectiveAccess(
                module_id=module_id,
                module_name=module.get("name"),
                full_access=bool(permission.get("fullAccess", False)),
                actions=active_actions(module),
                attributes=attributes,
            )
        )
    return consolidated


class AccessResolutionEngine:
    """Resolve the per-module effective access of one role.

    Steps run strictly in order; each failure aborts the whole resolution
    with no partial result.
    """

    def __init__(
        self,
        role_repo: IRoleRepository,
        relation_resolver: IRelationResolver,
        settings: Settings | None = None,
    ) -> None:
        self._roles = role_repo
        self._relations = relation_resolver
        self._settings = settings or get_settings()

    async def fetch_role(self, role_id: str, tenant: str) -> dict[str, Any]:
        """Role with its permissions denormalized under the permissions alias."""
        relations = self._relations.build_relations(ResourceKind.ROLES, tenant)
        result = raise_for_store_status(
            await self._roles.get_by_id(role_id, tenant, relations)
        )
        if not result.body:
            raise ResourceNotFoundException("Role", role_id)
        return result.body

    async def fetch_modules(
        self,
        tenant: str,
        filters: str | None = None,
        fields: str | None = None,
    ) -> list[dict[str, Any]]:
        """Single catalog page; catalogs beyond the page size are truncated."""
        options = SearchOptions(
            from_=0,
            size=self._settings.module_catalog_page_size,
            sort=[{DEFAULT_SORT_FIELD: "asc"}],
            source_include=decode_fields(fields),
            conditions=decode_filters(filters),
        )
        result = raise_for_store_status(await self._roles.search_modules(options, tenant))
        return result.items

    async def resolve(
        self,
        role_id: str,
        tenant: str,
        filters: str | None = None,
        fields: str | None = None,
    ) -> list[EffectiveAccess]:
        """Effective access of role_id for every catalog module.

        Raises:
            ResourceNotFoundException: if the role does not exist.
            StoreInternalError: if either store reports an internal error.
            InvalidQueryParameterException: if filters or fields are malformed.
        """
        role = await self.fetch_role(role_id, tenant)
        modules = await self.fetch_modules(tenant, filters, fields)
        return consolidate(role.get(ROLE_PERMISSIONS_ALIAS) or [], modules)
