"""Composition root: wires repositories and services from a store bundle.

Services depend only on application ports; every concrete repository and
resolver is built here.
"""

from __future__ import annotations

from dataclasses import dataclass

from bpm_access.application.services.access_resolution import AccessResolutionEngine
from bpm_access.application.services.permission_service import PermissionService
from bpm_access.application.services.role_service import RoleService
from bpm_access.application.services.uniqueness_guard import (
    PermissionUniquenessGuard,
    RoleNameGuard,
)
from bpm_access.core.clients import StoreClients
from bpm_access.core.config import Settings, get_settings
from bpm_access.infrastructure.persistence.relations import RelationResolver
from bpm_access.infrastructure.persistence.repositories import (
    PermissionRepository,
    RoleRepository,
)
from bpm_access.infrastructure.persistence.tenant_index import TenantIndexResolver


@dataclass(frozen=True)
class Services:
    roles: RoleService
    permissions: PermissionService


def build_services(clients: StoreClients, settings: Settings | None = None) -> Services:
    settings = settings or get_settings()
    indexes = TenantIndexResolver(settings)
    relations = RelationResolver(indexes)

    role_repo = RoleRepository(clients.documents, clients.search_index, indexes)
    permission_repo = PermissionRepository(clients.documents, clients.search_index, indexes)

    roles = RoleService(
        role_repo,
        relations,
        AccessResolutionEngine(role_repo, relations, settings),
        RoleNameGuard(role_repo),
    )
    permissions = PermissionService(
        permission_repo,
        relations,
        PermissionUniquenessGuard(permission_repo),
    )
    return Services(roles=roles, permissions=permissions)
