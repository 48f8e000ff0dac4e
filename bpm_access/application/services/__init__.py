"""Application services: role and permission operations, access resolution."""

from bpm_access.application.services.access_resolution import (
    AccessResolutionEngine,
    consolidate,
)
from bpm_access.application.services.permission_service import PermissionService
from bpm_access.application.services.role_service import RoleService
from bpm_access.application.services.uniqueness_guard import (
    PermissionUniquenessGuard,
    RoleNameGuard,
)

__all__ = [
    "AccessResolutionEngine",
    "PermissionService",
    "PermissionUniquenessGuard",
    "RoleNameGuard",
    "RoleService",
    "consolidate",
]
