"""Application DTOs (typed records passed between services, repositories and stores)."""

from bpm_access.application.dtos.access import EffectiveAccess
from bpm_access.application.dtos.permission import (
    MultiPermissionCreate,
    PermissionCreate,
    PermissionUpdate,
)
from bpm_access.application.dtos.response import ServiceResponse
from bpm_access.application.dtos.role import RoleCreate, RoleUpdate
from bpm_access.application.dtos.search import LookupSpec, SearchOptions, StoreResult

__all__ = [
    "EffectiveAccess",
    "LookupSpec",
    "MultiPermissionCreate",
    "PermissionCreate",
    "PermissionUpdate",
    "RoleCreate",
    "RoleUpdate",
    "SearchOptions",
    "ServiceResponse",
    "StoreResult",
]
