"""Application ports: store capability contracts and repository protocols."""

from bpm_access.application.interfaces.repositories import (
    IPermissionRepository,
    IRelationResolver,
    IRoleRepository,
    ITenantRepository,
)
from bpm_access.application.interfaces.stores import (
    DocumentStore,
    SearchIndexStore,
    Store,
)

__all__ = [
    "DocumentStore",
    "IPermissionRepository",
    "IRelationResolver",
    "IRoleRepository",
    "ITenantRepository",
    "SearchIndexStore",
    "Store",
]
