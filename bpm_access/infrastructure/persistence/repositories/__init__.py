"""Federated (document store + search index) repositories."""

from bpm_access.infrastructure.persistence.repositories.base import FederatedRepository
from bpm_access.infrastructure.persistence.repositories.permission_repo import (
    PermissionRepository,
)
from bpm_access.infrastructure.persistence.repositories.role_repo import RoleRepository

__all__ = ["FederatedRepository", "PermissionRepository", "RoleRepository"]
