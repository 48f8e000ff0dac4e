"""DTOs for permission use cases."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PermissionCreate:
    """Grant of a Role over a Module."""

    role_id: str
    module_id: str
    full_access: bool
    actions: list[str] = field(default_factory=list)
    created_at: str | None = None
    updated_at: str | None = None
    deleted_at: str | None = None

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {
            "roleId": self.role_id,
            "moduleId": self.module_id,
            "fullAccess": self.full_access,
            "actions": list(self.actions),
        }
        if self.created_at is not None:
            doc["createdAt"] = self.created_at
        if self.updated_at is not None:
            doc["updatedAt"] = self.updated_at
        if self.deleted_at is not None:
            doc["deletedAt"] = self.deleted_at
        return doc


@dataclass(frozen=True)
class PermissionUpdate:
    """Partial permission update; only fields that are set are written."""

    role_id: str | None = None
    module_id: str | None = None
    full_access: bool | None = None
    actions: list[str] | None = None
    updated_at: str | None = None
    deleted_at: str | None = None

    def to_document(self) -> dict[str, Any]:
        pairs = (
            ("roleId", self.role_id),
            ("moduleId", self.module_id),
            ("fullAccess", self.full_access),
            ("actions", list(self.actions) if self.actions is not None else None),
            ("updatedAt", self.updated_at),
            ("deletedAt", self.deleted_at),
        )
        return {key: value for key, value in pairs if value is not None}


@dataclass(frozen=True)
class MultiPermissionCreate:
    """Complete replacement grant set for one role."""

    role_id: str
    permissions: list[PermissionCreate]
