"""DTOs for role use cases (closed payload records, no open-ended maps)."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RoleCreate:
    """Payload for role creation. name is normalized by the service."""

    name: str
    description: str
    type: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    deleted_at: str | None = None

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"name": self.name, "description": self.description}
        _put_optional(doc, "type", self.type)
        _put_optional(doc, "createdAt", self.created_at)
        _put_optional(doc, "updatedAt", self.updated_at)
        _put_optional(doc, "deletedAt", self.deleted_at)
        return doc


@dataclass(frozen=True)
class RoleUpdate:
    """Partial role update; only fields that are set are written."""

    name: str | None = None
    description: str | None = None
    type: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    deleted_at: str | None = None

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {}
        _put_optional(doc, "name", self.name)
        _put_optional(doc, "description", self.description)
        _put_optional(doc, "type", self.type)
        _put_optional(doc, "createdAt", self.created_at)
        _put_optional(doc, "updatedAt", self.updated_at)
        _put_optional(doc, "deletedAt", self.deleted_at)
        return doc


def _put_optional(doc: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        doc[key] = value
