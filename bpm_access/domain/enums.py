"""Domain enumerations."""

from enum import StrEnum


class ResourceKind(StrEnum):
    """Logical resources that map to tenant-scoped physical storage."""

    ROLES = "roles"
    PERMISSIONS = "permissions"
    MODULES = "modules"


class StoreFamily(StrEnum):
    """Backing store families. Identifier layout differs between them."""

    DOCUMENT = "document"
    SEARCH_INDEX = "search_index"


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"
