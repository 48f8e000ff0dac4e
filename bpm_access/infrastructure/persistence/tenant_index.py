"""Tenant storage identifiers (collection and index names).

Physical names are already provisioned, so the layout is fixed:

    document store:  {prefix}_{domain}_{tenant}_{resource}
    search index:    {prefix}_{domain}_{resource}_{tenant}

The tenant and resource tokens are swapped between the two families. The
module catalog index is the exception: it was provisioned tenant-first
(see TenantIndexResolver.search_index).
"""

from __future__ import annotations

from bpm_access.core.config import Settings, get_settings
from bpm_access.domain.enums import ResourceKind, StoreFamily


def resource_token(kind: ResourceKind | str, settings: Settings | None = None) -> str:
    """Map a logical resource kind to its configured physical token.

    Unknown kinds are used verbatim as their own token.
    """
    settings = settings or get_settings()
    tokens = {
        ResourceKind.ROLES: settings.index_roles,
        ResourceKind.PERMISSIONS: settings.index_permissions,
        ResourceKind.MODULES: settings.index_modules,
    }
    try:
        return tokens[ResourceKind(kind)]
    except ValueError:
        return str(kind)


def resolve(
    kind: ResourceKind | str,
    tenant_prefix: str,
    family: StoreFamily = StoreFamily.DOCUMENT,
    settings: Settings | None = None,
) -> str:
    """Return the physical storage identifier of kind for tenant_prefix.

    Pure and total: the same inputs always yield the same identifier.
    """
    settings = settings or get_settings()
    token = resource_token(kind, settings)
    head = f"{settings.index_prefix}_{settings.index_domain}"
    if family == StoreFamily.SEARCH_INDEX:
        return f"{head}_{token}_{tenant_prefix}"
    return f"{head}_{tenant_prefix}_{token}"


class TenantIndexResolver:
    """Binds resolve() to one Settings instance for injection into repositories."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def document(self, kind: ResourceKind | str, tenant_prefix: str) -> str:
        return resolve(kind, tenant_prefix, StoreFamily.DOCUMENT, self._settings)

    def search_index(self, kind: ResourceKind | str, tenant_prefix: str) -> str:
        """Search-index identifier of kind for tenant_prefix.

        The module catalog index keeps the tenant-first order unless
        settings.module_index_tenant_first is False.
        """
        if kind == ResourceKind.MODULES and self._settings.module_index_tenant_first:
            return self.document(kind, tenant_prefix)
        return resolve(kind, tenant_prefix, StoreFamily.SEARCH_INDEX, self._settings)
