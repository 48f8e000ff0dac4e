"""Relation (lookup) specifications per entity kind.

Only computes LookupSpec lists; executing them is the document store's job.
All joined collections live in the document store of the same tenant.
"""

from __future__ import annotations

from dataclasses import dataclass

from bpm_access.application.dtos.search import LookupSpec
from bpm_access.core.constants import ROLE_PERMISSIONS_ALIAS
from bpm_access.domain.enums import ResourceKind
from bpm_access.infrastructure.persistence.tenant_index import TenantIndexResolver


@dataclass(frozen=True)
class _Relation:
    target: ResourceKind
    source_field: str
    foreign_field: str
    alias: str
    unwind: bool


# A Role owns many Permissions; a Permission points at one Role and one Module.
_RELATIONS: dict[ResourceKind, tuple[_Relation, ...]] = {
    ResourceKind.ROLES: (
        _Relation(
            target=ResourceKind.PERMISSIONS,
            source_field="_id",
            foreign_field="roleId",
            alias=ROLE_PERMISSIONS_ALIAS,
            unwind=False,
        ),
    ),
    ResourceKind.PERMISSIONS: (
        _Relation(
            target=ResourceKind.ROLES,
            source_field="roleId",
            foreign_field="_id",
            alias="roleId",
            unwind=True,
        ),
        _Relation(
            target=ResourceKind.MODULES,
            source_field="moduleId",
            foreign_field="moduleId",
            alias="moduleId",
            unwind=True,
        ),
    ),
}


class RelationResolver:
    """Builds the lookups that denormalize foreign references of an entity kind."""

    def __init__(self, index_resolver: TenantIndexResolver | None = None) -> None:
        self._indexes = index_resolver or TenantIndexResolver()

    def build_relations(
        self, kind: ResourceKind | str, tenant_prefix: str
    ) -> list[LookupSpec]:
        """Return the ordered lookups for kind; empty for kinds without relations."""
        try:
            relations = _RELATIONS.get(ResourceKind(kind), ())
        except ValueError:
            return []
        return [
            LookupSpec(
                source_field=rel.source_field,
                foreign_field=rel.foreign_field,
                alias=rel.alias,
                target_storage_id=self._indexes.document(rel.target, tenant_prefix),
                unwind_single_match=rel.unwind,
            )
            for rel in relations
        ]
