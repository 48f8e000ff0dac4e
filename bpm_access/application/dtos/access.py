"""Effective access read-model (derived per request, never persisted)."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class EffectiveAccess:
    """Actions a Role may exercise on one Module.

    attributes carries the remaining catalog fields of the Module (minus
    its raw view metadata) as returned by the search index.
    """

    module_id: str
    module_name: str | None
    full_access: bool
    actions: list[str]
    attributes: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Catalog attributes first; the computed keys override same-named catalog fields."""
        return {
            **self.attributes,
            "moduleId": self.module_id,
            "moduleName": self.module_name,
            "fullAccess": self.full_access,
            "actions": list(self.actions),
        }
