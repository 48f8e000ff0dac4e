"""DTOs for the store capability contract (search options, lookups, results)."""

from dataclasses import dataclass, field
from typing import Any

from bpm_access.core.constants import HTTP_INTERNAL_SERVER_ERROR


@dataclass
class SearchOptions:
    """Query options understood by both the document store and the search index.

    conditions is an ordered list of equality-condition objects. Each object
    is a conjunction of field equalities; a list value is an OR-group over
    its elements. The objects themselves are conjoined.
    """

    from_: int | None = None
    size: int | None = None
    word: str | None = None
    sort: list[dict[str, str]] = field(default_factory=list)
    source_include: list[str] | None = None
    conditions: list[dict[str, Any]] | None = None


@dataclass(frozen=True)
class LookupSpec:
    """Declarative join executed by a store at query time.

    Joins records of target_storage_id whose foreign_field equals the
    source record's source_field, and stores them under alias. With
    unwind_single_match the alias holds a single record instead of a list.
    """

    source_field: str
    foreign_field: str
    alias: str
    target_storage_id: str
    unwind_single_match: bool = False


@dataclass
class StoreResult:
    """Status-carrying result reported by a store call.

    body is the payload (list of items, single item, None) or, on failure,
    the store's error message.
    """

    body: Any
    status: int
    total_count: int | None = None

    @property
    def is_internal_error(self) -> bool:
        return self.status == HTTP_INTERNAL_SERVER_ERROR

    @property
    def items(self) -> list[dict[str, Any]]:
        if isinstance(self.body, list):
            return self.body
        return []
