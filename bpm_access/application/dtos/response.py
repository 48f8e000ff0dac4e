"""Uniform result envelope returned by every service operation."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ServiceResponse:
    """Result envelope.

    result is the requested payload or a human-readable error string.
    total_count is set for paginated listings, id for writes.
    """

    result: Any
    status_code: int
    total_count: int | None = None
    id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"result": self.result, "statusCode": self.status_code}
        if self.total_count is not None:
            out["totalCount"] = self.total_count
        if self.id is not None:
            out["id"] = self.id
        return out
