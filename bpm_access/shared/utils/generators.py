"""Document identity: CUID2 _id values and creation timestamps."""

from typing import Any

from cuid2 import cuid_wrapper

from bpm_access.shared.utils.datetime import isoformat_utc

_new_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Collision-resistant string id (CUID2) used as a document _id."""
    return str(_new_cuid())


def stamp_new_document(payload: dict[str, Any]) -> dict[str, Any]:
    """Copy of payload with a fresh _id and createdAt/updatedAt.

    Timestamps already present on payload are kept; an _id never is.
    """
    now = isoformat_utc()
    doc = {**payload, "_id": generate_cuid()}
    doc.setdefault("createdAt", now)
    doc.setdefault("updatedAt", now)
    return doc
