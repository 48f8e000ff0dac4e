"""Decode URL-encoded JSON query parameters (filters, fields)."""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import unquote

from bpm_access.domain.exceptions import InvalidQueryParameterException


def _decode(raw: str, parameter: str) -> Any:
    try:
        return json.loads(unquote(raw))
    except json.JSONDecodeError as exc:
        raise InvalidQueryParameterException(parameter, exc.msg) from exc


def decode_filters(raw: str | None) -> list[dict[str, Any]] | None:
    """Decode filters into an ordered list of equality-condition objects.

    Returns None when raw is empty. Values are passed to the store verbatim.
    """
    if not raw:
        return None
    value = _decode(raw, "filters")
    if not isinstance(value, list) or not all(isinstance(v, dict) for v in value):
        raise InvalidQueryParameterException("filters", "expected a list of objects")
    return value


def decode_fields(raw: str | None) -> list[str] | None:
    """Decode fields into the list of attribute names to return."""
    if not raw:
        return None
    value = _decode(raw, "fields")
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise InvalidQueryParameterException("fields", "expected a list of field names")
    return value
