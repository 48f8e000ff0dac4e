"""Translate store-contract search options into an Elasticsearch _search body."""

from __future__ import annotations

from typing import Any

from bpm_access.application.dtos.search import SearchOptions
from bpm_access.domain.enums import SortDirection


def _condition_clauses(conditions: list[dict[str, Any]] | None) -> list[dict[str, Any]]:
    clauses: list[dict[str, Any]] = []
    for condition in conditions or []:
        for field, value in condition.items():
            if isinstance(value, list):
                clauses.append({"terms": {field: value}})
            else:
                clauses.append({"term": {field: value}})
    return clauses


def build_search_body(options: SearchOptions) -> dict[str, Any]:
    """Request body for POST /{index}/_search.

    Conditions become exact term filters (terms for OR-groups); word becomes
    a multi_match over all fields. No conditions and no word matches all.
    """
    body: dict[str, Any] = {}
    if options.from_ is not None:
        body["from"] = options.from_
    if options.size is not None:
        body["size"] = options.size
    if options.sort:
        body["sort"] = [
            {
                field: {
                    "order": SortDirection.DESC
                    if str(direction).lower() == SortDirection.DESC
                    else SortDirection.ASC
                }
            }
            for entry in options.sort
            for field, direction in entry.items()
        ]
    if options.source_include:
        body["_source"] = {"includes": options.source_include}

    filters = _condition_clauses(options.conditions)
    must: list[dict[str, Any]] = []
    if options.word:
        must.append({"multi_match": {"query": options.word, "fields": ["*"]}})
    if filters or must:
        body["query"] = {"bool": {"filter": filters, "must": must}}
    else:
        body["query"] = {"match_all": {}}
    return body


def flatten_hits(response: dict[str, Any]) -> tuple[list[dict[str, Any]], int]:
    """Return (items, total) from a _search response; items keep the hit _id."""
    hits = response.get("hits") or {}
    items = [
        {"_id": hit.get("_id"), **(hit.get("_source") or {})}
        for hit in hits.get("hits") or []
    ]
    total = hits.get("total")
    if isinstance(total, dict):
        count = int(total.get("value", len(items)))
    elif isinstance(total, int):
        count = total
    else:
        count = len(items)
    return items, count
