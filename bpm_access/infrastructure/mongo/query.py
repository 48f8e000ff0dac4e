"""Translate store-contract options and lookups into MongoDB filters and pipelines."""

from __future__ import annotations

import re
from typing import Any

from bpm_access.application.dtos.search import LookupSpec, SearchOptions
from bpm_access.domain.enums import SortDirection


def build_filter(
    conditions: list[dict[str, Any]] | None,
    word: str | None = None,
    text_fields: list[str] | None = None,
) -> dict[str, Any]:
    """Build a find/$match filter.

    Condition objects are conjoined; inside one object each key is an
    equality and a list value is an OR-group ($in). word matches any of
    text_fields case-insensitively.
    """
    clauses: list[dict[str, Any]] = []
    for condition in conditions or []:
        clause = {
            key: {"$in": value} if isinstance(value, list) else value
            for key, value in condition.items()
        }
        if clause:
            clauses.append(clause)
    if word and text_fields:
        pattern = {"$regex": re.escape(word), "$options": "i"}
        clauses.append({"$or": [{field: pattern} for field in text_fields]})
    if not clauses:
        return {}
    if len(clauses) == 1:
        return clauses[0]
    return {"$and": clauses}


def build_sort(sort: list[dict[str, str]]) -> dict[str, int]:
    """Ordered {field: 1|-1} document for $sort; later entries break ties."""
    out: dict[str, int] = {}
    for entry in sort:
        for field, direction in entry.items():
            out[field] = -1 if str(direction).lower() == SortDirection.DESC else 1
    return out


def lookup_stages(lookups: list[LookupSpec] | None) -> list[dict[str, Any]]:
    stages: list[dict[str, Any]] = []
    for spec in lookups or []:
        stages.append(
            {
                "$lookup": {
                    "from": spec.target_storage_id,
                    "localField": spec.source_field,
                    "foreignField": spec.foreign_field,
                    "as": spec.alias,
                }
            }
        )
        if spec.unwind_single_match:
            stages.append(
                {
                    "$unwind": {
                        "path": f"${spec.alias}",
                        "preserveNullAndEmptyArrays": True,
                    }
                }
            )
    return stages


def build_pipeline(
    options: SearchOptions,
    lookups: list[LookupSpec] | None = None,
    text_fields: list[str] | None = None,
) -> list[dict[str, Any]]:
    """Aggregation pipeline: match, sort, page, join, project."""
    pipeline: list[dict[str, Any]] = []
    match = build_filter(options.conditions, options.word, text_fields)
    if match:
        pipeline.append({"$match": match})
    sort = build_sort(options.sort)
    if sort:
        pipeline.append({"$sort": sort})
    if options.from_:
        pipeline.append({"$skip": options.from_})
    if options.size:
        pipeline.append({"$limit": options.size})
    pipeline.extend(lookup_stages(lookups))
    if options.source_include:
        pipeline.append({"$project": {field: 1 for field in options.source_include}})
    return pipeline


def get_pipeline(item_id: str, lookups: list[LookupSpec] | None = None) -> list[dict[str, Any]]:
    """Pipeline returning at most the one document with _id item_id."""
    return [{"$match": {"_id": item_id}}, {"$limit": 1}, *lookup_stages(lookups)]
