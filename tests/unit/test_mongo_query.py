"""Unit tests for MongoDB filter and pipeline builders."""

from bpm_access.application.dtos.search import LookupSpec, SearchOptions
from bpm_access.infrastructure.mongo.query import (
    build_filter,
    build_pipeline,
    build_sort,
    get_pipeline,
    lookup_stages,
)


def test_build_filter_empty_matches_everything() -> None:
    assert build_filter(None) == {}
    assert build_filter([]) == {}
    assert build_filter([{}]) == {}


def test_build_filter_single_condition_object_is_returned_alone() -> None:
    assert build_filter([{"moduleId": "m1", "roleId": "r1"}]) == {
        "moduleId": "m1",
        "roleId": "r1",
    }


def test_build_filter_list_value_is_an_or_group() -> None:
    assert build_filter([{"type": ["admin", "user"]}]) == {"type": {"$in": ["admin", "user"]}}


def test_build_filter_conjoins_condition_objects_and_word() -> None:
    """Each condition object and the word clause are ANDed."""
    result = build_filter(
        [{"roleId": "r1"}, {"moduleId": "m1"}],
        word="fin.",
        text_fields=["name", "description"],
    )
    assert result == {
        "$and": [
            {"roleId": "r1"},
            {"moduleId": "m1"},
            {
                "$or": [
                    {"name": {"$regex": r"fin\.", "$options": "i"}},
                    {"description": {"$regex": r"fin\.", "$options": "i"}},
                ]
            },
        ]
    }


def test_build_filter_ignores_word_without_text_fields() -> None:
    assert build_filter(None, word="x", text_fields=[]) == {}


def test_build_sort_keeps_order_and_direction() -> None:
    assert build_sort([{"createdAt": "asc"}, {"name": "DESC"}]) == {"createdAt": 1, "name": -1}


def test_lookup_stages_unwind_only_single_matches() -> None:
    many = LookupSpec("_id", "roleId", "permissions", "t_bpm_a_permissions")
    one = LookupSpec("roleId", "_id", "roleId", "t_bpm_a_roles", unwind_single_match=True)

    stages = lookup_stages([many, one])

    assert stages == [
        {
            "$lookup": {
                "from": "t_bpm_a_permissions",
                "localField": "_id",
                "foreignField": "roleId",
                "as": "permissions",
            }
        },
        {
            "$lookup": {
                "from": "t_bpm_a_roles",
                "localField": "roleId",
                "foreignField": "_id",
                "as": "roleId",
            }
        },
        {"$unwind": {"path": "$roleId", "preserveNullAndEmptyArrays": True}},
    ]


def test_build_pipeline_stage_order() -> None:
    """match, sort, skip, limit, lookups, project."""
    options = SearchOptions(
        from_=10,
        size=5,
        sort=[{"createdAt": "asc"}],
        source_include=["_id", "roleId"],
        conditions=[{"roleId": "r1"}],
    )
    lookup = LookupSpec("roleId", "_id", "roleId", "roles", unwind_single_match=True)

    pipeline = build_pipeline(options, [lookup])

    assert [next(iter(stage)) for stage in pipeline] == [
        "$match",
        "$sort",
        "$skip",
        "$limit",
        "$lookup",
        "$unwind",
        "$project",
    ]
    assert pipeline[-1] == {"$project": {"_id": 1, "roleId": 1}}


def test_build_pipeline_without_options_is_empty() -> None:
    assert build_pipeline(SearchOptions()) == []


def test_get_pipeline_matches_single_id() -> None:
    assert get_pipeline("abc") == [{"$match": {"_id": "abc"}}, {"$limit": 1}]
