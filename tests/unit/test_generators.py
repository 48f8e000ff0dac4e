"""Unit tests for document ids and timestamps."""

import re

from datetime import UTC, datetime

from bpm_access.shared.utils.datetime import isoformat_utc
from bpm_access.shared.utils.generators import generate_cuid, stamp_new_document


def test_generate_cuid_is_unique_string() -> None:
    ids = {generate_cuid() for _ in range(100)}
    assert len(ids) == 100
    assert all(isinstance(i, str) for i in ids)


def test_stamp_new_document_replaces_id_and_keeps_timestamps() -> None:
    doc = stamp_new_document({"_id": "client", "name": "x", "createdAt": "2020-01-01T00:00:00.000Z"})
    assert doc["_id"] != "client"
    assert doc["createdAt"] == "2020-01-01T00:00:00.000Z"
    assert re.fullmatch(r"\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d\.\d{3}Z", doc["updatedAt"])


def test_stamp_new_document_does_not_mutate_payload() -> None:
    payload = {"name": "x"}
    stamp_new_document(payload)
    assert payload == {"name": "x"}


def test_isoformat_utc_millisecond_precision() -> None:
    value = datetime(2024, 5, 1, 12, 30, 15, 123456, tzinfo=UTC)
    assert isoformat_utc(value) == "2024-05-01T12:30:15.123Z"
