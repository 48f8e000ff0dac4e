"""Unit tests for MongoDocumentStore against a mocked motor database."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import PyMongoError

from bpm_access.application.dtos.search import SearchOptions
from bpm_access.infrastructure.mongo.document_store import MongoDocumentStore


def _store_with(collection: MagicMock) -> MongoDocumentStore:
    database = MagicMock()
    database.__getitem__.return_value = collection
    return MongoDocumentStore(database, text_fields=["name"])


def _cursor(items: list[dict]) -> MagicMock:
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=items)
    return cursor


@pytest.mark.asyncio
async def test_search_returns_items_and_total() -> None:
    collection = MagicMock()
    collection.count_documents = AsyncMock(return_value=7)
    collection.aggregate.return_value = _cursor([{"_id": "r1", "name": "finance"}])
    store = _store_with(collection)

    result = await store.search("c", SearchOptions(size=1, conditions=[{"name": "finance"}]))

    assert result.status == 200
    assert result.body == [{"_id": "r1", "name": "finance"}]
    assert result.total_count == 7
    collection.count_documents.assert_awaited_once_with({"name": "finance"})


@pytest.mark.asyncio
async def test_get_returns_none_when_missing() -> None:
    collection = MagicMock()
    collection.aggregate.return_value = _cursor([])
    store = _store_with(collection)

    result = await store.get("c", "missing")

    assert result.body is None
    assert result.status == 200


@pytest.mark.asyncio
async def test_create_stamps_id_and_timestamps() -> None:
    collection = MagicMock()
    collection.insert_one = AsyncMock()
    store = _store_with(collection)

    result = await store.create("c", {"name": "finance"})

    assert result.status == 201
    assert result.body["name"] == "finance"
    assert result.body["_id"]
    assert result.body["createdAt"] == result.body["updatedAt"]
    collection.insert_one.assert_awaited_once_with(result.body)


@pytest.mark.asyncio
async def test_update_missing_item_is_not_found() -> None:
    collection = MagicMock()
    collection.find_one_and_update = AsyncMock(return_value=None)
    store = _store_with(collection)

    result = await store.update("c", "missing", {"name": "x"})

    assert result.status == 404
    assert result.body is None


@pytest.mark.asyncio
async def test_update_never_rewrites_id() -> None:
    collection = MagicMock()
    collection.find_one_and_update = AsyncMock(return_value={"_id": "r1", "name": "x"})
    store = _store_with(collection)

    await store.update("c", "r1", {"_id": "other", "name": "x"})

    changes = collection.find_one_and_update.await_args.args[1]["$set"]
    assert "_id" not in changes
    assert changes["name"] == "x"
    assert "updatedAt" in changes


@pytest.mark.asyncio
async def test_delete_many_with_no_conditions_deletes_nothing() -> None:
    collection = MagicMock()
    collection.delete_many = AsyncMock()
    store = _store_with(collection)

    result = await store.delete_many("c", [])

    assert result.body == {"deletedCount": 0}
    collection.delete_many.assert_not_awaited()


@pytest.mark.asyncio
async def test_insert_many_skips_empty_batches() -> None:
    collection = MagicMock()
    collection.insert_many = AsyncMock()
    store = _store_with(collection)

    result = await store.insert_many("c", [])

    assert result.status == 201
    assert result.body == []
    collection.insert_many.assert_not_awaited()


@pytest.mark.asyncio
async def test_is_item_unique() -> None:
    collection = MagicMock()
    collection.count_documents = AsyncMock(return_value=1)
    store = _store_with(collection)

    result = await store.is_item_unique("c", [{"name": "finance"}])

    assert result.body is False
    collection.count_documents.assert_awaited_once_with({"name": "finance"}, limit=1)


@pytest.mark.asyncio
async def test_driver_errors_become_internal_error_results() -> None:
    """A PyMongoError is reported as a 500 result carrying the driver message."""
    collection = MagicMock()
    collection.find_one_and_delete = AsyncMock(side_effect=PyMongoError("connection reset"))
    store = _store_with(collection)

    result = await store.delete("c", "r1")

    assert result.status == 500
    assert result.is_internal_error
    assert "connection reset" in result.body
