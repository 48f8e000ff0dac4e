"""Document store on MongoDB (implements DocumentStore).

Storage identifiers are collection names. Documents use CUID2 string _id
values so foreign keys (roleId, moduleId) join without type conversion.
Driver failures are reported as status 500 results, never raised.
"""

from __future__ import annotations

import functools
from collections.abc import Awaitable, Callable
from typing import Any

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from bpm_access.application.dtos.search import LookupSpec, SearchOptions, StoreResult
from bpm_access.core.constants import (
    HTTP_CREATED,
    HTTP_INTERNAL_SERVER_ERROR,
    HTTP_NOT_FOUND,
    HTTP_OK,
)
from bpm_access.domain.enums import StoreFamily
from bpm_access.infrastructure.mongo.client import MongoConnection
from bpm_access.infrastructure.mongo.query import build_filter, build_pipeline, get_pipeline
from bpm_access.shared.telemetry.logging import get_logger
from bpm_access.shared.utils.datetime import isoformat_utc
from bpm_access.shared.utils.generators import stamp_new_document

logger = get_logger(__name__)


def _reports_store_errors(
    fn: Callable[..., Awaitable[StoreResult]],
) -> Callable[..., Awaitable[StoreResult]]:
    """Turn PyMongoError into a status 500 StoreResult carrying the driver message."""

    @functools.wraps(fn)
    async def wrapper(self: "MongoDocumentStore", storage_id: str, *args: Any, **kwargs: Any) -> StoreResult:
        try:
            return await fn(self, storage_id, *args, **kwargs)
        except PyMongoError as exc:
            logger.error("MongoDB %s on %s failed: %s", fn.__name__, storage_id, exc)
            return StoreResult(str(exc), HTTP_INTERNAL_SERVER_ERROR)

    return wrapper


class MongoDocumentStore:
    """DocumentStore backed by a motor database."""

    family = StoreFamily.DOCUMENT

    def __init__(
        self,
        database: AsyncIOMotorDatabase,
        *,
        text_fields: list[str] | None = None,
        connection: MongoConnection | None = None,
    ) -> None:
        self._db = database
        self._text_fields = text_fields or ["name", "description"]
        self._connection = connection

    @classmethod
    def from_connection(cls, connection: MongoConnection) -> "MongoDocumentStore":
        return cls(
            connection.database,
            text_fields=connection.settings.text_fields,
            connection=connection,
        )

    async def aclose(self) -> None:
        """Close the connection only if this store owns it."""
        if self._connection is not None:
            self._connection.close()

    @_reports_store_errors
    async def search(
        self,
        storage_id: str,
        options: SearchOptions,
        lookups: list[LookupSpec] | None = None,
    ) -> StoreResult:
        collection = self._db[storage_id]
        match = build_filter(options.conditions, options.word, self._text_fields)
        total = await collection.count_documents(match)
        pipeline = build_pipeline(options, lookups, self._text_fields)
        items = await collection.aggregate(pipeline).to_list(length=None)
        return StoreResult(items, HTTP_OK, total_count=total)

    @_reports_store_errors
    async def get(
        self,
        storage_id: str,
        item_id: str,
        lookups: list[LookupSpec] | None = None,
    ) -> StoreResult:
        cursor = self._db[storage_id].aggregate(get_pipeline(item_id, lookups))
        items = await cursor.to_list(length=1)
        return StoreResult(items[0] if items else None, HTTP_OK)

    @_reports_store_errors
    async def create(self, storage_id: str, payload: dict[str, Any]) -> StoreResult:
        doc = stamp_new_document(payload)
        await self._db[storage_id].insert_one(doc)
        return StoreResult(doc, HTTP_CREATED)

    @_reports_store_errors
    async def update(
        self, storage_id: str, item_id: str, payload: dict[str, Any]
    ) -> StoreResult:
        changes = {k: v for k, v in payload.items() if k != "_id"}
        changes["updatedAt"] = isoformat_utc()
        updated = await self._db[storage_id].find_one_and_update(
            {"_id": item_id},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        if updated is None:
            return StoreResult(None, HTTP_NOT_FOUND)
        return StoreResult(updated, HTTP_OK)

    @_reports_store_errors
    async def delete(self, storage_id: str, item_id: str) -> StoreResult:
        deleted = await self._db[storage_id].find_one_and_delete({"_id": item_id})
        if deleted is None:
            return StoreResult(None, HTTP_NOT_FOUND)
        return StoreResult(deleted, HTTP_OK)

    @_reports_store_errors
    async def is_item_unique(
        self, storage_id: str, conditions: list[dict[str, Any]]
    ) -> StoreResult:
        count = await self._db[storage_id].count_documents(build_filter(conditions), limit=1)
        return StoreResult(count == 0, HTTP_OK)

    @_reports_store_errors
    async def delete_many(
        self, storage_id: str, conditions: list[dict[str, Any]]
    ) -> StoreResult:
        match = build_filter(conditions)
        if not match:
            # Never wipe a collection through an empty condition list.
            return StoreResult({"deletedCount": 0}, HTTP_OK)
        result = await self._db[storage_id].delete_many(match)
        return StoreResult({"deletedCount": result.deleted_count}, HTTP_OK)

    @_reports_store_errors
    async def insert_many(
        self, storage_id: str, payloads: list[dict[str, Any]]
    ) -> StoreResult:
        docs = [stamp_new_document(p) for p in payloads]
        if docs:
            await self._db[storage_id].insert_many(docs)
        return StoreResult(docs, HTTP_CREATED)
