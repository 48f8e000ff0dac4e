"""MongoDB connection (one AsyncIOMotorClient per process)."""

from __future__ import annotations

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from bpm_access.core.config import Settings, get_settings
from bpm_access.domain.exceptions import StoreNotConfiguredException
from bpm_access.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class MongoConnection:
    """Owns the motor client; the client pools connections and is safe to share."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        if not self.settings.mongodb_url:
            raise StoreNotConfiguredException("MongoDB (MONGODB_URL)")
        self._client: AsyncIOMotorClient = AsyncIOMotorClient(
            self.settings.mongodb_url,
            serverSelectionTimeoutMS=self.settings.mongodb_timeout_ms,
        )
        self._database: AsyncIOMotorDatabase = self._client[self.settings.mongodb_database]
        logger.info("MongoDB client created for database %s", self.settings.mongodb_database)

    @property
    def database(self) -> AsyncIOMotorDatabase:
        return self._database

    def close(self) -> None:
        self._client.close()
        logger.info("MongoDB connection closed")
