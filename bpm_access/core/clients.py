"""Store client bundle: one document store and one search index per process.

Built once at startup by init_store_clients(), shared by every request
(both adapters pool connections and are safe for concurrent use) and
closed by close_store_clients() on shutdown.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bpm_access.application.interfaces.stores import DocumentStore, SearchIndexStore
from bpm_access.core.config import Settings, get_settings
from bpm_access.domain.exceptions import StoreNotConfiguredException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreClients:
    documents: DocumentStore
    search_index: SearchIndexStore

    async def aclose(self) -> None:
        await self.documents.aclose()
        await self.search_index.aclose()


_store_clients: StoreClients | None = None


def init_store_clients(settings: Settings | None = None) -> StoreClients:
    """Build the bundle from settings. Idempotent if already initialized.

    Raises:
        StoreNotConfiguredException: if MONGODB_URL or ELASTICSEARCH_URL is unset.
    """
    global _store_clients
    if _store_clients is not None:
        return _store_clients

    from bpm_access.infrastructure.mongo import MongoConnection, MongoDocumentStore
    from bpm_access.infrastructure.search import ElasticsearchIndexStore

    settings = settings or get_settings()
    if not settings.mongodb_url:
        raise StoreNotConfiguredException("MongoDB (MONGODB_URL)")
    search_index = ElasticsearchIndexStore.from_settings(settings)
    documents = MongoDocumentStore.from_connection(MongoConnection(settings))
    _store_clients = StoreClients(documents=documents, search_index=search_index)
    logger.info("Store clients initialized")
    return _store_clients


def set_store_clients(clients: StoreClients | None) -> None:
    """Install a prebuilt bundle (tests, embedding applications)."""
    global _store_clients
    _store_clients = clients


def get_store_clients() -> StoreClients:
    if _store_clients is None:
        raise StoreNotConfiguredException("store clients (call init_store_clients first)")
    return _store_clients


async def close_store_clients() -> None:
    """Close both adapters and forget the bundle. No-op when not initialized."""
    global _store_clients
    if _store_clients is None:
        return
    clients, _store_clients = _store_clients, None
    await clients.aclose()
    logger.info("Store clients closed")
