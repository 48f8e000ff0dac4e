"""Unit tests for the store client bundle lifecycle."""

import pytest

from bpm_access.core import clients as store_clients
from bpm_access.core.clients import (
    StoreClients,
    close_store_clients,
    get_store_clients,
    init_store_clients,
    set_store_clients,
)
from bpm_access.domain.exceptions import StoreNotConfiguredException
from tests.fakes import InMemoryDocumentStore, InMemorySearchIndex


@pytest.fixture(autouse=True)
def _reset_bundle():
    set_store_clients(None)
    yield
    set_store_clients(None)


def test_get_before_init_raises() -> None:
    with pytest.raises(StoreNotConfiguredException):
        get_store_clients()


def test_init_requires_store_urls(settings) -> None:
    with pytest.raises(StoreNotConfiguredException):
        init_store_clients(settings.model_copy(update={"mongodb_url": ""}))
    assert store_clients._store_clients is None


def test_init_is_idempotent() -> None:
    bundle = StoreClients(InMemoryDocumentStore(), InMemorySearchIndex())
    set_store_clients(bundle)
    assert init_store_clients() is bundle
    assert get_store_clients() is bundle


@pytest.mark.asyncio
async def test_close_closes_both_stores_and_resets() -> None:
    documents, search_index = InMemoryDocumentStore(), InMemorySearchIndex()
    set_store_clients(StoreClients(documents, search_index))

    await close_store_clients()

    assert documents.closed
    assert search_index.closed
    with pytest.raises(StoreNotConfiguredException):
        get_store_clients()


@pytest.mark.asyncio
async def test_close_without_init_is_noop() -> None:
    await close_store_clients()
