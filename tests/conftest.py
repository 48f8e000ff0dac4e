"""Pytest configuration and fixtures for bpm-access.

Service scenarios run against the in-memory stores in tests/fakes.py.
Tests that need live MongoDB / Elasticsearch are marked requires_stores
and skip when MONGODB_URL or ELASTICSEARCH_URL is not set.
"""

import os

import pytest

from bpm_access.composition import Services, build_services
from bpm_access.core.clients import StoreClients
from bpm_access.core.config import Settings, get_settings
from bpm_access.infrastructure.persistence.relations import RelationResolver
from bpm_access.infrastructure.persistence.tenant_index import TenantIndexResolver
from tests.fakes import InMemoryDocumentStore, InMemorySearchIndex


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        index_prefix="test",
        index_domain="bpm",
        index_roles="roles",
        index_permissions="permissions",
        index_modules="module",
        module_catalog_page_size=500,
    )


@pytest.fixture
def indexes(settings: Settings) -> TenantIndexResolver:
    return TenantIndexResolver(settings)


@pytest.fixture
def relations(indexes: TenantIndexResolver) -> RelationResolver:
    return RelationResolver(indexes)


@pytest.fixture
def documents() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def search_index() -> InMemorySearchIndex:
    return InMemorySearchIndex()


@pytest.fixture
def services(
    documents: InMemoryDocumentStore,
    search_index: InMemorySearchIndex,
    settings: Settings,
) -> Services:
    """Role and permission services wired over the in-memory stores."""
    return build_services(StoreClients(documents, search_index), settings)


@pytest.fixture
def live_settings() -> Settings:
    """Settings for tests against real stores. Skips when they are not configured."""
    if not os.environ.get("MONGODB_URL") or not os.environ.get("ELASTICSEARCH_URL"):
        pytest.skip(
            "Stores not configured: set MONGODB_URL and ELASTICSEARCH_URL to run "
            "tests marked requires_stores"
        )
    return Settings(index_prefix=f"it{os.getpid()}")
