"""Search index (Elasticsearch REST API over httpx)."""

from bpm_access.infrastructure.search.index_store import ElasticsearchIndexStore

__all__ = ["ElasticsearchIndexStore"]
