"""Thin Elasticsearch REST client (implements SearchIndexStore).

Uses httpx.AsyncClient so calls do not block the event loop. Only the
_search endpoint is needed: the index holds read-only catalog data.
"""

from __future__ import annotations

import json

import httpx

from bpm_access.application.dtos.search import SearchOptions, StoreResult
from bpm_access.core.config import Settings, get_settings
from bpm_access.core.constants import HTTP_INTERNAL_SERVER_ERROR, HTTP_NOT_FOUND, HTTP_OK
from bpm_access.domain.enums import StoreFamily
from bpm_access.domain.exceptions import StoreNotConfiguredException
from bpm_access.infrastructure.search.query import build_search_body, flatten_hits
from bpm_access.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def _error_reason(resp: httpx.Response) -> str:
    """Best-effort error reason from an Elasticsearch error body."""
    try:
        data = resp.json()
    except (json.JSONDecodeError, ValueError):
        return resp.text or f"HTTP {resp.status_code}"
    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict):
        return str(error.get("reason") or error.get("type") or error)
    return str(error or data)


class ElasticsearchIndexStore:
    """SearchIndexStore over the Elasticsearch REST API."""

    family = StoreFamily.SEARCH_INDEX

    def __init__(
        self,
        base_url: str,
        *,
        auth: httpx.Auth | tuple[str, str] | None = None,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = (
            http_client
            if http_client is not None
            else httpx.AsyncClient(auth=auth, timeout=timeout)
        )
        self._owns_http = http_client is None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ElasticsearchIndexStore":
        settings = settings or get_settings()
        if not settings.elasticsearch_url:
            raise StoreNotConfiguredException("Elasticsearch (ELASTICSEARCH_URL)")
        auth = None
        if settings.elasticsearch_username and settings.elasticsearch_password:
            auth = (
                settings.elasticsearch_username,
                settings.elasticsearch_password.get_secret_value(),
            )
        return cls(
            settings.elasticsearch_url,
            auth=auth,
            timeout=settings.elasticsearch_timeout_seconds,
        )

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def search(
        self,
        storage_id: str,
        options: SearchOptions,
        use_lookups: bool = False,
    ) -> StoreResult:
        """Run _search on storage_id. 404 (missing index) yields an empty 404 result."""
        if use_lookups:
            logger.debug("Lookups requested on index %s; the search index cannot join", storage_id)
        url = f"{self._base_url}/{storage_id}/_search"
        try:
            resp = await self._http.post(url, json=build_search_body(options))
        except httpx.HTTPError as exc:
            logger.error("Elasticsearch search on %s failed: %s", storage_id, exc)
            return StoreResult(str(exc) or exc.__class__.__name__, HTTP_INTERNAL_SERVER_ERROR)
        if resp.status_code == HTTP_NOT_FOUND:
            return StoreResult([], HTTP_NOT_FOUND, total_count=0)
        if resp.status_code != HTTP_OK:
            reason = _error_reason(resp)
            logger.error(
                "Elasticsearch search on %s returned %s: %s",
                storage_id,
                resp.status_code,
                reason,
            )
            return StoreResult(reason, HTTP_INTERNAL_SERVER_ERROR)
        items, total = flatten_hits(resp.json())
        return StoreResult(items, HTTP_OK, total_count=total)
