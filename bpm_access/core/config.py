"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Store endpoints are only required when the store
client bundle is initialised (see bpm_access.core.clients).
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    The index_* tokens are part of already-provisioned physical storage
    names; changing them points the service at different collections.
    """

    # App
    app_name: str = "bpm-access"
    app_version: str = "1.0.0"
    debug: bool = False

    # Storage identifiers: {index_prefix}_{index_domain}_...
    index_prefix: str = "dev"
    index_domain: str = "bpm"
    index_roles: str = "roles"
    index_permissions: str = Field(
        default="permissions",
        validation_alias="INDEX_PERMISSIONS_HOME",
    )
    index_modules: str = Field(default="module", validation_alias="INDEX_MODULE")

    # Document store (MongoDB)
    mongodb_url: str = ""
    mongodb_database: str = "bpm"
    mongodb_timeout_ms: int = 10_000
    search_text_fields: str = "name,description"

    # Search index (Elasticsearch REST)
    elasticsearch_url: str = ""
    elasticsearch_username: str | None = None
    elasticsearch_password: SecretStr | None = None
    elasticsearch_timeout_seconds: float = 30.0

    # Module catalog is fetched as a single page
    module_catalog_page_size: int = 500
    # Provisioned catalog indexes are named {prefix}_{domain}_{tenant}_{module}
    module_index_tenant_first: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def validate_identifiers(self) -> "Settings":
        """Reject settings that would produce unusable storage identifiers."""
        if not self.index_prefix:
            raise ValueError(
                "INDEX_PREFIX is required; it namespaces every collection and index name."
            )
        if self.module_catalog_page_size <= 0:
            raise ValueError(
                f"module_catalog_page_size must be positive, got {self.module_catalog_page_size}"
            )
        return self

    @property
    def text_fields(self) -> list[str]:
        """Fields matched by the free-text `word` search option."""
        return [f.strip() for f in self.search_text_fields.split(",") if f.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    In tests, call get_settings.cache_clear() before overriding env vars so
    the next get_settings() uses the new values.
    """
    return Settings()
