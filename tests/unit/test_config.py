"""Unit tests for Settings."""

import pytest
from pydantic import ValidationError

from bpm_access.core.config import Settings, get_settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.index_domain == "bpm"
    assert settings.module_catalog_page_size == 500
    assert settings.text_fields == ["name", "description"]


def test_resource_tokens_read_from_legacy_env_names(monkeypatch) -> None:
    monkeypatch.setenv("INDEX_PERMISSIONS_HOME", "permissions_home")
    monkeypatch.setenv("INDEX_MODULE", "modules")
    settings = Settings(_env_file=None)
    assert settings.index_permissions == "permissions_home"
    assert settings.index_modules == "modules"


def test_empty_prefix_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, index_prefix="")


def test_non_positive_page_size_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, module_catalog_page_size=0)


def test_get_settings_is_cached(monkeypatch) -> None:
    monkeypatch.setenv("INDEX_PREFIX", "qa")
    first = get_settings()
    assert first.index_prefix == "qa"
    assert get_settings() is first
