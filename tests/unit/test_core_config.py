"""Unit tests for Settings.

Each test builds Settings from a patched, otherwise empty environment, so
the values come only from what the test sets plus field defaults.
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import Environment, Settings, get_settings

REQUIRED = {
    "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
    "API_BASE_URL": "https://communities.local",
    "CORS_ORIGINS": "https://communities.local",
}


def _settings(**overrides: str) -> Settings:
    with patch.dict(os.environ, REQUIRED | overrides, clear=True):
        return Settings()


@pytest.mark.unit
class TestListingSettings:
    def test_page_size_defaults(self):
        settings = _settings()

        assert settings.default_page_size == 10
        assert settings.max_page_size == 100

    def test_page_sizes_from_env(self):
        settings = _settings(DEFAULT_PAGE_SIZE="25", MAX_PAGE_SIZE="50")

        assert (settings.default_page_size, settings.max_page_size) == (25, 50)

    @pytest.mark.parametrize("variable", ["DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE"])
    def test_zero_page_size_rejected(self, variable):
        with pytest.raises(ValidationError, match="page sizes must be at least 1"):
            _settings(**{variable: "0"})

    def test_default_larger_than_max_rejected(self):
        with pytest.raises(ValidationError, match="cannot exceed max_page_size"):
            _settings(DEFAULT_PAGE_SIZE="200", MAX_PAGE_SIZE="100")


@pytest.mark.unit
class TestHttpSettings:
    def test_problem_type_base_loses_trailing_slash(self):
        settings = _settings(API_BASE_URL="https://communities.local/")

        assert settings.api_base_url == "https://communities.local"

    def test_cors_origins_split_and_trimmed(self):
        settings = _settings(
            CORS_ORIGINS="https://communities.local, https://admin.communities.local"
        )

        assert settings.cors_origins == [
            "https://communities.local",
            "https://admin.communities.local",
        ]

    def test_v1_prefix_default(self):
        assert _settings().api_v1_prefix == "/api/v1"


@pytest.mark.unit
class TestStoreSettings:
    def test_postgres_url_and_no_table_bootstrap(self):
        settings = _settings(
            DATABASE_URL="postgresql+asyncpg://app:app@db:5432/communities",
            DB_CREATE_TABLES="false",
            DB_ECHO="true",
        )

        assert settings.database_url.startswith("postgresql+asyncpg://")
        assert settings.db_create_tables is False
        assert settings.db_echo is True

    def test_store_defaults(self):
        settings = _settings()

        assert settings.db_create_tables is True
        assert settings.db_pool_size == 20
        assert settings.db_echo is False

    def test_required_fields(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings()

        missing = {error["loc"][0] for error in exc_info.value.errors()}
        assert {"database_url", "api_base_url", "cors_origins"} <= missing


@pytest.mark.unit
class TestEnvironment:
    def test_development_by_default(self):
        settings = _settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.is_development is True
        assert settings.log_level == "INFO"

    @pytest.mark.parametrize("name", ["testing", "ci", "production"])
    def test_other_environments_are_not_development(self, name):
        settings = _settings(ENVIRONMENT=name)

        assert settings.environment == Environment(name)
        assert settings.is_development is False


@pytest.mark.unit
def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        with patch.dict(os.environ, REQUIRED, clear=True):
            assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
