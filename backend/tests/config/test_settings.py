"""Settings - environment-driven configuration."""

import pytest
from pydantic import ValidationError

from warehouser.config import Settings


def test_postgres_url_is_rewritten_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@h:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@h:5432/db"


def test_non_postgres_url_is_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///x.db")
    assert settings.database_url == "sqlite+aiosqlite:///x.db"


def test_pool_size_read_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_POOL_SIZE", "1")
    monkeypatch.setenv("DATABASE_MAX_OVERFLOW", "3")
    settings = Settings()
    assert settings.database_pool_size == 1
    assert settings.database_max_overflow == 3


def test_pool_size_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(database_pool_size=0)


def test_default_list_limit_is_100(monkeypatch):
    monkeypatch.delenv("DEFAULT_LIST_LIMIT", raising=False)
    assert Settings().default_list_limit == 100
