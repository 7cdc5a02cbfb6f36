from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import pytest

from core import logs, settings
from core.db import Database, _sanitize_database_url, affected_rows, database_url
from core.timestamps import format_timestamp


def test_format_timestamp_naive_value_is_rendered_as_is():
    assert format_timestamp(datetime(2023, 12, 31, 23, 59, 58)) == "2023-12-31 23:59:58"


def test_format_timestamp_aware_value_uses_local_time():
    value = datetime(2023, 6, 1, 8, 0, 0, tzinfo=timezone(timedelta(hours=9)))

    expected = value.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    assert format_timestamp(value) == expected


def test_format_timestamp_none():
    assert format_timestamp(None) is None


def test_sanitize_database_url_drops_sslmode():
    url = "postgresql://u:p@db.example.com:5432/app?sslmode=require&application_name=recipes"

    assert _sanitize_database_url(url) == "postgresql://u:p@db.example.com:5432/app?application_name=recipes"


def test_sanitize_database_url_without_query():
    url = "postgresql://u:p@localhost/app"

    assert _sanitize_database_url(url) == url


def test_database_url_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        database_url()


@pytest.mark.parametrize(
    "status,expected",
    [("DELETE 1", 1), ("UPDATE 3", 3), ("INSERT 0 1", 1), ("CREATE TABLE", 0), ("", 0)],
)
def test_affected_rows(status, expected):
    assert affected_rows(status) == expected


def test_database_requires_connect():
    db = Database("postgresql://localhost/app")

    assert not db.is_connected
    with pytest.raises(RuntimeError, match="not initialized"):
        db.pool()


def test_database_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/app?sslmode=disable")
    monkeypatch.setenv("DB_POOL_MIN_SIZE", "2")
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "8")
    monkeypatch.setenv("DB_COMMAND_TIMEOUT", "oops")
    monkeypatch.setenv("DATABASE_SSL", "require")

    db = Database.from_env()

    assert db.dsn == "postgresql://localhost/app"
    assert (db.min_size, db.max_size) == (2, 8)
    assert db.command_timeout == 30.0
    assert db.ssl == "require"


def test_settings_defaults(monkeypatch):
    for name in ("PORT", "HOST", "LOG_LEVEL", "CORS_ALLOW_ORIGINS", "DB_POOL_MAX_SIZE", "DB_POOL_MIN_SIZE"):
        monkeypatch.delenv(name, raising=False)

    assert settings.port() == 3000
    assert settings.host() == "0.0.0.0"
    assert settings.log_level() == "INFO"
    assert settings.cors_allow_origins() == ["*"]
    assert settings.pool_max_size() == 5


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("DB_POOL_MIN_SIZE", "10")
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "3")

    assert settings.port() == 8080
    assert settings.log_level() == "DEBUG"
    assert settings.cors_allow_origins() == ["http://a.test", "http://b.test"]
    assert settings.pool_max_size() == 10


def test_configure_logging_installs_one_handler(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(logs, "_handler", None)
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    monkeypatch.setattr(root, "level", root.level)
    before = len(root.handlers)

    logs.configure_logging("WARNING")
    logs.configure_logging("DEBUG")

    assert len(root.handlers) == before + 1
    assert logs._handler in root.handlers
    assert root.level == logging.DEBUG
