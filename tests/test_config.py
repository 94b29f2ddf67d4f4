from __future__ import annotations

import pytest

from orderdesk.core.config import _build_config
from orderdesk.core.exceptions import ConfigurationError

_ENV_KEYS = (
    "ENV",
    "DEBUG",
    "DATABASE_URL",
    "DB_CONNECTIVITY_REQUIRED",
    "API_PREFIX",
    "LOG_LEVEL",
    "DEFAULT_PAYMENT_METHOD",
    "DEFAULT_PAYMENT_TERMS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_development_defaults():
    config = _build_config()
    assert config.ENV == "development"
    assert config.DEBUG is True
    assert config.DATABASE_URL.startswith("sqlite")
    assert config.DB_CONNECTIVITY_REQUIRED is False
    assert config.API_PREFIX == "/api/v1"
    assert config.DEFAULT_PAYMENT_METHOD == "bank_transfer"
    assert config.DEFAULT_PAYMENT_TERMS == "immediate"


def test_production_requires_postgres(monkeypatch):
    with pytest.raises(ConfigurationError, match="SQLite"):
        _build_config("production")

    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg2://orderdesk:secret@db:5432/orderdesk")
    config = _build_config("production")
    assert config.is_production is True
    assert config.DEBUG is False
    assert config.DB_CONNECTIVITY_REQUIRED is True


@pytest.mark.parametrize(
    "key,value,message",
    [
        ("DATABASE_URL", "mysql://localhost/orderdesk", "DATABASE_URL"),
        ("DATABASE_URL", "postgresql:///orderdesk", "hostname"),
        ("API_PREFIX", "api/v1", "API_PREFIX"),
        ("LOG_LEVEL", "chatty", "LOG_LEVEL"),
        ("DEFAULT_PAYMENT_METHOD", "barter", "DEFAULT_PAYMENT_METHOD"),
        ("DEFAULT_PAYMENT_TERMS", "net30", "DEFAULT_PAYMENT_TERMS"),
    ],
)
def test_invalid_settings_are_rejected(monkeypatch, key, value, message):
    monkeypatch.setenv(key, value)
    with pytest.raises(ConfigurationError, match=message):
        _build_config()
