"""Environment-driven settings for the order/payment service.

Values come from the process environment, with a local ``.env`` file loaded
first. ``get_config()`` validates once per environment name and caches the
result; invalid values raise ``ConfigurationError`` at startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlparse

from dotenv import load_dotenv

from orderdesk.core.exceptions import ConfigurationError

load_dotenv()

PAYMENT_METHODS = ("cash", "bank_transfer", "credit_card", "check", "other")
# "gg" is giorni (days): "30gg" is net 30.
PAYMENT_TERMS = (
    "immediate",
    "15gg",
    "21gg",
    "30gg",
    "45gg",
    "60gg",
    "90gg",
    "120gg",
    "180gg",
    "240gg",
    "365gg",
)
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DATABASE_SCHEMES = ("sqlite", "postgresql", "postgresql+psycopg2")

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Config:
    APP_NAME: str
    APP_VERSION: str
    ENV: str
    DEBUG: bool
    DATABASE_URL: str
    DB_CONNECTIVITY_REQUIRED: bool
    DB_ECHO: bool
    API_PREFIX: str
    LOG_LEVEL: str
    LOG_FILE: str
    DEFAULT_PAYMENT_METHOD: str
    DEFAULT_PAYMENT_TERMS: str

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"


def _build_config(env: str | None = None) -> Config:
    environment = (env or os.getenv("ENV") or "development").strip().lower()
    production = environment == "production"

    config = Config(
        APP_NAME="orderdesk",
        APP_VERSION=os.getenv("APP_VERSION", "1.0.0"),
        ENV=environment,
        DEBUG=False if production else _flag("DEBUG", default=True),
        DATABASE_URL=os.getenv("DATABASE_URL", "sqlite:///./orderdesk.db"),
        DB_CONNECTIVITY_REQUIRED=_flag("DB_CONNECTIVITY_REQUIRED", default=production),
        DB_ECHO=_flag("DB_ECHO", default=False),
        API_PREFIX=os.getenv("API_PREFIX", "/api/v1"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        LOG_FILE=os.getenv("LOG_FILE", ""),
        DEFAULT_PAYMENT_METHOD=os.getenv("DEFAULT_PAYMENT_METHOD", "bank_transfer").strip().lower(),
        DEFAULT_PAYMENT_TERMS=os.getenv("DEFAULT_PAYMENT_TERMS", "immediate").strip().lower(),
    )
    _validate_config(config)
    return config


def _require_choice(name: str, value: str, choices: tuple[str, ...]) -> None:
    if value not in choices:
        raise ConfigurationError(f"{name}={value!r} is not one of: {', '.join(choices)}.")


def _validate_config(config: Config) -> None:
    url = urlparse(config.DATABASE_URL)
    _require_choice("DATABASE_URL scheme", url.scheme, DATABASE_SCHEMES)
    if url.scheme.startswith("postgresql") and not url.hostname:
        raise ConfigurationError("DATABASE_URL for PostgreSQL needs a hostname.")
    if config.is_production and url.scheme == "sqlite":
        raise ConfigurationError("SQLite is not supported in production; set a PostgreSQL DATABASE_URL.")

    if not config.API_PREFIX.startswith("/"):
        raise ConfigurationError("API_PREFIX must start with '/'.")
    _require_choice("LOG_LEVEL", config.LOG_LEVEL, LOG_LEVELS)
    _require_choice("DEFAULT_PAYMENT_METHOD", config.DEFAULT_PAYMENT_METHOD, PAYMENT_METHODS)
    _require_choice("DEFAULT_PAYMENT_TERMS", config.DEFAULT_PAYMENT_TERMS, PAYMENT_TERMS)


@lru_cache(maxsize=8)
def get_config(env: str | None = None) -> Config:
    return _build_config(env)
