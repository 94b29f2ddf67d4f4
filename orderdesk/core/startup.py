"""Startup checks run from the application lifespan."""

from __future__ import annotations

import logging

from orderdesk.core.config import get_config
from orderdesk.core.logging_config import configure_logging
from orderdesk.database.db import get_active_database_url, missing_tables, verify_database_connection
from orderdesk.models import Base

logger = logging.getLogger(__name__)


def _check_schema() -> None:
    missing = missing_tables(Base.metadata.tables.keys())
    if missing:
        logger.warning(
            "startup.database.schema_incomplete",
            extra={"event": "startup.database.schema_incomplete", "missing_tables": missing},
        )


def validate_startup_config() -> None:
    """Fail fast when the database is required but unreachable."""
    config = get_config()
    if verify_database_connection():
        _check_schema()
    elif config.DB_CONNECTIVITY_REQUIRED:
        raise RuntimeError("Database connectivity check failed.")
    else:
        logger.warning(
            "startup.database.unreachable",
            extra={"event": "startup.database.unreachable"},
        )

    logger.info(
        "startup.config.validated",
        extra={
            "event": "startup.config.validated",
            "env": config.ENV,
            "database_scheme": get_active_database_url().split("://", 1)[0],
            "db_connectivity_required": config.DB_CONNECTIVITY_REQUIRED,
            "default_payment_method": config.DEFAULT_PAYMENT_METHOD,
            "default_payment_terms": config.DEFAULT_PAYMENT_TERMS,
        },
    )


def bootstrap() -> None:
    configure_logging()
    validate_startup_config()
