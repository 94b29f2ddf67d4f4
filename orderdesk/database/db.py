"""Engine and session management for the order/payment store."""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterable

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from orderdesk.core.config import get_config

logger = logging.getLogger(__name__)

config = get_config()


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine; SQLite connections get foreign key enforcement."""
    if database_url.startswith("sqlite"):
        sqlite_engine = create_engine(database_url, echo=echo, connect_args={"check_same_thread": False})
        event.listen(sqlite_engine, "connect", _enable_sqlite_foreign_keys)
        return sqlite_engine
    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_recycle=1800,
        pool_size=10,
        max_overflow=20,
    )


DATABASE_URL = config.DATABASE_URL
engine = build_engine(DATABASE_URL, echo=config.DB_ECHO)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_active_database_url() -> str:
    return DATABASE_URL


def get_db() -> Generator[Session, None, None]:
    """Request-scoped session for FastAPI dependencies."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def verify_database_connection() -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error(
            "database.connection_failed",
            extra={"event": "database.connection_failed", "scheme": DATABASE_URL.split("://", 1)[0], "error": str(exc)},
        )
        return False
    return True


def missing_tables(expected: Iterable[str]) -> list[str]:
    """Tables from ``expected`` that are not present in the bound database."""
    present = set(inspect(engine).get_table_names())
    return sorted(set(expected) - present)
