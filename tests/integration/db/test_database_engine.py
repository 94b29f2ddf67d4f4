from __future__ import annotations

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

import orderdesk.database.db as db_module
from orderdesk.models import Base


def test_sqlite_engine_enforces_foreign_keys():
    engine = db_module.build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)

    with engine.connect() as conn:
        assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1
        with pytest.raises(IntegrityError):
            conn.execute(
                text("INSERT INTO quotes (id, client_id, status, created_at, updated_at) "
                     "VALUES ('q-1', 'nobody', 'ACCEPTED', '2026-01-01', '2026-01-01')")
            )
    engine.dispose()


def test_missing_tables_reports_absent_schema(monkeypatch):
    engine = db_module.build_engine("sqlite://")
    Base.metadata.tables["clients"].create(bind=engine)
    monkeypatch.setattr(db_module, "engine", engine)

    assert db_module.missing_tables(["clients", "payments", "invoices"]) == ["invoices", "payments"]
    assert db_module.verify_database_connection() is True
    engine.dispose()
