from __future__ import annotations

from decimal import Decimal

import pytest
from sqlalchemy.orm import sessionmaker

from orderdesk.database.db import build_engine
from orderdesk.models import Base, Client, Invoice, InvoiceStatus, Quote, QuoteStatus


@pytest.fixture
def db_session():
    engine = build_engine("sqlite://")
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def acme(db_session):
    client = Client(id="client-acme", name="Acme", client_code="ACME")
    db_session.add(client)
    db_session.add(Quote(id="quote-acme-1", client_id=client.id, status=QuoteStatus.ACCEPTED))
    db_session.commit()
    return client


@pytest.fixture
def invoice(db_session, acme):
    row = Invoice(
        id="inv-1",
        client_id=acme.id,
        invoice_number="INV-2026-001",
        total=Decimal("100"),
        amount_paid=Decimal("0"),
        status=InvoiceStatus.SENT,
    )
    db_session.add(row)
    db_session.commit()
    return row
