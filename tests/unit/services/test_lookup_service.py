from __future__ import annotations

from decimal import Decimal

from sqlalchemy.exc import OperationalError

from orderdesk.models import Product
from orderdesk.services.lookup_service import UNKNOWN_CLIENT, UNKNOWN_PRODUCT, LookupService


def test_lookup_resolves_names(db_session, acme):
    db_session.add(Product(id="prod-1", name="Widget", product_code="WID", unit_price=Decimal("10"), cost=Decimal("4")))
    db_session.commit()
    lookups = LookupService(db=db_session)

    assert lookups.client_name(acme.id) == "Acme"
    assert lookups.product_name("prod-1") == "Widget"


def test_lookup_falls_back_to_label(db_session, acme):
    lookups = LookupService(db=db_session)

    assert lookups.client_name(None) == UNKNOWN_CLIENT
    assert lookups.client_name("missing") == UNKNOWN_CLIENT
    assert lookups.product_name("") == UNKNOWN_PRODUCT


def test_lookup_tolerates_storage_errors(db_session, monkeypatch):
    lookups = LookupService(db=db_session)

    def _boom(*_args, **_kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(db_session, "get", _boom)
    assert lookups.client_name("client-acme") == UNKNOWN_CLIENT
