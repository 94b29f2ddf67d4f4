from __future__ import annotations

from decimal import Decimal

import pytest
from fastapi import HTTPException

from orderdesk.api.v1 import health, payments
from orderdesk.main import create_app
from orderdesk.models import Invoice, InvoiceStatus, PaymentMethod
from orderdesk.schemas.payments import PaymentCreateRequest, PaymentUpdateRequest

MANAGER = {"x_user_id": "user-1", "x_user_role": "manager"}


def test_health_endpoint_works():
    response = health.health()
    assert response["status"] == "ok"
    assert response["service"] == "orderdesk"


def test_app_mounts_versioned_routes():
    paths = set(create_app().openapi()["paths"])
    assert {"/api/v1/health", "/api/v1/sales", "/api/v1/sales/{order_id}", "/api/v1/payments"}.issubset(paths)


def test_payment_lifecycle_through_endpoints(db_session, invoice):
    created = payments.create_payment(
        PaymentCreateRequest(
            invoice_id="inv-1",
            client_id="client-acme",
            amount="60",
            payment_date="2026-03-01",
            payment_method="credit_card",
        ),
        db=db_session,
        **MANAGER,
    )
    assert created.client_name == "Acme"
    assert created.payment_method == PaymentMethod.CREDIT_CARD
    assert created.model_dump(mode="json")["amount"] == 60.0

    updated = payments.update_payment(created.id, PaymentUpdateRequest(amount="100"), db=db_session, **MANAGER)
    assert updated.amount == Decimal("100")
    invoice = db_session.get(Invoice, "inv-1")
    assert invoice.amount_paid == Decimal("100")
    assert invoice.status == InvoiceStatus.PAID

    listed = payments.list_payments(db=db_session, **MANAGER)
    assert [row.id for row in listed] == [created.id]

    response = payments.delete_payment(created.id, db=db_session, **MANAGER)
    assert response.status_code == 204
    assert db_session.get(Invoice, "inv-1").status == InvoiceStatus.SENT


def test_payment_validation_and_missing_rows(db_session, invoice):
    with pytest.raises(HTTPException) as exc:
        payments.create_payment(
            PaymentCreateRequest(client_id="client-acme", amount="0", payment_date="2026-03-01"),
            db=db_session,
            **MANAGER,
        )
    assert exc.value.status_code == 400
    assert exc.value.detail["field"] == "amount"

    with pytest.raises(HTTPException) as exc:
        payments.delete_payment("missing", db=db_session, **MANAGER)
    assert exc.value.status_code == 404


def test_viewer_cannot_write_payments(db_session, invoice):
    with pytest.raises(HTTPException) as exc:
        payments.update_payment(
            "any", PaymentUpdateRequest(notes="x"), db=db_session, x_user_id="user-2", x_user_role="viewer"
        )
    assert exc.value.status_code == 403
