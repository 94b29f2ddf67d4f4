from __future__ import annotations

import pytest
from fastapi import HTTPException

from orderdesk.api.v1 import sales
from orderdesk.models import SalesOrderStatus
from orderdesk.schemas.sales import SalesOrderCreateRequest, SalesOrderUpdateRequest

MANAGER = {"x_user_id": "user-1", "x_user_role": "manager"}
VIEWER = {"x_user_id": "user-2", "x_user_role": "viewer"}


def _payload(**overrides) -> SalesOrderCreateRequest:
    values = {
        "client_id": "client-acme",
        "client_name": "Acme",
        "payment_terms": "30gg",
        "discount": "5",
        "items": [
            {"product_name": "Widget", "quantity": 2, "unit_price": "10,50"},
            {"product_name": "Gadget", "quantity": 1, "unit_price": 5},
        ],
    }
    values.update(overrides)
    return SalesOrderCreateRequest(**values)


def test_sales_endpoints_require_identity(db_session, acme):
    with pytest.raises(HTTPException) as exc:
        sales.list_sales(db=db_session, x_user_id=None, x_user_role=None)
    assert exc.value.status_code == 401


def test_viewer_cannot_create_sales(db_session, acme):
    with pytest.raises(HTTPException) as exc:
        sales.create_sale(_payload(), db=db_session, **VIEWER)
    assert exc.value.status_code == 403


def test_create_and_list_sales(db_session, acme):
    created = sales.create_sale(_payload(), db=db_session, **MANAGER)

    assert created.status == SalesOrderStatus.DRAFT
    assert created.version == 1
    assert [item.product_name for item in created.items] == ["Widget", "Gadget"]
    assert created.model_dump(mode="json")["items"][0]["unit_price"] == 10.5

    listed = sales.list_sales(db=db_session, **VIEWER)
    assert [order.id for order in listed] == [created.id]


def test_create_sale_reports_offending_item(db_session, acme):
    payload = _payload(items=[{"product_name": "Widget", "quantity": 0, "unit_price": 1}])
    with pytest.raises(HTTPException) as exc:
        sales.create_sale(payload, db=db_session, **MANAGER)
    assert exc.value.status_code == 400
    assert exc.value.detail["field"] == "items[0].quantity"


def test_confirmed_sale_edit_is_conflict(db_session, acme):
    created = sales.create_sale(_payload(), db=db_session, **MANAGER)
    confirmed = sales.update_sale(
        created.id, SalesOrderUpdateRequest(status="confirmed"), db=db_session, **MANAGER
    )
    assert confirmed.status == SalesOrderStatus.CONFIRMED

    with pytest.raises(HTTPException) as exc:
        sales.update_sale(created.id, SalesOrderUpdateRequest(notes="late change"), db=db_session, **MANAGER)
    assert exc.value.status_code == 409
    assert exc.value.detail["current_status"] == "confirmed"

    with pytest.raises(HTTPException) as exc:
        sales.delete_sale(created.id, db=db_session, **MANAGER)
    assert exc.value.status_code == 409
    assert exc.value.detail["current_status"] == "confirmed"


def test_quote_linked_sale_reports_locked_fields(db_session, acme):
    created = sales.create_sale(_payload(linked_quote_id="quote-acme-1"), db=db_session, **MANAGER)

    with pytest.raises(HTTPException) as exc:
        sales.update_sale(
            created.id,
            SalesOrderUpdateRequest(discount="10", client_name="Acme Srl"),
            db=db_session,
            **MANAGER,
        )
    assert exc.value.status_code == 409
    assert exc.value.detail["fields"] == ["client_name", "discount"]


def test_stale_version_is_conflict(db_session, acme):
    created = sales.create_sale(_payload(), db=db_session, **MANAGER)
    sales.update_sale(created.id, SalesOrderUpdateRequest(notes="v2", expected_version=1), db=db_session, **MANAGER)

    with pytest.raises(HTTPException) as exc:
        sales.update_sale(
            created.id, SalesOrderUpdateRequest(notes="v3", expected_version=1), db=db_session, **MANAGER
        )
    assert exc.value.status_code == 409
    assert exc.value.detail["current_version"] == 2


def test_delete_draft_and_missing_sale(db_session, acme):
    created = sales.create_sale(_payload(), db=db_session, **MANAGER)

    response = sales.delete_sale(created.id, db=db_session, **MANAGER)
    assert response.status_code == 204

    with pytest.raises(HTTPException) as exc:
        sales.delete_sale(created.id, db=db_session, **MANAGER)
    assert exc.value.status_code == 404
