"""Sales order endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, Response, status
from sqlalchemy.orm import Session

from orderdesk.api.v1._authz import authorize, to_http_exception
from orderdesk.auth.rbac import SALES_READ, SALES_WRITE
from orderdesk.core.dependencies import get_db_session
from orderdesk.core.exceptions import OrderDeskException
from orderdesk.schemas.sales import SalesOrderCreateRequest, SalesOrderResponse, SalesOrderUpdateRequest
from orderdesk.services.sales_order_service import SalesOrderService

router = APIRouter(prefix="/sales", tags=["sales"])


@router.get("", response_model=list[SalesOrderResponse])
def list_sales(
    db: Session = Depends(get_db_session),
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
    x_user_role: str | None = Header(default=None, alias="X-User-Role"),
) -> list[SalesOrderResponse]:
    authorize(x_user_id, x_user_role, scopes=[SALES_READ])
    orders = SalesOrderService(db=db).list_orders()
    return [SalesOrderResponse.model_validate(order) for order in orders]


@router.post("", response_model=SalesOrderResponse, status_code=status.HTTP_201_CREATED)
def create_sale(
    payload: SalesOrderCreateRequest,
    db: Session = Depends(get_db_session),
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
    x_user_role: str | None = Header(default=None, alias="X-User-Role"),
) -> SalesOrderResponse:
    authorize(x_user_id, x_user_role, scopes=[SALES_WRITE])
    try:
        order = SalesOrderService(db=db).create_order(
            client_id=payload.client_id,
            client_name=payload.client_name,
            items=[item.model_dump() for item in payload.items],
            linked_quote_id=payload.linked_quote_id,
            payment_terms=payload.payment_terms,
            discount=payload.discount,
            notes=payload.notes,
        )
    except OrderDeskException as exc:
        raise to_http_exception(exc) from exc
    return SalesOrderResponse.model_validate(order)


@router.put("/{order_id}", response_model=SalesOrderResponse)
def update_sale(
    order_id: str,
    payload: SalesOrderUpdateRequest,
    db: Session = Depends(get_db_session),
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
    x_user_role: str | None = Header(default=None, alias="X-User-Role"),
) -> SalesOrderResponse:
    authorize(x_user_id, x_user_role, scopes=[SALES_WRITE])
    try:
        order = SalesOrderService(db=db).update_order(
            order_id,
            client_id=payload.client_id,
            client_name=payload.client_name,
            payment_terms=payload.payment_terms,
            discount=payload.discount,
            status=payload.status,
            notes=payload.notes,
            items=[item.model_dump() for item in payload.items] if payload.items is not None else None,
            expected_version=payload.expected_version,
        )
    except OrderDeskException as exc:
        raise to_http_exception(exc) from exc
    return SalesOrderResponse.model_validate(order)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sale(
    order_id: str,
    db: Session = Depends(get_db_session),
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
    x_user_role: str | None = Header(default=None, alias="X-User-Role"),
) -> Response:
    authorize(x_user_id, x_user_role, scopes=[SALES_WRITE])
    try:
        SalesOrderService(db=db).delete_order(order_id)
    except OrderDeskException as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
