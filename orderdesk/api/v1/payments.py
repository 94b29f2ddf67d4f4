"""Payment endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, Response, status
from sqlalchemy.orm import Session

from orderdesk.api.v1._authz import authorize, to_http_exception
from orderdesk.auth.rbac import PAYMENTS_READ, PAYMENTS_WRITE
from orderdesk.core.dependencies import get_db_session
from orderdesk.core.exceptions import OrderDeskException
from orderdesk.schemas.payments import PaymentCreateRequest, PaymentResponse, PaymentUpdateRequest
from orderdesk.services.payment_service import PaymentService

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("", response_model=list[PaymentResponse])
def list_payments(
    db: Session = Depends(get_db_session),
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
    x_user_role: str | None = Header(default=None, alias="X-User-Role"),
) -> list[PaymentResponse]:
    authorize(x_user_id, x_user_role, scopes=[PAYMENTS_READ])
    service = PaymentService(db=db)
    return [PaymentResponse(**service.describe(payment)) for payment in service.list_payments()]


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
def create_payment(
    payload: PaymentCreateRequest,
    db: Session = Depends(get_db_session),
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
    x_user_role: str | None = Header(default=None, alias="X-User-Role"),
) -> PaymentResponse:
    authorize(x_user_id, x_user_role, scopes=[PAYMENTS_WRITE])
    service = PaymentService(db=db)
    try:
        payment = service.create_payment(
            client_id=payload.client_id,
            amount=payload.amount,
            payment_date=payload.payment_date,
            invoice_id=payload.invoice_id,
            payment_method=payload.payment_method,
            reference=payload.reference,
            notes=payload.notes,
        )
    except OrderDeskException as exc:
        raise to_http_exception(exc) from exc
    return PaymentResponse(**service.describe(payment))


@router.put("/{payment_id}", response_model=PaymentResponse)
def update_payment(
    payment_id: str,
    payload: PaymentUpdateRequest,
    db: Session = Depends(get_db_session),
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
    x_user_role: str | None = Header(default=None, alias="X-User-Role"),
) -> PaymentResponse:
    authorize(x_user_id, x_user_role, scopes=[PAYMENTS_WRITE])
    service = PaymentService(db=db)
    try:
        payment = service.update_payment(
            payment_id,
            amount=payload.amount,
            payment_date=payload.payment_date,
            payment_method=payload.payment_method,
            reference=payload.reference,
            notes=payload.notes,
        )
    except OrderDeskException as exc:
        raise to_http_exception(exc) from exc
    return PaymentResponse(**service.describe(payment))


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_payment(
    payment_id: str,
    db: Session = Depends(get_db_session),
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
    x_user_role: str | None = Header(default=None, alias="X-User-Role"),
) -> Response:
    authorize(x_user_id, x_user_role, scopes=[PAYMENTS_WRITE])
    try:
        PaymentService(db=db).delete_payment(payment_id)
    except OrderDeskException as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
