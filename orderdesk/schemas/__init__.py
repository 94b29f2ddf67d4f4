"""Pydantic schema package for API contracts."""

from orderdesk.schemas.common import Money, NumberInput
from orderdesk.schemas.payments import PaymentCreateRequest, PaymentResponse, PaymentUpdateRequest
from orderdesk.schemas.sales import (
    SalesOrderCreateRequest,
    SalesOrderItemRequest,
    SalesOrderItemResponse,
    SalesOrderResponse,
    SalesOrderUpdateRequest,
)

__all__ = [
    "Money",
    "NumberInput",
    "PaymentCreateRequest",
    "PaymentResponse",
    "PaymentUpdateRequest",
    "SalesOrderCreateRequest",
    "SalesOrderItemRequest",
    "SalesOrderItemResponse",
    "SalesOrderResponse",
    "SalesOrderUpdateRequest",
]
