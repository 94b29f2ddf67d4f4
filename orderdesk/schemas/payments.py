"""Payment request/response schemas for API contracts."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field

from orderdesk.models.enums import PaymentMethod
from orderdesk.schemas.common import Money, NumberInput


class PaymentCreateRequest(BaseModel):
    invoice_id: str | None = Field(default=None, max_length=50)
    client_id: str | None = Field(default=None, max_length=50)
    amount: NumberInput | None = None
    payment_date: str | None = Field(default=None, max_length=10)
    payment_method: str | None = Field(default=None, max_length=20)
    reference: str | None = Field(default=None, max_length=255)
    notes: str | None = Field(default=None, max_length=10000)


class PaymentUpdateRequest(BaseModel):
    amount: NumberInput | None = None
    payment_date: str | None = Field(default=None, max_length=10)
    payment_method: str | None = Field(default=None, max_length=20)
    reference: str | None = Field(default=None, max_length=255)
    notes: str | None = Field(default=None, max_length=10000)


class PaymentResponse(BaseModel):
    id: str
    invoice_id: str | None = None
    client_id: str
    client_name: str
    amount: Money
    payment_date: date
    payment_method: PaymentMethod
    reference: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
