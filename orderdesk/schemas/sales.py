"""Sales order request/response schemas for API contracts."""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from orderdesk.models.enums import SalesOrderStatus
from orderdesk.schemas.common import Money, NumberInput


class SalesOrderItemRequest(BaseModel):
    id: str | None = Field(default=None, max_length=50)
    product_id: str | None = Field(default=None, max_length=50)
    product_name: str | None = Field(default=None, max_length=255)
    special_bid_id: str | None = Field(default=None, max_length=50)
    quantity: NumberInput | None = None
    unit_price: NumberInput | None = None
    discount: NumberInput | None = None
    note: str | None = Field(default=None, max_length=10000)
    product_cost: NumberInput | None = None
    product_mol_percentage: NumberInput | None = None
    special_bid_unit_price: NumberInput | None = None
    special_bid_mol_percentage: NumberInput | None = None


class SalesOrderCreateRequest(BaseModel):
    linked_quote_id: str | None = Field(default=None, max_length=50)
    client_id: str | None = Field(default=None, max_length=50)
    client_name: str | None = Field(default=None, max_length=255)
    items: list[SalesOrderItemRequest] = Field(default_factory=list)
    payment_terms: str | None = Field(default=None, max_length=20)
    discount: NumberInput | None = None
    notes: str | None = Field(default=None, max_length=10000)


class SalesOrderUpdateRequest(BaseModel):
    client_id: str | None = Field(default=None, max_length=50)
    client_name: str | None = Field(default=None, max_length=255)
    items: list[SalesOrderItemRequest] | None = None
    payment_terms: str | None = Field(default=None, max_length=20)
    discount: NumberInput | None = None
    status: str | None = Field(default=None, max_length=20)
    notes: str | None = Field(default=None, max_length=10000)
    expected_version: int | None = Field(default=None, ge=1)


class SalesOrderItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    order_id: str
    product_id: str | None = None
    product_name: str
    special_bid_id: str | None = None
    quantity: Money
    unit_price: Money
    discount: Money
    note: str | None = None
    product_cost: Money
    product_mol_percentage: Money | None = None
    special_bid_unit_price: Money | None = None
    special_bid_mol_percentage: Money | None = None


class SalesOrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    linked_quote_id: str | None = None
    client_id: str
    client_name: str
    payment_terms: str
    discount: Money
    status: SalesOrderStatus
    notes: str | None = None
    version: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
    items: list[SalesOrderItemResponse] = Field(
        default_factory=list, validation_alias=AliasChoices("items", "lines")
    )
