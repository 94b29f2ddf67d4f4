"""Sales order and sales order line models."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Enum, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from orderdesk.models.base import AuditMixin, Base
from orderdesk.models.enums import SalesOrderStatus


class SalesOrder(Base, AuditMixin):
    __tablename__ = "sales_orders"
    __table_args__ = (
        Index("idx_sales_orders_status", "status"),
        Index("idx_sales_orders_client", "client_id"),
    )

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    linked_quote_id: Mapped[str | None] = mapped_column(ForeignKey("quotes.id", ondelete="RESTRICT"))
    client_id: Mapped[str] = mapped_column(ForeignKey("clients.id", ondelete="RESTRICT"), nullable=False)
    client_name: Mapped[str] = mapped_column(String(255), nullable=False)
    payment_terms: Mapped[str] = mapped_column(String(20), default="immediate", nullable=False)
    discount: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=Decimal("0"), nullable=False)
    status: Mapped[SalesOrderStatus] = mapped_column(
        Enum(SalesOrderStatus), default=SalesOrderStatus.DRAFT, nullable=False
    )
    notes: Mapped[str | None] = mapped_column(Text)
    version: Mapped[int] = mapped_column(Integer, default=1, nullable=False)

    lines: Mapped[list["SalesOrderLine"]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="SalesOrderLine.position",
        passive_deletes=True,
    )


class SalesOrderLine(Base, AuditMixin):
    __tablename__ = "sales_order_lines"
    __table_args__ = (Index("idx_sales_order_lines_order", "order_id"),)

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    order_id: Mapped[str] = mapped_column(ForeignKey("sales_orders.id", ondelete="CASCADE"), nullable=False)
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    product_id: Mapped[str | None] = mapped_column(ForeignKey("products.id", ondelete="SET NULL"))
    product_name: Mapped[str] = mapped_column(String(255), nullable=False)
    special_bid_id: Mapped[str | None] = mapped_column(String(50))
    quantity: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    discount: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=Decimal("0"), nullable=False)
    note: Mapped[str | None] = mapped_column(Text)
    product_cost: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=Decimal("0"), nullable=False)
    product_mol_percentage: Mapped[Decimal | None] = mapped_column(Numeric(6, 2))
    special_bid_unit_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    special_bid_mol_percentage: Mapped[Decimal | None] = mapped_column(Numeric(6, 2))

    order: Mapped[SalesOrder] = relationship(back_populates="lines")
