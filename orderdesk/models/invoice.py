"""Invoice model module."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Enum, ForeignKey, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from orderdesk.models.base import AuditMixin, Base
from orderdesk.models.enums import InvoiceStatus


class Invoice(Base, AuditMixin):
    __tablename__ = "invoices"
    __table_args__ = (Index("idx_invoices_status", "status"),)

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    client_id: Mapped[str] = mapped_column(ForeignKey("clients.id", ondelete="RESTRICT"), nullable=False)
    invoice_number: Mapped[str | None] = mapped_column(String(64), unique=True)
    total: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    amount_paid: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=Decimal("0"), nullable=False)
    status: Mapped[InvoiceStatus] = mapped_column(Enum(InvoiceStatus), default=InvoiceStatus.SENT, nullable=False)
