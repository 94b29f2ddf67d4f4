"""Invoice balance arithmetic used by the payment processor."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from orderdesk.models.enums import InvoiceStatus

ZERO = Decimal("0")


@dataclass(frozen=True)
class LedgerEntry:
    """New paid amount and status for an invoice after a payment delta."""

    amount_paid: Decimal
    status: InvoiceStatus


def status_for(total: Decimal, amount_paid: Decimal) -> InvoiceStatus:
    if amount_paid >= total:
        return InvoiceStatus.PAID
    return InvoiceStatus.SENT


def apply_delta(
    total: Decimal,
    amount_paid: Decimal,
    delta: Decimal,
    clamp_at_zero: bool = False,
) -> LedgerEntry:
    """Compute the balance after adding a signed ``delta`` to ``amount_paid``.

    Callers own locking and persistence. Reversals pass ``clamp_at_zero`` so a
    balance already adjusted elsewhere never goes negative.
    """
    new_paid = Decimal(amount_paid) + Decimal(delta)
    if clamp_at_zero:
        new_paid = max(ZERO, new_paid)
    return LedgerEntry(amount_paid=new_paid, status=status_for(Decimal(total), new_paid))
