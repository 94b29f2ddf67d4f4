"""Invoice access for balance reconciliation."""

from __future__ import annotations

import logging
from decimal import Decimal

from orderdesk.core.exceptions import ValidationError
from orderdesk.models import Invoice
from orderdesk.services.balance_ledger import LedgerEntry, apply_delta
from orderdesk.services.base_service import BaseService

logger = logging.getLogger(__name__)


class InvoiceService(BaseService):
    """Reads invoices and writes balance changes computed by the ledger.

    Methods here never commit; they run inside the caller's unit of work.
    """

    def lock_invoice(self, invoice_id: str) -> Invoice:
        """Read an invoice with an exclusive row lock held until commit."""
        invoice = (
            self.db.query(Invoice)
            .filter(Invoice.id == invoice_id)
            .with_for_update()
            .populate_existing()
            .first()
        )
        if invoice is None:
            raise ValidationError(f"Invoice not found: {invoice_id}", field="invoice_id")
        return invoice

    def apply_payment_delta(self, invoice_id: str, delta: Decimal, reversal: bool = False) -> LedgerEntry:
        invoice = self.lock_invoice(invoice_id)
        entry = apply_delta(invoice.total, invoice.amount_paid, delta, clamp_at_zero=reversal)
        invoice.amount_paid = entry.amount_paid
        invoice.status = entry.status
        self.db.flush()
        logger.info(
            "invoice.balance_applied",
            extra={
                "event": "invoice.balance_applied",
                "invoice_id": invoice_id,
                "delta": str(delta),
                "amount_paid": str(entry.amount_paid),
                "status": entry.status.value,
            },
        )
        return entry
