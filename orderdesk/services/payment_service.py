"""Payment processor keeping invoice balances reconciled with payments."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Any

from orderdesk.core.config import PAYMENT_METHODS, get_config
from orderdesk.core.exceptions import NotFoundError
from orderdesk.models import Payment, PaymentMethod
from orderdesk.services.base_service import BaseService
from orderdesk.services.invoice_service import InvoiceService
from orderdesk.services.lookup_service import LookupService
from orderdesk.utils.ids import new_id
from orderdesk.utils.validators import (
    optional_non_empty_string,
    parse_choice,
    parse_date,
    parse_positive_number,
    require_non_empty_string,
    sanitize_text,
)

logger = logging.getLogger(__name__)


class PaymentService(BaseService):
    """Creates, amends and reverses payments.

    Every mutation is one unit of work: the payment row and the linked invoice
    balance are written together, with the invoice row locked while its new
    balance is computed.
    """

    def __init__(self, db=None) -> None:
        super().__init__(db)
        self.invoices = InvoiceService(db=self.db)
        self.lookups = LookupService(db=self.db)

    def list_payments(self) -> list[Payment]:
        return self.db.query(Payment).order_by(Payment.created_at.desc()).all()

    def get_payment(self, payment_id: str) -> Payment:
        payment = self.db.get(Payment, payment_id)
        if payment is None:
            raise NotFoundError(f"Payment not found: {payment_id}")
        return payment

    def _lock_payment(self, payment_id: str) -> Payment:
        """Re-read a payment under an exclusive row lock held until commit."""
        payment = (
            self.db.query(Payment)
            .filter(Payment.id == payment_id)
            .with_for_update()
            .populate_existing()
            .first()
        )
        if payment is None:
            raise NotFoundError(f"Payment not found: {payment_id}")
        return payment

    def describe(self, payment: Payment) -> dict[str, Any]:
        return {
            "id": payment.id,
            "invoice_id": payment.invoice_id,
            "client_id": payment.client_id,
            "client_name": self.lookups.client_name(payment.client_id),
            "amount": payment.amount,
            "payment_date": payment.payment_date,
            "payment_method": getattr(payment.payment_method, "value", payment.payment_method),
            "reference": payment.reference,
            "notes": payment.notes,
            "created_at": payment.created_at,
        }

    def create_payment(
        self,
        client_id: str,
        amount: Any,
        payment_date: str | date,
        invoice_id: str | None = None,
        payment_method: str | None = None,
        reference: str | None = None,
        notes: str | None = None,
    ) -> Payment:
        client_id = require_non_empty_string(client_id, "client_id")
        parsed_amount = parse_positive_number(amount, "amount")
        parsed_date = parse_date(payment_date, "payment_date")
        invoice_id = optional_non_empty_string(invoice_id, "invoice_id")
        method = parse_choice(
            payment_method or get_config().DEFAULT_PAYMENT_METHOD, "payment_method", PAYMENT_METHODS
        )

        with self.atomic():
            payment = Payment(
                id=new_id(),
                invoice_id=invoice_id,
                client_id=client_id,
                amount=parsed_amount,
                payment_date=parsed_date,
                payment_method=PaymentMethod(method),
                reference=sanitize_text(reference) or None,
                notes=sanitize_text(notes) or None,
            )
            self.db.add(payment)
            self.db.flush()
            if invoice_id:
                self.invoices.apply_payment_delta(invoice_id, parsed_amount)

        logger.info(
            "payment.created",
            extra={"event": "payment.created", "payment_id": payment.id, "invoice_id": invoice_id},
        )
        return payment

    def update_payment(
        self,
        payment_id: str,
        amount: Any = None,
        payment_date: str | date | None = None,
        payment_method: str | None = None,
        reference: str | None = None,
        notes: str | None = None,
    ) -> Payment:
        new_amount = parse_positive_number(amount, "amount") if amount is not None else None
        new_date = parse_date(payment_date, "payment_date") if payment_date is not None else None
        new_method = (
            parse_choice(payment_method, "payment_method", PAYMENT_METHODS) if payment_method is not None else None
        )

        with self.atomic():
            payment = self._lock_payment(payment_id)
            old_amount = payment.amount

            if new_amount is not None:
                payment.amount = new_amount
            if new_date is not None:
                payment.payment_date = new_date
            if new_method is not None:
                payment.payment_method = PaymentMethod(new_method)
            if reference is not None:
                payment.reference = sanitize_text(reference)
            if notes is not None:
                payment.notes = sanitize_text(notes)
            self.db.flush()

            if payment.invoice_id and new_amount is not None and new_amount != old_amount:
                self.invoices.apply_payment_delta(payment.invoice_id, new_amount - Decimal(old_amount))

        logger.info("payment.updated", extra={"event": "payment.updated", "payment_id": payment_id})
        return payment

    def delete_payment(self, payment_id: str) -> None:
        with self.atomic():
            payment = self._lock_payment(payment_id)
            invoice_id = payment.invoice_id
            amount = payment.amount
            self.db.delete(payment)
            self.db.flush()

            if invoice_id:
                self.invoices.apply_payment_delta(invoice_id, -Decimal(amount), reversal=True)

        logger.info(
            "payment.deleted",
            extra={"event": "payment.deleted", "payment_id": payment_id, "invoice_id": invoice_id},
        )
