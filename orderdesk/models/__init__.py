"""SQLAlchemy model package for the order/payment schema."""

from orderdesk.models.base import Base
from orderdesk.models.client import Client, Product, Quote
from orderdesk.models.enums import InvoiceStatus, PaymentMethod, QuoteStatus, SalesOrderStatus
from orderdesk.models.invoice import Invoice
from orderdesk.models.payment import Payment
from orderdesk.models.project import Project
from orderdesk.models.sales_order import SalesOrder, SalesOrderLine

__all__ = [
    "Base",
    "Client",
    "Invoice",
    "InvoiceStatus",
    "Payment",
    "PaymentMethod",
    "Product",
    "Project",
    "Quote",
    "QuoteStatus",
    "SalesOrder",
    "SalesOrderLine",
    "SalesOrderStatus",
]
