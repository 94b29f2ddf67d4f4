"""baseline schema for sales orders, invoices, payments and projects

Revision ID: 20261018_0001
Revises:
Create Date: 2026-10-18 00:00:01
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261018_0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "clients",
        sa.Column("id", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("client_code", sa.String(length=50), nullable=True),
        sa.Column("is_disabled", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("client_code"),
    )

    op.create_table(
        "products",
        sa.Column("id", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("product_code", sa.String(length=50), nullable=True),
        sa.Column("unit_price", sa.Numeric(12, 2), nullable=False),
        sa.Column("cost", sa.Numeric(12, 2), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("product_code"),
    )

    op.create_table(
        "quotes",
        sa.Column("id", sa.String(length=50), nullable=False),
        sa.Column("client_id", sa.String(length=50), nullable=False),
        sa.Column(
            "status",
            sa.Enum("DRAFT", "SENT", "ACCEPTED", "DENIED", name="quotestatus"),
            nullable=False,
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "sales_orders",
        sa.Column("id", sa.String(length=50), nullable=False),
        sa.Column("linked_quote_id", sa.String(length=50), nullable=True),
        sa.Column("client_id", sa.String(length=50), nullable=False),
        sa.Column("client_name", sa.String(length=255), nullable=False),
        sa.Column("payment_terms", sa.String(length=20), nullable=False),
        sa.Column("discount", sa.Numeric(12, 2), nullable=False),
        sa.Column(
            "status",
            sa.Enum("DRAFT", "SENT", "CONFIRMED", "DENIED", name="salesorderstatus"),
            nullable=False,
        ),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["linked_quote_id"], ["quotes.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_sales_orders_status", "sales_orders", ["status"])
    op.create_index("idx_sales_orders_client", "sales_orders", ["client_id"])

    op.create_table(
        "sales_order_lines",
        sa.Column("id", sa.String(length=50), nullable=False),
        sa.Column("order_id", sa.String(length=50), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("product_id", sa.String(length=50), nullable=True),
        sa.Column("product_name", sa.String(length=255), nullable=False),
        sa.Column("special_bid_id", sa.String(length=50), nullable=True),
        sa.Column("quantity", sa.Numeric(12, 2), nullable=False),
        sa.Column("unit_price", sa.Numeric(12, 2), nullable=False),
        sa.Column("discount", sa.Numeric(12, 2), nullable=False),
        sa.Column("note", sa.Text(), nullable=True),
        sa.Column("product_cost", sa.Numeric(12, 2), nullable=False),
        sa.Column("product_mol_percentage", sa.Numeric(6, 2), nullable=True),
        sa.Column("special_bid_unit_price", sa.Numeric(12, 2), nullable=True),
        sa.Column("special_bid_mol_percentage", sa.Numeric(6, 2), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["order_id"], ["sales_orders.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_sales_order_lines_order", "sales_order_lines", ["order_id"])

    op.create_table(
        "invoices",
        sa.Column("id", sa.String(length=50), nullable=False),
        sa.Column("client_id", sa.String(length=50), nullable=False),
        sa.Column("invoice_number", sa.String(length=64), nullable=True),
        sa.Column("total", sa.Numeric(12, 2), nullable=False),
        sa.Column("amount_paid", sa.Numeric(12, 2), nullable=False),
        sa.Column(
            "status",
            sa.Enum("DRAFT", "SENT", "PAID", "OVERDUE", "CANCELLED", name="invoicestatus"),
            nullable=False,
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("invoice_number"),
    )
    op.create_index("idx_invoices_status", "invoices", ["status"])

    op.create_table(
        "payments",
        sa.Column("id", sa.String(length=50), nullable=False),
        sa.Column("invoice_id", sa.String(length=50), nullable=True),
        sa.Column("client_id", sa.String(length=50), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("payment_date", sa.Date(), nullable=False),
        sa.Column(
            "payment_method",
            sa.Enum("CASH", "BANK_TRANSFER", "CREDIT_CARD", "CHECK", "OTHER", name="paymentmethod"),
            nullable=False,
        ),
        sa.Column("reference", sa.String(length=255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["invoice_id"], ["invoices.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_payments_invoice", "payments", ["invoice_id"])
    op.create_index("idx_payments_client", "payments", ["client_id"])

    op.create_table(
        "projects",
        sa.Column("id", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("client_id", sa.String(length=50), nullable=False),
        sa.Column("color", sa.String(length=20), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_disabled", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_projects_name_client", "projects", ["name", "client_id"])


def downgrade() -> None:
    op.drop_index("idx_projects_name_client", table_name="projects")
    op.drop_table("projects")
    op.drop_index("idx_payments_client", table_name="payments")
    op.drop_index("idx_payments_invoice", table_name="payments")
    op.drop_table("payments")
    op.drop_index("idx_invoices_status", table_name="invoices")
    op.drop_table("invoices")
    op.drop_index("idx_sales_order_lines_order", table_name="sales_order_lines")
    op.drop_table("sales_order_lines")
    op.drop_index("idx_sales_orders_client", table_name="sales_orders")
    op.drop_index("idx_sales_orders_status", table_name="sales_orders")
    op.drop_table("sales_orders")
    op.drop_table("quotes")
    op.drop_table("products")
    op.drop_table("clients")
