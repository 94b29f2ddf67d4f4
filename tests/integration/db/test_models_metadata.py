from __future__ import annotations

from orderdesk.models import Base
import orderdesk.models  # noqa: F401


def test_model_metadata_contains_target_tables():
    expected = {
        "clients",
        "products",
        "quotes",
        "sales_orders",
        "sales_order_lines",
        "invoices",
        "payments",
        "projects",
    }
    assert expected == set(Base.metadata.tables.keys())


def test_order_lines_cascade_with_their_order():
    lines = Base.metadata.tables["sales_order_lines"]
    order_fk = next(fk for fk in lines.foreign_keys if fk.column.table.name == "sales_orders")
    product_fk = next(fk for fk in lines.foreign_keys if fk.column.table.name == "products")
    assert order_fk.ondelete == "CASCADE"
    assert product_fk.ondelete == "SET NULL"
