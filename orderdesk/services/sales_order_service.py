"""Sales order lifecycle: drafts, quote-linked locking and confirmation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from decimal import Decimal
from typing import Any

from sqlalchemy.orm import Session, selectinload

from orderdesk.core.config import PAYMENT_TERMS, get_config
from orderdesk.core.exceptions import (
    DeleteConflictError,
    LockedFieldsConflictError,
    NotFoundError,
    ReadOnlyConflictError,
    ValidationError,
    VersionConflictError,
)
from orderdesk.models import SalesOrder, SalesOrderLine, SalesOrderStatus
from orderdesk.orchestration.state_machine import sales_order_state_machine
from orderdesk.services.base_service import BaseService
from orderdesk.services.lookup_service import LookupService
from orderdesk.services.project_provisioner import ProjectProvisioner, ProjectStore
from orderdesk.services.quote_link_guard import locked_fields
from orderdesk.utils.ids import new_id
from orderdesk.utils.validators import (
    optional_non_empty_string,
    optional_non_negative_number,
    optional_number,
    parse_choice,
    parse_non_negative_number,
    parse_positive_number,
    require_non_empty_string,
    sanitize_text,
)

logger = logging.getLogger(__name__)

SALES_ORDER_STATUSES = tuple(status.value for status in SalesOrderStatus)
DRAFT = SalesOrderStatus.DRAFT.value
CONFIRMED = SalesOrderStatus.CONFIRMED.value


def _status_value(status: Any) -> str:
    return getattr(status, "value", status)


def normalize_items(
    items: Any, product_name: Callable[[str], str] | None = None
) -> list[dict[str, Any]]:
    """Validate incoming line items, reporting the first bad field by index.

    A line that names a ``product_id`` but no ``product_name`` takes its display
    name from ``product_name(product_id)`` when a resolver is given.
    """
    if not isinstance(items, Sequence) or isinstance(items, (str, bytes)) or len(items) == 0:
        raise ValidationError("Items must be a non-empty array", field="items")

    normalized: list[dict[str, Any]] = []
    for index, item in enumerate(items):
        prefix = f"items[{index}]"
        if not isinstance(item, Mapping):
            raise ValidationError(f"{prefix} must be an object", field=prefix)
        product_id = item.get("product_id") or None
        name = item.get("product_name")
        if product_id and product_name is not None and not (isinstance(name, str) and name.strip()):
            name = product_name(product_id)
        name = require_non_empty_string(name, f"{prefix}.product_name")
        normalized.append(
            {
                "id": item.get("id") or None,
                "product_id": product_id,
                "product_name": name,
                "special_bid_id": item.get("special_bid_id") or None,
                "quantity": parse_positive_number(item.get("quantity"), f"{prefix}.quantity"),
                "unit_price": parse_non_negative_number(item.get("unit_price"), f"{prefix}.unit_price"),
                "discount": optional_non_negative_number(item.get("discount"), f"{prefix}.discount")
                or Decimal("0"),
                "note": sanitize_text(item.get("note")) or None,
                "product_cost": optional_number(item.get("product_cost"), f"{prefix}.product_cost")
                or Decimal("0"),
                "product_mol_percentage": optional_number(
                    item.get("product_mol_percentage"), f"{prefix}.product_mol_percentage"
                ),
                "special_bid_unit_price": optional_number(
                    item.get("special_bid_unit_price"), f"{prefix}.special_bid_unit_price"
                ),
                "special_bid_mol_percentage": optional_number(
                    item.get("special_bid_mol_percentage"), f"{prefix}.special_bid_mol_percentage"
                ),
            }
        )
    return normalized


def _build_lines(items: list[dict[str, Any]]) -> list[SalesOrderLine]:
    lines = []
    for position, item in enumerate(items):
        values = {key: value for key, value in item.items() if key != "id"}
        lines.append(SalesOrderLine(id=new_id(), position=position, **values))
    return lines


def _order_snapshot(order: SalesOrder) -> dict[str, Any]:
    return {
        "client_id": order.client_id,
        "client_name": order.client_name,
        "payment_terms": order.payment_terms,
        "discount": order.discount,
        "notes": order.notes,
    }


class SalesOrderService(BaseService):
    """Owns sales orders and their lines.

    Drafts are freely editable. Any other status makes the order read-only
    except for further status transitions; a quote-linked order additionally
    keeps the terms and lines it was created with. The first move into
    ``confirmed`` provisions one project per line in the same transaction.
    """

    def __init__(self, db: Session | None = None, provisioner: ProjectProvisioner | None = None) -> None:
        super().__init__(db)
        self.provisioner = provisioner or ProjectProvisioner(ProjectStore(self.db))
        self.lookups = LookupService(db=self.db)

    def list_orders(self) -> list[SalesOrder]:
        return (
            self.db.query(SalesOrder)
            .options(selectinload(SalesOrder.lines))
            .order_by(SalesOrder.created_at.desc())
            .all()
        )

    def get_order(self, order_id: str) -> SalesOrder:
        order = self.db.get(SalesOrder, order_id)
        if order is None:
            raise NotFoundError(f"Sales order not found: {order_id}")
        return order

    def create_order(
        self,
        client_id: str,
        client_name: str,
        items: Sequence[Mapping[str, Any]],
        linked_quote_id: str | None = None,
        payment_terms: str | None = None,
        discount: Any = None,
        notes: str | None = None,
    ) -> SalesOrder:
        client_id = require_non_empty_string(client_id, "client_id")
        client_name = require_non_empty_string(client_name, "client_name")
        normalized_items = normalize_items(items, self.lookups.product_name)
        terms = parse_choice(payment_terms or get_config().DEFAULT_PAYMENT_TERMS, "payment_terms", PAYMENT_TERMS)
        order_discount = optional_non_negative_number(discount, "discount") or Decimal("0")

        with self.atomic():
            order = SalesOrder(
                id=new_id(),
                linked_quote_id=optional_non_empty_string(linked_quote_id, "linked_quote_id"),
                client_id=client_id,
                client_name=client_name,
                payment_terms=terms,
                discount=order_discount,
                status=SalesOrderStatus.DRAFT,
                notes=sanitize_text(notes) or None,
                version=1,
            )
            order.lines = _build_lines(normalized_items)
            self.db.add(order)
            self.db.flush()

        logger.info(
            "sales_order.created",
            extra={"event": "sales_order.created", "order_id": order.id, "line_count": len(order.lines)},
        )
        return order

    def update_order(
        self,
        order_id: str,
        client_id: str | None = None,
        client_name: str | None = None,
        payment_terms: str | None = None,
        discount: Any = None,
        status: str | None = None,
        notes: str | None = None,
        items: Sequence[Mapping[str, Any]] | None = None,
        expected_version: int | None = None,
    ) -> SalesOrder:
        """Apply a partial update; ``None`` keeps the stored value."""
        patch: dict[str, Any] = {
            "client_id": optional_non_empty_string(client_id, "client_id"),
            "client_name": optional_non_empty_string(client_name, "client_name"),
            "payment_terms": (
                parse_choice(payment_terms, "payment_terms", PAYMENT_TERMS) if payment_terms is not None else None
            ),
            "discount": optional_non_negative_number(discount, "discount"),
            "notes": sanitize_text(notes) if notes is not None else None,
        }
        new_status = parse_choice(status, "status", SALES_ORDER_STATUSES) if status is not None else None
        normalized_items = normalize_items(items, self.lookups.product_name) if items is not None else None

        with self.atomic():
            order = self.get_order(order_id)
            if expected_version is not None and expected_version != order.version:
                raise VersionConflictError(order.version)

            current_status = _status_value(order.status)
            status_change_only = (
                new_status is not None
                and normalized_items is None
                and all(value is None for value in patch.values())
            )
            if current_status != DRAFT and not status_change_only:
                raise ReadOnlyConflictError(current_status)

            if order.linked_quote_id:
                fields = locked_fields(_order_snapshot(order), patch, order.lines, normalized_items)
                if fields:
                    logger.info(
                        "sales_order.locked_fields_rejected",
                        extra={"event": "sales_order.locked_fields_rejected", "order_id": order_id, "fields": fields},
                    )
                    raise LockedFieldsConflictError(fields)

            if new_status is not None:
                sales_order_state_machine.assert_transition(current_status, new_status)
                order.status = SalesOrderStatus(new_status)

            for field, value in patch.items():
                if value is not None:
                    setattr(order, field, value)

            if normalized_items is not None and not order.linked_quote_id:
                order.lines.clear()
                self.db.flush()
                order.lines.extend(_build_lines(normalized_items))

            order.version += 1
            self.db.flush()

            if new_status == CONFIRMED and current_status != CONFIRMED:
                self._provision_projects(order)

        logger.info(
            "sales_order.updated",
            extra={"event": "sales_order.updated", "order_id": order_id, "status": _status_value(order.status)},
        )
        return order

    def delete_order(self, order_id: str) -> None:
        with self.atomic():
            order = self.get_order(order_id)
            current_status = _status_value(order.status)
            if current_status != DRAFT:
                raise DeleteConflictError(current_status)
            self.db.delete(order)

        logger.info("sales_order.deleted", extra={"event": "sales_order.deleted", "order_id": order_id})

    def _provision_projects(self, order: SalesOrder) -> None:
        year = order.created_at.year
        names = []
        for line in order.lines:
            project, _created = self.provisioner.ensure_project(
                client_id=order.client_id,
                client_name=order.client_name,
                product_name=line.product_name,
                year=year,
                note=line.note,
            )
            names.append(project.name)
        logger.info(
            "sales_order.projects_provisioned",
            extra={"event": "sales_order.projects_provisioned", "order_id": order.id, "project_names": names},
        )
