"""Field locking for sales orders linked to a quote.

A quote-linked order keeps the commercial terms it was created with. Given the
persisted order and an incoming patch, ``locked_fields`` reports every field
whose requested value would diverge. The comparison is pure and total.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

LOCKED_SCALAR_FIELDS = ("client_id", "client_name", "payment_terms", "discount", "notes")
ITEMS_FIELD = "items"


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _number(value: Any) -> Decimal | str:
    if value is None or value == "":
        return Decimal("0")
    try:
        return Decimal(str(value).replace(",", ".")).normalize()
    except (InvalidOperation, ValueError):
        return str(value)


def _scalar_differs(field: str, incoming: Any, existing: Any) -> bool:
    if field == "discount":
        return _number(incoming) != _number(existing)
    if field == "notes":
        return _text(incoming) != _text(existing)
    return incoming != existing


def _get(line: Any, key: str) -> Any:
    if isinstance(line, Mapping):
        return line.get(key)
    return getattr(line, key, None)


def normalize_line(line: Any) -> tuple:
    return (
        _text(_get(line, "id")),
        _text(_get(line, "product_id")),
        _text(_get(line, "product_name")),
        _text(_get(line, "special_bid_id")),
        _number(_get(line, "quantity")),
        _number(_get(line, "unit_price")),
        _number(_get(line, "discount")),
    )


def _sort_key(normalized: tuple) -> str:
    if normalized[0]:
        return normalized[0]
    return "|".join(str(part) for part in normalized[1:])


def normalize_lines(lines: Iterable[Any]) -> list[tuple]:
    """Reduce lines to canonical tuples in an order-independent sequence."""
    return sorted((normalize_line(line) for line in lines), key=_sort_key)


def lines_match(left: Iterable[Any], right: Iterable[Any]) -> bool:
    normalized_left = normalize_lines(left)
    normalized_right = normalize_lines(right)
    if len(normalized_left) != len(normalized_right):
        return False
    return all(a == b for a, b in zip(normalized_left, normalized_right))


def locked_fields(
    existing: Mapping[str, Any],
    patch: Mapping[str, Any],
    existing_lines: Iterable[Any] | None = None,
    incoming_lines: Iterable[Any] | None = None,
) -> list[str]:
    """Return the names of fields the patch would change on a quote-linked order."""
    fields: list[str] = []
    for field in LOCKED_SCALAR_FIELDS:
        incoming = patch.get(field)
        if incoming is None:
            continue
        if _scalar_differs(field, incoming, existing.get(field)):
            fields.append(field)

    if incoming_lines is not None and not lines_match(existing_lines or [], incoming_lines):
        fields.append(ITEMS_FIELD)
    return fields
