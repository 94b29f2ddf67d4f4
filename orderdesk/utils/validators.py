"""Deterministic input validators shared by the order and payment services.

Each helper returns the normalized value or raises ``ValidationError`` naming
the offending field, e.g. ``items[2].quantity``.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from orderdesk.core.exceptions import ValidationError

_LOCALIZED_NUMBER = re.compile(r"^[0-9]*([.][0-9]*)?$")
# Scale of the Numeric(12, 2) columns.
CENT = Decimal("0.01")


def sanitize_text(value: str | None, max_len: int = 20000) -> str:
    """Sanitize free-form content before persistence."""
    if value is None:
        return ""
    cleaned = str(value).replace("\x00", "").strip()
    return cleaned[:max_len]


def require_non_empty_string(value: Any, field: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    raise ValidationError(f"{field} is required", field=field)


def optional_non_empty_string(value: Any, field: str) -> str | None:
    if value is None or value == "":
        return None
    if isinstance(value, str) and value.strip():
        return value.strip()
    raise ValidationError(f"{field} must be a non-empty string if provided", field=field)


def parse_localized_number(value: Any, field: str) -> Decimal:
    """Parse numbers and numeric strings; a comma is accepted as decimal separator."""
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a valid number", field=field)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValidationError(f"{field} must be a valid number", field=field)
        return value
    if isinstance(value, (int, float)):
        try:
            parsed = Decimal(str(value))
        except InvalidOperation as exc:
            raise ValidationError(f"{field} must be a valid number", field=field) from exc
        if not parsed.is_finite():
            raise ValidationError(f"{field} must be a valid number", field=field)
        return parsed
    if isinstance(value, str):
        trimmed = value.strip()
        if not trimmed:
            raise ValidationError(f"{field} cannot be an empty string", field=field)
        normalized = trimmed.replace(",", ".")
        if not _LOCALIZED_NUMBER.match(normalized) or not any(ch.isdigit() for ch in normalized):
            raise ValidationError(f"{field} must be a valid number", field=field)
        return Decimal(normalized)
    raise ValidationError(f"{field} must be a valid number", field=field)


def to_cents(value: Decimal, field: str) -> Decimal:
    try:
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValidationError(f"{field} is out of range", field=field) from exc


def parse_positive_number(value: Any, field: str) -> Decimal:
    """Parse a number rounded to cents; it must still be above zero after rounding."""
    parsed = to_cents(parse_localized_number(value, field), field)
    if parsed <= 0:
        raise ValidationError(f"{field} must be greater than zero", field=field)
    return parsed


def parse_non_negative_number(value: Any, field: str) -> Decimal:
    parsed = to_cents(parse_localized_number(value, field), field)
    if parsed < 0:
        raise ValidationError(f"{field} must be zero or positive", field=field)
    return parsed


def optional_non_negative_number(value: Any, field: str) -> Decimal | None:
    if value is None or value == "":
        return None
    return parse_non_negative_number(value, field)


def optional_number(value: Any, field: str) -> Decimal | None:
    if value is None or value == "":
        return None
    return to_cents(parse_localized_number(value, field), field)


def parse_date(value: Any, field: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), "%Y-%m-%d").date()
        except ValueError as exc:
            raise ValidationError(f"{field} must be a date in YYYY-MM-DD format", field=field) from exc
    raise ValidationError(f"{field} is required", field=field)


def parse_choice(value: Any, field: str, choices: tuple[str, ...]) -> str:
    text = getattr(value, "value", value)
    if isinstance(text, str) and text in choices:
        return text
    raise ValidationError(f"{field} must be one of {', '.join(choices)}", field=field)
