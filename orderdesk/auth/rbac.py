"""Scope checks for the sales and payments routes."""

from __future__ import annotations

from collections.abc import Iterable

from orderdesk.core.exceptions import AuthorizationError

SALES_READ = "sales.read"
SALES_WRITE = "sales.write"
PAYMENTS_READ = "payments.read"
PAYMENTS_WRITE = "payments.write"
ALL_SCOPES = "*"

ROLE_SCOPES: dict[str, frozenset[str]] = {
    "admin": frozenset({ALL_SCOPES}),
    "manager": frozenset({SALES_READ, SALES_WRITE, PAYMENTS_READ, PAYMENTS_WRITE}),
    "sales": frozenset({SALES_READ, SALES_WRITE, PAYMENTS_READ}),
    "accounting": frozenset({SALES_READ, PAYMENTS_READ, PAYMENTS_WRITE}),
    "viewer": frozenset({SALES_READ, PAYMENTS_READ}),
}


def get_scopes_for_role(role: str) -> frozenset[str]:
    return ROLE_SCOPES.get(role.lower(), frozenset())


def missing_scopes(role: str, required: Iterable[str]) -> list[str]:
    """Scopes from ``required`` the role does not hold, sorted."""
    granted = get_scopes_for_role(role)
    if ALL_SCOPES in granted:
        return []
    return sorted(set(required) - granted)


def require_scopes(role: str, required: Iterable[str]) -> None:
    missing = missing_scopes(role, required)
    if missing:
        raise AuthorizationError(f"Role '{role}' is missing scopes: {', '.join(missing)}")
