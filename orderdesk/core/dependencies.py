"""Dependency providers for API handlers."""

from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass

from sqlalchemy.orm import Session

from orderdesk.core.exceptions import AuthenticationError
from orderdesk.database.db import get_db


@dataclass(frozen=True)
class Actor:
    """Already-authenticated caller as forwarded by the gateway."""

    user_id: str
    role: str


def get_db_session() -> Generator[Session, None, None]:
    """Yield SQLAlchemy session for dependency injection."""
    yield from get_db()


def resolve_actor(user_id: str | None, role: str | None) -> Actor:
    """Build the actor from forwarded identity headers."""
    if not user_id or not user_id.strip():
        raise AuthenticationError("X-User-Id header is required.")
    if not role or not role.strip():
        raise AuthenticationError("X-User-Role header is required.")
    return Actor(user_id=user_id.strip(), role=role.strip().lower())
