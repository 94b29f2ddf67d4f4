"""Shared authorization and error mapping helpers for API v1 route modules."""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status

from orderdesk.auth.rbac import require_scopes
from orderdesk.core.dependencies import Actor, resolve_actor
from orderdesk.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DeleteConflictError,
    LockedFieldsConflictError,
    NotFoundError,
    OrderDeskException,
    ReadOnlyConflictError,
    ValidationError,
    VersionConflictError,
)


def authorize(user_id: str | None, role: str | None, scopes: list[str]) -> Actor:
    try:
        actor = resolve_actor(user_id, role)
        require_scopes(actor.role, scopes)
    except OrderDeskException as exc:
        raise to_http_exception(exc) from exc
    return actor


def _error_detail(exc: OrderDeskException) -> dict[str, Any]:
    detail: dict[str, Any] = {"error": str(exc)}
    if isinstance(exc, ValidationError) and exc.field:
        detail["field"] = exc.field
    if isinstance(exc, (ReadOnlyConflictError, DeleteConflictError)):
        detail["current_status"] = exc.current_status
    if isinstance(exc, LockedFieldsConflictError):
        detail["fields"] = exc.fields
    if isinstance(exc, VersionConflictError):
        detail["current_version"] = exc.current_version
    return detail


def to_http_exception(exc: OrderDeskException) -> HTTPException:
    """Map a domain error to the HTTP status and structured body callers expect."""
    if isinstance(exc, AuthenticationError):
        code = status.HTTP_401_UNAUTHORIZED
    elif isinstance(exc, AuthorizationError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(exc, ValidationError):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, ConflictError):
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=code, detail=_error_detail(exc))
