"""Custom exceptions for the orderdesk application."""

from __future__ import annotations


class OrderDeskException(Exception):
    """Base exception for orderdesk application."""

    pass


class ValidationError(OrderDeskException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class ReferencedEntityNotFoundError(ValidationError):
    """Raised when a write references a row that does not exist."""

    pass


class NotFoundError(OrderDeskException):
    """Raised when a resource is not found."""

    pass


class ConflictError(OrderDeskException):
    """Raised when a request conflicts with the current state of a resource."""

    pass


class ReadOnlyConflictError(ConflictError):
    """Raised when a non-draft sales order is edited."""

    def __init__(self, current_status: str) -> None:
        super().__init__("Non-draft sales orders are read-only")
        self.current_status = current_status


class LockedFieldsConflictError(ConflictError):
    """Raised when a quote-linked sales order would diverge from its quote."""

    def __init__(self, fields: list[str]) -> None:
        super().__init__("Quote-linked order details are read-only")
        self.fields = list(fields)


class DeleteConflictError(ConflictError):
    """Raised when deleting a sales order that is no longer a draft."""

    def __init__(self, current_status: str) -> None:
        super().__init__("Only draft sales orders can be deleted")
        self.current_status = current_status


class VersionConflictError(ConflictError):
    """Raised when the caller edited a stale copy of a sales order."""

    def __init__(self, current_version: int) -> None:
        super().__init__("Sales order was modified by another request")
        self.current_version = current_version


class ConfigurationError(OrderDeskException):
    """Raised when configuration is invalid."""

    pass


class AuthenticationError(OrderDeskException):
    """Raised when the caller identity cannot be resolved."""

    pass


class AuthorizationError(OrderDeskException):
    """Raised when the caller lacks a required scope."""

    pass
