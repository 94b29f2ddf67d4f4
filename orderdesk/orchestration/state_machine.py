"""Canonical state transition helpers for sales orders."""

from __future__ import annotations

from orderdesk.core.exceptions import ConflictError
from orderdesk.models.enums import SalesOrderStatus


class InvalidTransitionError(ConflictError):
    """Raised when a disallowed state transition is attempted."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(f"Transition not allowed: {current} -> {target}")
        self.current = current
        self.target = target


class StateMachine:
    """Transition table; staying in the current state is always allowed."""

    def __init__(self, transitions: dict[str, set[str]]) -> None:
        self._transitions = transitions

    def can_transition(self, current: str, target: str) -> bool:
        if current == target:
            return True
        return target in self._transitions.get(current, set())

    def assert_transition(self, current: str, target: str) -> None:
        if not self.can_transition(current=current, target=target):
            raise InvalidTransitionError(current, target)


SALES_ORDER_TRANSITIONS: dict[str, set[str]] = {
    SalesOrderStatus.DRAFT.value: {
        SalesOrderStatus.SENT.value,
        SalesOrderStatus.CONFIRMED.value,
        SalesOrderStatus.DENIED.value,
    },
    SalesOrderStatus.SENT.value: {
        SalesOrderStatus.DRAFT.value,
        SalesOrderStatus.CONFIRMED.value,
        SalesOrderStatus.DENIED.value,
    },
    SalesOrderStatus.DENIED.value: {SalesOrderStatus.DRAFT.value},
    SalesOrderStatus.CONFIRMED.value: set(),
}

sales_order_state_machine = StateMachine(SALES_ORDER_TRANSITIONS)
