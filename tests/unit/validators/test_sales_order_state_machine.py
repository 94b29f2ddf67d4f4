from __future__ import annotations

import pytest

from orderdesk.core.exceptions import ConflictError
from orderdesk.orchestration.state_machine import InvalidTransitionError, StateMachine, sales_order_state_machine


def test_state_machine_allows_valid_transition():
    sm = StateMachine({"draft": {"sent"}, "sent": {"confirmed"}})
    assert sm.can_transition("draft", "sent") is True
    assert sm.can_transition("sent", "sent") is True
    sm.assert_transition("sent", "confirmed")


def test_state_machine_rejects_invalid_transition():
    sm = StateMachine({"draft": {"sent"}})
    with pytest.raises(InvalidTransitionError) as exc:
        sm.assert_transition("draft", "confirmed")
    assert exc.value.current == "draft"
    assert exc.value.target == "confirmed"
    assert isinstance(exc.value, ConflictError)


@pytest.mark.parametrize(
    "current,target",
    [
        ("draft", "sent"),
        ("draft", "confirmed"),
        ("draft", "denied"),
        ("sent", "draft"),
        ("sent", "confirmed"),
        ("denied", "draft"),
        ("confirmed", "confirmed"),
    ],
)
def test_sales_order_transitions_allowed(current, target):
    assert sales_order_state_machine.can_transition(current, target) is True


@pytest.mark.parametrize(
    "current,target",
    [
        ("confirmed", "draft"),
        ("confirmed", "denied"),
        ("denied", "confirmed"),
        ("denied", "sent"),
    ],
)
def test_sales_order_transitions_rejected(current, target):
    with pytest.raises(InvalidTransitionError):
        sales_order_state_machine.assert_transition(current, target)
