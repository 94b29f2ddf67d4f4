from __future__ import annotations

import pytest

from orderdesk.auth.rbac import (
    PAYMENTS_WRITE,
    SALES_WRITE,
    get_scopes_for_role,
    missing_scopes,
    require_scopes,
)
from orderdesk.core.dependencies import resolve_actor
from orderdesk.core.exceptions import AuthenticationError, AuthorizationError


def test_role_scopes():
    assert missing_scopes("admin", ["sales.write", "payments.write"]) == []
    assert missing_scopes("Manager", ["sales.write"]) == []
    assert missing_scopes("viewer", ["sales.read", "payments.read"]) == []
    assert missing_scopes("viewer", ["payments.write", "sales.write"]) == ["payments.write", "sales.write"]
    assert get_scopes_for_role("auditor") == set()


def test_require_scopes_lists_missing():
    with pytest.raises(AuthorizationError, match="sales.write"):
        require_scopes("viewer", ["sales.read", "sales.write"])
    require_scopes("admin", ["anything.at.all"])


def test_resolve_actor_from_forwarded_headers():
    actor = resolve_actor(" user-7 ", "MANAGER")
    assert actor.user_id == "user-7"
    assert actor.role == "manager"

    with pytest.raises(AuthenticationError, match="X-User-Id"):
        resolve_actor(None, "manager")
    with pytest.raises(AuthenticationError, match="X-User-Role"):
        resolve_actor("user-7", " ")


def test_department_roles_split_sales_and_payments():
    assert missing_scopes("sales", [SALES_WRITE, PAYMENTS_WRITE]) == [PAYMENTS_WRITE]
    assert missing_scopes("accounting", [SALES_WRITE, PAYMENTS_WRITE]) == [SALES_WRITE]
    assert missing_scopes("admin", [SALES_WRITE, PAYMENTS_WRITE]) == []
