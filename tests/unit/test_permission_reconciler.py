"""Tests for permission reconciliation (diff keyed by action)."""

from app.application.dtos.api_token import TokenPermissionResult
from app.application.services.permission_reconciler import diff_permissions


def _perms(*actions: str, token_id: str = "tok") -> list[TokenPermissionResult]:
    return [TokenPermissionResult(id=f"p-{a}", action=a, token_id=token_id) for a in actions]


def test_replaces_only_changed_actions() -> None:
    """{a, b} -> [b, c]: delete a, create c, leave b alone."""
    diff = diff_permissions(_perms("a", "b"), ["b", "c"])
    assert diff.to_create == {"c"}
    assert [p.action for p in diff.to_delete] == ["a"]
    assert diff.to_delete[0].id == "p-a"


def test_same_actions_is_empty() -> None:
    current = _perms("x", "y", "z")
    diff = diff_permissions(current, [p.action for p in current])
    assert diff.is_empty
    assert diff.to_create == frozenset()
    assert diff.to_delete == ()


def test_no_action_in_both_sets() -> None:
    diff = diff_permissions(_perms("a", "b", "c"), ["c", "d", "e", "a"])
    deleted = {p.action for p in diff.to_delete}
    assert deleted == {"b"}
    assert diff.to_create == {"d", "e"}
    assert not deleted & diff.to_create


def test_order_independent() -> None:
    one = diff_permissions(_perms("a", "b", "c"), ["d", "b"])
    two = diff_permissions(list(reversed(_perms("a", "b", "c"))), ["b", "d"])
    assert one == two


def test_duplicate_desired_actions_created_once() -> None:
    diff = diff_permissions([], ["a", "a", "b"])
    assert diff.to_create == {"a", "b"}


def test_empty_desired_deletes_everything() -> None:
    diff = diff_permissions(_perms("a", "b"), [])
    assert {p.action for p in diff.to_delete} == {"a", "b"}
    assert diff.to_create == frozenset()
