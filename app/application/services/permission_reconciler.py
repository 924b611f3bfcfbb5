"""Permission reconciler: minimal create/delete set between stored and requested actions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from app.application.dtos.api_token import TokenPermissionResult


@dataclass(frozen=True)
class PermissionDiff:
    """Actions to grant and stored permissions to remove."""

    to_create: frozenset[str]
    to_delete: tuple[TokenPermissionResult, ...]

    @property
    def is_empty(self) -> bool:
        return not self.to_create and not self.to_delete


def diff_permissions(
    current: Iterable[TokenPermissionResult],
    desired: Iterable[str],
) -> PermissionDiff:
    """Diff current permissions against desired actions, keyed by action.

    Actions present on both sides are left alone. Result does not depend on
    input order, and diffing a set against its own actions is empty.
    """
    current_by_action = {p.action: p for p in current}
    desired_actions = set(desired)
    to_delete = tuple(
        sorted(
            (p for action, p in current_by_action.items() if action not in desired_actions),
            key=lambda p: p.action,
        )
    )
    to_create = frozenset(a for a in desired_actions if a not in current_by_action)
    return PermissionDiff(to_create=to_create, to_delete=to_delete)
