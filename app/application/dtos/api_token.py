"""DTOs for API token use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime

from app.domain.enums import ApiTokenType


@dataclass(frozen=True)
class TokenPermissionResult:
    """Permission read-model: one granted action bound to a token."""

    id: str
    action: str
    token_id: str


@dataclass(frozen=True)
class ApiTokenResult:
    """API token public projection (never carries the access key or its hash).

    permissions is None for non-custom tokens and the granted permissions
    (sorted by action) for custom tokens.
    """

    id: str
    name: str
    description: str | None
    type: ApiTokenType
    created_at: datetime
    permissions: tuple[TokenPermissionResult, ...] | None = None

    @property
    def actions(self) -> list[str] | None:
        """Granted actions, or None when the token is not custom."""
        if self.permissions is None:
            return None
        return [p.action for p in self.permissions]


@dataclass(frozen=True)
class ApiTokenWithSecret:
    """Result of token creation: the public projection plus the plaintext access key.

    This is the only place the plaintext access key ever appears.
    """

    token: ApiTokenResult
    access_key: str


@dataclass(frozen=True)
class ApiTokenCreate:
    """Input for creating a token."""

    name: str
    type: ApiTokenType
    description: str | None = None
    permissions: list[str] | None = None


@dataclass(frozen=True)
class ApiTokenUpdate:
    """Input for updating a token (partial; None means unchanged).

    description uses an explicit flag so that it can be cleared to None.
    """

    name: str | None = None
    type: ApiTokenType | None = None
    description: str | None = None
    permissions: list[str] | None = None
    description_set: bool = field(default=False, compare=False)

    def attribute_changes(self) -> dict[str, object]:
        """Column changes to persist (excludes permissions)."""
        changes: dict[str, object] = {}
        if self.name is not None:
            changes["name"] = self.name
        if self.type is not None:
            changes["type"] = self.type
        if self.description is not None or self.description_set:
            changes["description"] = self.description
        return changes
