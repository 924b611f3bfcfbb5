"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.api_token import ApiTokenResult, TokenPermissionResult
    from app.domain.enums import ApiTokenType


# API token repository interface
class IApiTokenRepository(Protocol):
    """Protocol for API token repository (DIP).

    Every read returns the public projection; the stored access key hash
    never leaves the repository.
    """

    async def find_one(self, filters: dict[str, Any]) -> ApiTokenResult | None:
        """Return the first token matching all filters (equality), or None."""

    async def find_many(
        self,
        filters: dict[str, Any] | None = None,
        order_by: str = "name",
    ) -> list[ApiTokenResult]:
        """Return tokens matching filters, ordered ascending by order_by."""

    async def create_token(
        self,
        name: str,
        token_type: ApiTokenType,
        access_key: str,
        description: str | None = None,
    ) -> ApiTokenResult:
        """Insert a token row with the hashed access key. Raises PersistenceException on conflict."""

    async def update_token(
        self, token_id: str, changes: dict[str, Any]
    ) -> ApiTokenResult:
        """Apply column changes. Raises ResourceNotFoundException / PersistenceException."""

    async def delete_token(self, token_id: str) -> ApiTokenResult:
        """Delete the token (permissions cascade); return its projection before deletion."""

    async def load_permissions(self, token_id: str) -> list[TokenPermissionResult]:
        """Return the token's current permissions (sorted by action)."""


# Token permission repository interface
class ITokenPermissionRepository(Protocol):
    """Protocol for token permission rows (created/deleted only via token lifecycle)."""

    async def create_many(
        self, token_id: str, actions: list[str]
    ) -> list[TokenPermissionResult]:
        """Bulk insert one permission per action bound to token_id."""

    async def delete_many(self, token_id: str, permission_ids: list[str]) -> int:
        """Delete the given permissions of token_id; return number of rows deleted."""

    async def delete_all_for_token(self, token_id: str) -> int:
        """Delete every permission of token_id; return number of rows deleted."""
