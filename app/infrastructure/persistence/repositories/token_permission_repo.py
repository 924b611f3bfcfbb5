"""API token permission repository: bulk grant/removal scoped to one token."""

from __future__ import annotations

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.api_token import TokenPermissionResult
from app.domain.exceptions import PersistenceException
from app.infrastructure.persistence.models.api_token import ApiTokenPermission
from app.infrastructure.persistence.repositories.base import BaseRepository


class TokenPermissionRepository(BaseRepository[ApiTokenPermission]):
    """Token permission repository (ITokenPermissionRepository).

    Every delete is scoped by token_id so that grants of other tokens with
    the same action are never touched.
    """

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, ApiTokenPermission)

    async def create_many(
        self, token_id: str, actions: list[str]
    ) -> list[TokenPermissionResult]:
        """Insert one permission per action bound to token_id.

        Raises PersistenceException on unique (token_id, action) violation.
        """
        if not actions:
            return []
        rows = [ApiTokenPermission(token_id=token_id, action=action) for action in actions]
        try:
            self.db.add_all(rows)
            await self.db.flush()
        except IntegrityError:
            raise PersistenceException(
                f"Permissions for API token {token_id} could not be created (constraint violation)",
                resource_type="api_token_permission",
            ) from None
        return [
            TokenPermissionResult(id=p.id, action=p.action, token_id=p.token_id)
            for p in rows
        ]

    async def delete_many(self, token_id: str, permission_ids: list[str]) -> int:
        if not permission_ids:
            return 0
        result = await self.db.execute(
            delete(ApiTokenPermission).where(
                ApiTokenPermission.token_id == token_id,
                ApiTokenPermission.id.in_(permission_ids),
            )
        )
        return result.rowcount

    async def delete_all_for_token(self, token_id: str) -> int:
        result = await self.db.execute(
            delete(ApiTokenPermission).where(ApiTokenPermission.token_id == token_id)
        )
        return result.rowcount
