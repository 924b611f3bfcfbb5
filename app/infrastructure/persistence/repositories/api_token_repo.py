"""API token repository. Read methods return ApiTokenResult (DTO); the access key hash never leaves."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.api_token import ApiTokenResult, TokenPermissionResult
from app.domain.enums import ApiTokenType
from app.domain.exceptions import (
    PersistenceException,
    ResourceNotFoundException,
    ValidationException,
)
from app.infrastructure.persistence.models.api_token import (
    ApiToken,
    ApiTokenPermission,
)
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc

# Columns usable in find_one / find_many filters and ordering.
_FILTERABLE = frozenset({"id", "name", "description", "type", "access_key", "created_at"})


def _permission_to_result(p: ApiTokenPermission) -> TokenPermissionResult:
    """Map ORM ApiTokenPermission to application TokenPermissionResult."""
    return TokenPermissionResult(id=p.id, action=p.action, token_id=p.token_id)


def _token_to_result(t: ApiToken) -> ApiTokenResult:
    """Map ORM ApiToken to the public projection (permissions only for custom tokens)."""
    token_type = ApiTokenType(t.type)
    permissions = None
    if token_type is ApiTokenType.CUSTOM:
        permissions = tuple(
            _permission_to_result(p) for p in sorted(t.permissions, key=lambda p: p.action)
        )
    return ApiTokenResult(
        id=t.id,
        name=t.name,
        description=t.description,
        type=token_type,
        created_at=ensure_utc(t.created_at) or t.created_at,
        permissions=permissions,
    )


def _column_value(value: Any) -> Any:
    return value.value if isinstance(value, ApiTokenType) else value


class ApiTokenRepository(BaseRepository[ApiToken]):
    """API token repository (IApiTokenRepository)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, ApiToken)

    def _conditions(self, filters: dict[str, Any]) -> list[Any]:
        unknown = set(filters) - _FILTERABLE
        if unknown:
            raise ValidationException(
                f"Unsupported API token filter: {', '.join(sorted(unknown))}",
                field=sorted(unknown)[0],
            )
        return [
            getattr(ApiToken, key) == _column_value(value)
            for key, value in filters.items()
        ]

    async def find_one(self, filters: dict[str, Any]) -> ApiTokenResult | None:
        """Return the first token matching all filters, or None (empty filters match nothing)."""
        if not filters:
            return None
        result = await self.db.execute(
            select(ApiToken)
            .where(*self._conditions(filters))
            .limit(1)
            .execution_options(populate_existing=True)
        )
        row = result.scalar_one_or_none()
        return _token_to_result(row) if row else None

    async def find_many(
        self,
        filters: dict[str, Any] | None = None,
        order_by: str = "name",
    ) -> list[ApiTokenResult]:
        if order_by not in _FILTERABLE:
            raise ValidationException(f"Cannot order API tokens by '{order_by}'", field=order_by)
        q = select(ApiToken).where(*self._conditions(filters or {}))
        q = q.order_by(getattr(ApiToken, order_by).asc(), ApiToken.id)
        result = await self.db.execute(q.execution_options(populate_existing=True))
        return [_token_to_result(t) for t in result.scalars().all()]

    async def create_token(
        self,
        name: str,
        token_type: ApiTokenType,
        access_key: str,
        description: str | None = None,
    ) -> ApiTokenResult:
        """Create a token row; return read-model DTO.

        Raises PersistenceException on unique constraint violation (e.g. duplicate name).
        """
        token = ApiToken(
            name=name,
            description=description,
            type=ApiTokenType(token_type).value,
            access_key=access_key,
            permissions=[],
        )
        try:
            created = await self.create(token)
        except IntegrityError:
            raise PersistenceException(
                f"API token with name '{name}' could not be created (constraint violation)",
                resource_type="api_token",
            ) from None
        return _token_to_result(created)

    async def update_token(self, token_id: str, changes: dict[str, Any]) -> ApiTokenResult:
        """Apply column changes to a token.

        Raises ResourceNotFoundException if absent, PersistenceException on constraint violation.
        """
        token = await self.get_by_id(token_id)
        if token is None:
            raise ResourceNotFoundException("api_token", token_id)
        for key, value in changes.items():
            if key not in ("name", "description", "type"):
                raise ValidationException(f"API token field '{key}' cannot be updated", field=key)
            setattr(token, key, _column_value(value))
        try:
            updated = await self.update(token)
        except IntegrityError:
            raise PersistenceException(
                f"API token {token_id} could not be updated (constraint violation)",
                resource_type="api_token",
            ) from None
        return _token_to_result(updated)

    async def delete_token(self, token_id: str) -> ApiTokenResult:
        """Delete a token and its permissions; return its projection as it was before deletion."""
        token = await self.get_by_id(token_id)
        if token is None:
            raise ResourceNotFoundException("api_token", token_id)
        deleted = _token_to_result(token)
        await self.delete(token)
        return deleted

    async def load_permissions(self, token_id: str) -> list[TokenPermissionResult]:
        result = await self.db.execute(
            select(ApiTokenPermission)
            .where(ApiTokenPermission.token_id == token_id)
            .order_by(ApiTokenPermission.action)
        )
        return [_permission_to_result(p) for p in result.scalars().all()]
