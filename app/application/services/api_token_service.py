"""API token application service: create, update, revoke and look up tokens.

Orchestrates validation, access key generation, persistence and permission
reconciliation. Callers must run writes within a single DB transaction (use
the transactional session dependency) so that a token row is never left
without its permissions.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from typing import Any

from app.application.dtos.api_token import (
    ApiTokenCreate,
    ApiTokenResult,
    ApiTokenUpdate,
    ApiTokenWithSecret,
    TokenPermissionResult,
)
from app.application.interfaces.repositories import (
    IApiTokenRepository,
    ITokenPermissionRepository,
)
from app.application.interfaces.services import ISecretCodec
from app.application.services.permission_reconciler import diff_permissions
from app.application.services.permission_validator import validate_token_permissions
from app.domain.enums import ApiTokenType
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.shared.logging import get_logger

logger = get_logger(__name__)

# Columns a caller may look tokens up by.
LOOKUP_FIELDS = frozenset({"id", "name", "description", "type", "access_key"})


class ApiTokenService:
    """Issues, updates, revokes and reads API tokens (TokenStore facade)."""

    def __init__(
        self,
        token_repo: IApiTokenRepository,
        permission_repo: ITokenPermissionRepository,
        secret_codec: ISecretCodec,
    ) -> None:
        self.token_repo = token_repo
        self.permission_repo = permission_repo
        self.secret_codec = secret_codec

    async def create(self, data: ApiTokenCreate) -> ApiTokenWithSecret:
        """Create a token and return it with its plaintext access key (only occurrence).

        Raises:
            ValidationException: Blank name.
            InvalidPermissionsException: Non-custom token with permissions.
            MissingPermissionsException: Custom token without permissions.
            PersistenceException: The store rejected the write (e.g. duplicate name).
        """
        _require_name(data.name)
        validate_token_permissions(data.type, data.permissions)
        token_type = ApiTokenType(data.type)

        access_key = self.secret_codec.generate_secret()
        created = await self.token_repo.create_token(
            name=data.name,
            token_type=token_type,
            access_key=self.secret_codec.hash(access_key),
            description=data.description,
        )

        if token_type is ApiTokenType.CUSTOM:
            permissions = await self.permission_repo.create_many(
                created.id, _unique(data.permissions or [])
            )
            created = _with_permissions(created, permissions)

        logger.info("API token created: id=%s type=%s", created.id, token_type.value)
        return ApiTokenWithSecret(token=created, access_key=access_key)

    async def update(self, token_id: str, data: ApiTokenUpdate) -> ApiTokenResult:
        """Update name, description, type and permissions of a token.

        The invariant is checked against the effective type (new type if given,
        else the stored one). For custom tokens only the permission difference
        is written; leaving custom removes every stored permission.

        Raises:
            ValidationException: Blank name.
            ResourceNotFoundException: Token does not exist.
            InvalidPermissionsException / MissingPermissionsException: Invariant violated.
            PersistenceException: The store rejected the write.
        """
        if data.name is not None:
            _require_name(data.name)
        existing = await self.token_repo.find_one({"id": token_id})
        if existing is None:
            raise ResourceNotFoundException("api_token", token_id)

        effective_type = data.type if data.type is not None else existing.type
        validate_token_permissions(effective_type, data.permissions)

        changes = data.attribute_changes()
        token = (
            await self.token_repo.update_token(token_id, changes) if changes else existing
        )

        if token.type is ApiTokenType.CUSTOM:
            current = await self.token_repo.load_permissions(token_id)
            diff = diff_permissions(current, data.permissions or [])
            if diff.to_delete:
                await self.permission_repo.delete_many(
                    token_id, [p.id for p in diff.to_delete]
                )
            if diff.to_create:
                await self.permission_repo.create_many(token_id, sorted(diff.to_create))
            logger.debug(
                "API token %s permissions reconciled: +%d -%d",
                token_id,
                len(diff.to_create),
                len(diff.to_delete),
            )
            token = _with_permissions(
                token, await self.token_repo.load_permissions(token_id)
            )
        elif existing.type is ApiTokenType.CUSTOM:
            removed = await self.permission_repo.delete_all_for_token(token_id)
            logger.debug("API token %s left custom type; removed %d permissions", token_id, removed)
            token = _with_permissions(token, None)

        logger.info("API token updated: id=%s type=%s", token_id, token.type.value)
        return token

    async def revoke(self, token_id: str) -> ApiTokenResult:
        """Delete a token and its permissions; return the deleted token.

        Raises:
            ResourceNotFoundException: Token does not exist.
        """
        revoked = await self.token_repo.delete_token(token_id)
        logger.info("API token revoked: id=%s", token_id)
        return revoked

    async def get_by_id(self, token_id: str) -> ApiTokenResult | None:
        return await self.get_by(id=token_id)

    async def get_by_name(self, name: str) -> ApiTokenResult | None:
        return await self.get_by(name=name)

    async def get_by(self, **criteria: Any) -> ApiTokenResult | None:
        """Return the token matching all criteria, or None.

        No criteria returns None rather than an arbitrary token.

        Raises:
            ValidationException: If a criterion is not a lookup field.
        """
        if not criteria:
            return None
        unknown = set(criteria) - LOOKUP_FIELDS
        if unknown:
            raise ValidationException(
                f"Cannot look up API tokens by: {', '.join(sorted(unknown))}",
                field=sorted(unknown)[0],
            )
        return await self.token_repo.find_one(criteria)

    async def list_tokens(self) -> list[ApiTokenResult]:
        """Return all tokens sorted by name (ascending)."""
        return await self.token_repo.find_many(order_by="name")

    async def exists(self, **criteria: Any) -> bool:
        return await self.get_by(**criteria) is not None

    def hash(self, access_key: str) -> str:
        """Hash an access key the way it is stored (for request authentication)."""
        return self.secret_codec.hash(access_key)

    def ensure_salt_configured(self) -> None:
        self.secret_codec.ensure_salt_configured()


def _require_name(name: str) -> None:
    if not name or not name.strip():
        raise ValidationException("API token name must not be blank", field="name")


def _unique(actions: list[str]) -> list[str]:
    """Drop repeated actions, keeping first occurrence order."""
    return list(dict.fromkeys(actions))


def _with_permissions(
    token: ApiTokenResult, permissions: Iterable[TokenPermissionResult] | None
) -> ApiTokenResult:
    if permissions is None:
        return replace(token, permissions=None)
    return replace(
        token, permissions=tuple(sorted(permissions, key=lambda p: p.action))
    )
