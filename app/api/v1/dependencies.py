"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions and application services.
All services are built from infrastructure implementations here;
routes depend only on these dependencies, not on infra directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services.api_token_service import ApiTokenService
from app.application.services.secret_codec import SecretCodec
from app.core.config import get_config_provider
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import (
    ApiTokenRepository,
    TokenPermissionRepository,
)


def get_secret_codec() -> SecretCodec:
    """Secret codec bound to the process-wide config provider."""
    return SecretCodec(get_config_provider())


def _build_api_token_service(db: AsyncSession, codec: SecretCodec) -> ApiTokenService:
    return ApiTokenService(
        token_repo=ApiTokenRepository(db),
        permission_repo=TokenPermissionRepository(db),
        secret_codec=codec,
    )


async def get_api_token_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    codec: Annotated[SecretCodec, Depends(get_secret_codec)],
) -> ApiTokenService:
    """API token service for read operations (list, get by id)."""
    return _build_api_token_service(db, codec)


async def get_api_token_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    codec: Annotated[SecretCodec, Depends(get_secret_codec)],
) -> ApiTokenService:
    """API token service for writes (create, update, revoke) in one transaction."""
    return _build_api_token_service(db, codec)
