"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.api_token_repo import ApiTokenRepository
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.token_permission_repo import (
    TokenPermissionRepository,
)

__all__ = [
    "ApiTokenRepository",
    "BaseRepository",
    "TokenPermissionRepository",
]
