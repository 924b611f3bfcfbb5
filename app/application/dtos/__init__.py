"""Application DTOs (no ORM dependency)."""

from app.application.dtos.api_token import (
    ApiTokenCreate,
    ApiTokenResult,
    ApiTokenUpdate,
    ApiTokenWithSecret,
    TokenPermissionResult,
)

__all__ = [
    "ApiTokenCreate",
    "ApiTokenResult",
    "ApiTokenUpdate",
    "ApiTokenWithSecret",
    "TokenPermissionResult",
]
