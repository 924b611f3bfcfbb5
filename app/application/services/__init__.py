"""Application services: secret codec, permission validation/reconciliation, API tokens."""

from app.application.services.api_token_service import ApiTokenService
from app.application.services.permission_reconciler import (
    PermissionDiff,
    diff_permissions,
)
from app.application.services.permission_validator import validate_token_permissions
from app.application.services.secret_codec import SecretCodec

__all__ = [
    "ApiTokenService",
    "PermissionDiff",
    "SecretCodec",
    "diff_permissions",
    "validate_token_permissions",
]
