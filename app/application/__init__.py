"""Application layer: DTOs, interfaces, services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, config provider).
"""

from app.application.interfaces import (
    IApiTokenRepository,
    IConfigProvider,
    ISecretCodec,
    ITokenPermissionRepository,
)
from app.application.services.api_token_service import ApiTokenService
from app.application.services.secret_codec import SecretCodec

__all__ = [
    "ApiTokenService",
    "IApiTokenRepository",
    "IConfigProvider",
    "ISecretCodec",
    "ITokenPermissionRepository",
    "SecretCodec",
]
