"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    IApiTokenRepository,
    ITokenPermissionRepository,
)
from app.application.interfaces.services import IConfigProvider, ISecretCodec

__all__ = [
    "IApiTokenRepository",
    "IConfigProvider",
    "ISecretCodec",
    "ITokenPermissionRepository",
]
