"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.api_token import ApiToken, ApiTokenPermission
from app.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin

__all__ = [
    "ApiToken",
    "ApiTokenPermission",
    "CuidMixin",
    "TimestampMixin",
]
