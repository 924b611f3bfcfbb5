"""Pydantic request/response schemas for the API."""

from app.schemas.api_token import (
    ApiTokenCreateRequest,
    ApiTokenCreateResponse,
    ApiTokenResponse,
    ApiTokenUpdateRequest,
)
from app.schemas.health import HealthResponse

__all__ = [
    "ApiTokenCreateRequest",
    "ApiTokenCreateResponse",
    "ApiTokenResponse",
    "ApiTokenUpdateRequest",
    "HealthResponse",
]
