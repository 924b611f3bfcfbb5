"""API token API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.application.dtos.api_token import ApiTokenResult
from app.domain.enums import ApiTokenType


class ApiTokenCreateRequest(BaseModel):
    """Request body for creating an API token."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=500)
    type: ApiTokenType
    permissions: list[str] | None = Field(default=None, max_length=500)


class ApiTokenUpdateRequest(BaseModel):
    """Request body for updating an API token (partial).

    permissions must be sent in full for custom tokens (it is the desired set).
    """

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=500)
    type: ApiTokenType | None = None
    permissions: list[str] | None = Field(default=None, max_length=500)


class ApiTokenResponse(BaseModel):
    """API token list/detail response. Never includes the access key."""

    model_config = ConfigDict(use_enum_values=True)

    id: str
    name: str
    description: str | None
    type: ApiTokenType
    created_at: datetime
    permissions: list[str] | None = None

    @classmethod
    def from_result(cls, token: ApiTokenResult) -> "ApiTokenResponse":
        return cls(
            id=token.id,
            name=token.name,
            description=token.description,
            type=token.type,
            created_at=token.created_at,
            permissions=token.actions,
        )


class ApiTokenCreateResponse(ApiTokenResponse):
    """Response for POST /api-tokens: the only response carrying the plaintext access key."""

    access_key: str = Field(..., description="Plaintext access key; shown once and never again")
