"""API tokens API: create, list, get, update, revoke."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import (
    get_api_token_service,
    get_api_token_service_for_write,
)
from app.application.dtos.api_token import ApiTokenCreate, ApiTokenUpdate
from app.application.services.api_token_service import ApiTokenService
from app.domain.exceptions import ResourceNotFoundException
from app.schemas.api_token import (
    ApiTokenCreateRequest,
    ApiTokenCreateResponse,
    ApiTokenResponse,
    ApiTokenUpdateRequest,
)

router = APIRouter()


@router.post(
    "",
    response_model=ApiTokenCreateResponse,
    response_model_exclude_none=True,
    status_code=201,
)
async def create_api_token(
    body: ApiTokenCreateRequest,
    service: Annotated[ApiTokenService, Depends(get_api_token_service_for_write)],
):
    """Create an API token. The access key is returned in this response only."""
    created = await service.create(
        ApiTokenCreate(
            name=body.name,
            type=body.type,
            description=body.description,
            permissions=body.permissions,
        )
    )
    response = ApiTokenResponse.from_result(created.token)
    return ApiTokenCreateResponse(**response.model_dump(), access_key=created.access_key)


@router.get("", response_model=list[ApiTokenResponse], response_model_exclude_none=True)
async def list_api_tokens(
    service: Annotated[ApiTokenService, Depends(get_api_token_service)],
):
    """List all API tokens sorted by name."""
    tokens = await service.list_tokens()
    return [ApiTokenResponse.from_result(t) for t in tokens]


@router.get(
    "/{token_id}", response_model=ApiTokenResponse, response_model_exclude_none=True
)
async def get_api_token(
    token_id: str,
    service: Annotated[ApiTokenService, Depends(get_api_token_service)],
):
    """Get API token by id."""
    token = await service.get_by_id(token_id)
    if not token:
        raise ResourceNotFoundException("api_token", token_id)
    return ApiTokenResponse.from_result(token)


@router.put(
    "/{token_id}", response_model=ApiTokenResponse, response_model_exclude_none=True
)
async def update_api_token(
    token_id: str,
    body: ApiTokenUpdateRequest,
    service: Annotated[ApiTokenService, Depends(get_api_token_service_for_write)],
):
    """Update API token (name, description, type, permissions)."""
    updated = await service.update(
        token_id,
        ApiTokenUpdate(
            name=body.name,
            type=body.type,
            description=body.description,
            permissions=body.permissions,
            description_set="description" in body.model_fields_set,
        ),
    )
    return ApiTokenResponse.from_result(updated)


@router.delete(
    "/{token_id}", response_model=ApiTokenResponse, response_model_exclude_none=True
)
async def revoke_api_token(
    token_id: str,
    service: Annotated[ApiTokenService, Depends(get_api_token_service_for_write)],
):
    """Revoke (delete) an API token and its permissions."""
    revoked = await service.revoke(token_id)
    return ApiTokenResponse.from_result(revoked)
