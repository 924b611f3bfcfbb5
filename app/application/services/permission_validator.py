"""Permission validator: only custom tokens carry explicit permissions."""

from __future__ import annotations

from collections.abc import Collection

from app.domain.enums import ApiTokenType
from app.domain.exceptions import (
    InvalidPermissionsException,
    MissingPermissionsException,
    ValidationException,
)


def validate_token_permissions(
    token_type: ApiTokenType | str,
    permissions: Collection[str] | None,
) -> None:
    """Check the type/permission invariant for a token about to be written.

    Raises:
        ValidationException: If token_type is not a known token type.
        InvalidPermissionsException: If a non-custom token has permissions.
        MissingPermissionsException: If a custom token has no permissions.
    """
    try:
        token_type = ApiTokenType(token_type)
    except ValueError:
        raise ValidationException(
            f"Invalid token type '{token_type}'. Must be one of: {ApiTokenType.values()}",
            field="type",
        ) from None
    if token_type is not ApiTokenType.CUSTOM and permissions:
        raise InvalidPermissionsException(token_type.value)
    if token_type is ApiTokenType.CUSTOM and not permissions:
        raise MissingPermissionsException()
