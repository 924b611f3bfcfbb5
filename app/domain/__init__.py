"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import ApiTokenType
from app.domain.exceptions import (
    ApiTokenServiceException,
    ConfigurationException,
    InvalidPermissionsException,
    MissingPermissionsException,
    PersistenceException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)

__all__ = [
    # Enums
    "ApiTokenType",
    # Exceptions
    "ApiTokenServiceException",
    "ConfigurationException",
    "InvalidPermissionsException",
    "MissingPermissionsException",
    "PersistenceException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "ValidationException",
]
