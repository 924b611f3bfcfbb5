"""Domain enumerations for the API token service.

Enums represent fixed sets of domain values (e.g. token type).
"""

from enum import Enum


class ApiTokenType(str, Enum):
    """API token type.

    Determines the permission model of a token: read-only and full-access
    tokens carry an implicit grant; custom tokens carry an explicit set of
    permission actions.
    """

    READ_ONLY = "read-only"
    FULL_ACCESS = "full-access"
    CUSTOM = "custom"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid token type values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [token_type.value for token_type in cls]
