"""Secret codec for API tokens: access key generation and salted HMAC hashing."""

from __future__ import annotations

import hashlib
import hmac
import logging
import os
import secrets
import warnings
from collections.abc import Mapping

from app.application.interfaces.services import IConfigProvider
from app.domain.exceptions import ConfigurationException

logger = logging.getLogger(__name__)

# Bytes of entropy in a generated access key (hex-encoded to twice as many characters).
ACCESS_KEY_BYTES = 128

# Configuration key holding the HMAC salt (env ADMIN_API_TOKEN_SALT).
API_TOKEN_SALT_KEY = "admin_api_token_salt"

# Environment variable read directly by older deployments.
LEGACY_SALT_ENV_VAR = "API_TOKEN_SALT"

_LEGACY_SALT_WARNING = (
    "[deprecated] Reading the API token salt directly from the API_TOKEN_SALT "
    "environment variable will be removed. Set ADMIN_API_TOKEN_SALT instead "
    "(keep the value in the environment or .env, never in source control)."
)

_MISSING_SALT_MESSAGE = (
    "Missing API token salt. Set ADMIN_API_TOKEN_SALT in the environment or .env "
    "(generate one with: openssl rand -base64 16)."
)


class SecretCodec:
    """Generates access keys and hashes them with HMAC-SHA512 keyed by the configured salt.

    The salt is read from the config provider on every hash() call, so a salt
    resolved by ensure_salt_configured() at startup is picked up without
    rebuilding the codec.
    """

    def __init__(
        self,
        config: IConfigProvider,
        environ: Mapping[str, str] | None = None,
        digestmod: str = "sha512",
    ) -> None:
        self._config = config
        self._environ = environ if environ is not None else os.environ
        self._digestmod = digestmod

    @staticmethod
    def generate_secret() -> str:
        """Return a new access key: 128 random bytes from the OS CSPRNG, hex-encoded.

        Errors from the entropy source propagate; there is no weaker fallback.
        """
        return secrets.token_bytes(ACCESS_KEY_BYTES).hex()

    def hash(self, secret: str) -> str:
        """Return hex HMAC digest of secret keyed by the configured salt.

        Raises:
            ConfigurationException: If no salt is configured.
        """
        salt = self._config.get(API_TOKEN_SALT_KEY)
        if not salt:
            raise ConfigurationException(_MISSING_SALT_MESSAGE, setting=API_TOKEN_SALT_KEY)
        return hmac.new(
            salt.encode(), secret.encode(), getattr(hashlib, self._digestmod)
        ).hexdigest()

    def ensure_salt_configured(self) -> None:
        """Resolve the salt once at startup: configured value first, then legacy env var.

        The legacy value is written back into the config provider so later
        hash() calls only consult configuration.

        Raises:
            ConfigurationException: If neither source provides a salt.
        """
        if self._config.get(API_TOKEN_SALT_KEY):
            return
        legacy = self._environ.get(LEGACY_SALT_ENV_VAR)
        if not legacy:
            raise ConfigurationException(_MISSING_SALT_MESSAGE, setting=API_TOKEN_SALT_KEY)
        warnings.warn(_LEGACY_SALT_WARNING, DeprecationWarning, stacklevel=2)
        logger.warning(_LEGACY_SALT_WARNING)
        self._config.set(API_TOKEN_SALT_KEY, legacy)
