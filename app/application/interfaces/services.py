"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services and collaborators (DIP).
"""

from __future__ import annotations

from typing import Any, Protocol


# Configuration provider interface
class IConfigProvider(Protocol):
    """Protocol for process-wide configuration (read at startup and on demand)."""

    def get(self, key: str) -> Any:
        """Return the value for key (None when unset)."""

    def set(self, key: str, value: Any) -> None:
        """Store value under key for the rest of the process lifetime."""


# Secret codec interface
class ISecretCodec(Protocol):
    """Protocol for access key generation and hashing."""

    def generate_secret(self) -> str:
        """Return a new high-entropy printable secret."""

    def hash(self, secret: str) -> str:
        """Return the keyed one-way digest of secret."""

    def ensure_salt_configured(self) -> None:
        """Resolve the hashing salt at startup or raise ConfigurationException."""
