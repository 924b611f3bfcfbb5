"""Core: config and application bootstrap.

Single place for settings and the runtime config provider.
"""

from app.core.config import SettingsConfigProvider, get_config_provider, get_settings

__all__ = ["SettingsConfigProvider", "get_config_provider", "get_settings"]
