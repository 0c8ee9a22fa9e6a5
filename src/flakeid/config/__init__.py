"""Configuration module using Pydantic Settings.

Provides the parse policy for snowflakes loaded from external payloads.

Usage:
    from flakeid.config import SnowflakeSettings

    settings = SnowflakeSettings(warn_on_malformed=True)
"""

from flakeid.config.settings import SnowflakeSettings, get_settings

__all__ = [
    "SnowflakeSettings",
    "get_settings",
]
