"""Configuration settings using Pydantic Settings.

Controls how ``flakeid.core.identity.load`` treats malformed payload ids.
Constructing a Snowflake directly is never affected: it always degrades
malformed text to the empty id without reporting.

Usage:
    from flakeid.config import SnowflakeSettings

    # Load from environment variables (SNOWFLAKE_*)
    settings = SnowflakeSettings()

    # Or override with explicit values
    settings = SnowflakeSettings(strict=True)
"""

from __future__ import annotations

from functools import lru_cache

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install flakeid[config]"
    ) from e


class SnowflakeSettings(BaseSettings):  # type: ignore[misc]
    """Parse policy for snowflakes read from external payloads.

    Attributes:
        strict: Raise SnowflakeParseError on malformed text instead of
            returning the empty id.
        warn_on_malformed: Emit a UserWarning when malformed text is
            degraded to the empty id. Ignored when strict is set.

    Environment Variables:
        SNOWFLAKE_STRICT
        SNOWFLAKE_WARN_ON_MALFORMED
    """

    model_config = SettingsConfigDict(
        env_prefix="SNOWFLAKE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strict: bool = False
    warn_on_malformed: bool = False


@lru_cache(maxsize=1)
def get_settings() -> SnowflakeSettings:
    """Process-wide settings, read from the environment once.

    Call ``get_settings.cache_clear()`` after changing the environment.
    """
    return SnowflakeSettings()
