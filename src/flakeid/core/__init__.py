"""Core functionalities: stateless value types and protocols.

Architecture Note:
    core/ contains pure, stateless building blocks with no I/O and no shared
    mutable state. Snowflakes and entities are plain values; caching and
    locking belong to the caller.
"""

from flakeid.core.identity import (
    DISCORD_EPOCH,
    ChannelId,
    GuildId,
    MessageId,
    RoleId,
    Snowflake,
    SnowflakeParseError,
    SnowflakeParts,
    UserId,
    coerce_snowflake,
    decode,
    load,
    parse_snowflake,
)
from flakeid.core.managed import Identified, Managed

__all__ = [
    # Identity
    "DISCORD_EPOCH",
    "Snowflake",
    "SnowflakeParts",
    "SnowflakeParseError",
    "parse_snowflake",
    "coerce_snowflake",
    "decode",
    "load",
    # Kinds
    "GuildId",
    "RoleId",
    "ChannelId",
    "UserId",
    "MessageId",
    # Managed
    "Identified",
    "Managed",
]
