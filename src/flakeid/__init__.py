"""flakeid: typed 64-bit snowflake identifiers.

Usage:
    from dataclasses import dataclass
    from flakeid import GuildId, Managed, Snowflake

    sf = Snowflake("175928847299117063")
    sf.creation_time()  # 1462015105.796
    sf.worker_id        # 1

    @dataclass(eq=False)
    class Guild(Managed[GuildId]):
        name: str = ""

    cache = {guild.id: guild for guild in guilds}
    cache[81384788765712384]  # raw ints and snowflakes are interchangeable keys
"""

__version__ = "0.1.0"

# Core primitives
from flakeid.core import (
    DISCORD_EPOCH,
    ChannelId,
    GuildId,
    Identified,
    Managed,
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

__all__ = [
    # Version
    "__version__",
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
    # Entities
    "Identified",
    "Managed",
]
