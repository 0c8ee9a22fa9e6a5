"""Snowflake identity: the 64-bit id value type and its kind-tagged variants."""

from flakeid.core.identity.kinds import ChannelId, GuildId, MessageId, RoleId, UserId
from flakeid.core.identity.models import (
    DISCORD_EPOCH,
    Snowflake,
    SnowflakeParseError,
    SnowflakeParts,
)
from flakeid.core.identity.operations import coerce_snowflake, decode, load, parse_snowflake

__all__ = [
    "DISCORD_EPOCH",
    "Snowflake",
    "SnowflakeParts",
    "SnowflakeParseError",
    "GuildId",
    "RoleId",
    "ChannelId",
    "UserId",
    "MessageId",
    "parse_snowflake",
    "coerce_snowflake",
    "decode",
    "load",
]
