"""Kind-tagged snowflakes.

Each kind is a distinct Snowflake subclass with no extra state. Kinds keep ids
of unrelated entities apart: building a ChannelId from a GuildId raises
TypeError. Untyped snowflakes, ints and strings convert to any kind.

The one sanctioned cross-kind conversion is guild -> role, because a guild's
default (@everyone) role shares the guild's id.

Usage:
    guild = GuildId("81384788765712384")
    everyone = guild.as_role_scope()
    ChannelId(guild)  # TypeError
"""

from __future__ import annotations

from typing import ClassVar

from flakeid.core.identity.models import Snowflake


class GuildId(Snowflake):
    __slots__ = ()

    def as_role_scope(self) -> RoleId:
        """Reinterpret this guild id as the id of the guild's default role."""
        return RoleId(self)


class RoleId(Snowflake):
    __slots__ = ()

    related_kinds: ClassVar[tuple[type[Snowflake], ...]] = (GuildId,)


class ChannelId(Snowflake):
    __slots__ = ()


class UserId(Snowflake):
    __slots__ = ()


class MessageId(Snowflake):
    __slots__ = ()
