"""Identified entity base.

Concrete entity kinds (guilds, roles, users, ...) embed one kind-tagged
snowflake as their primary key. Identity is the id alone: a stale cached copy
and a freshly fetched copy of the same entity compare equal.

Usage:
    @dataclass(eq=False)
    class Guild(Managed[GuildId]):
        name: str = ""

    guild = Guild("81384788765712384", name="Discord API")
    guild.id              # GuildId(81384788765712384)
    guild.creation_time()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    Any,
    ClassVar,
    Generic,
    Protocol,
    TypeVar,
    get_args,
    get_origin,
    runtime_checkable,
)

from flakeid.core.identity import Snowflake

IdT = TypeVar("IdT", bound=Snowflake)


@runtime_checkable
class Identified(Protocol):
    """Anything keyed by a snowflake: has an id and a creation time."""

    id: Snowflake

    def creation_time(self) -> float: ...


@dataclass(eq=False)
class Managed(Generic[IdT]):
    """Base for entities keyed by a snowflake.

    ``id_type`` is taken from the generic argument (``Managed[GuildId]``) unless
    a subclass sets it explicitly. Every assignment to ``id`` goes through
    ``id_type``, so strings are parsed and ids of unrelated kinds are rejected.
    Subclasses must pass ``eq=False`` to ``@dataclass``; a generated field-wise
    ``__eq__`` (which also drops ``__hash__``) is rejected with TypeError.
    """

    id_type: ClassVar[type[Snowflake]] = Snowflake

    id: IdT = field(default_factory=Snowflake)  # coerced to id_type on assignment

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "id_type" in cls.__dict__:
            return
        for base in cls.__dict__.get("__orig_bases__", ()):
            if get_origin(base) is not Managed:
                continue
            (arg,) = get_args(base)
            if isinstance(arg, type) and issubclass(arg, Snowflake):
                cls.id_type = arg

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id":
            cls = type(self)
            if cls.__eq__ is not Managed.__eq__ or cls.__hash__ is not Managed.__hash__:
                raise TypeError(
                    f"{cls.__name__} overrides identity equality; "
                    "declare it with @dataclass(eq=False)"
                )
            value = self.id_type(value)
        object.__setattr__(self, name, value)

    def creation_time(self) -> float:
        """Creation time of this entity in seconds since the Unix epoch."""
        return self.id.creation_time()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Managed):
            return NotImplemented
        return self.id_type is other.id_type and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
