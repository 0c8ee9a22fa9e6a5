"""Snowflake identifier models.

Usage:
    sf = Snowflake("175928847299117063")
    sf.creation_time()   # 1462015105.796
    sf.worker_id         # 1
    Snowflake("garbage").is_empty()  # True
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any, ClassVar, Self

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue
    from pydantic_core import CoreSchema

DISCORD_EPOCH = 1420070400000  # ms since Unix epoch
UINT64_MAX = (1 << 64) - 1

INCREMENT_MASK = 0xFFF
PROCESS_ID_MASK = 0x1F000
WORKER_ID_MASK = 0x3E0000
PROCESS_ID_SHIFT = 12
WORKER_ID_SHIFT = 17
TIMESTAMP_SHIFT = 22

_EPOCH_DATETIME = datetime(1970, 1, 1, tzinfo=UTC) + timedelta(milliseconds=DISCORD_EPOCH)


class SnowflakeParseError(ValueError):
    """Raised by the strict parser when text is not an unsigned 64-bit integer."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Not a valid snowflake: {text!r}")


def _parse_digits(text: str) -> int | None:
    """Parse decimal text into a uint64, or None if it is not one."""
    digits = text.strip()
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    digits = digits.lstrip("0") or "0"
    if len(digits) > len(str(UINT64_MAX)):
        return None
    value = int(digits)
    if value > UINT64_MAX:
        return None
    return value


@dataclass(frozen=True, slots=True)
class SnowflakeParts:
    """Decomposed snowflake fields.

    Attributes:
        timestamp: Creation time in milliseconds since the Unix epoch.
        worker_id: Internal worker that produced the id (5 bits).
        process_id: Internal process that produced the id (5 bits).
        increment: Per-process sequence number (12 bits).
    """

    timestamp: int
    worker_id: int
    process_id: int
    increment: int


@dataclass(frozen=True, slots=True, init=False, repr=False, eq=False)
class Snowflake:
    """64-bit time-ordered identifier.

    The integer value is the only state; every other attribute is derived
    from its bits. Zero means "no id". Text that does not parse as an
    unsigned 64-bit integer becomes zero instead of raising, so damaged
    payload fields degrade to empty. Use ``Snowflake.parse`` to get an error.

    Subclasses tag the id with an entity kind (see ``flakeid.core.identity.kinds``).
    A kind accepts untyped snowflakes, itself, and anything listed in
    ``related_kinds``; other kinds are rejected with TypeError.
    """

    value: int

    related_kinds: ClassVar[tuple[type[Snowflake], ...]] = ()

    def __init__(self, value: int | str | Snowflake | None = 0) -> None:
        if isinstance(value, Snowflake):
            _check_kind(type(self), type(value))
            raw = value.value
        elif isinstance(value, str):
            raw = _parse_digits(value) or 0
        elif value is None:
            raw = 0
        elif isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"{type(self).__name__} expects int, str or Snowflake, "
                f"got {type(value).__name__}"
            )
        elif not 0 <= value <= UINT64_MAX:
            raise ValueError(f"Snowflake out of unsigned 64-bit range: {value}")
        else:
            raw = int(value)
        object.__setattr__(self, "value", raw)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Strictly parse decimal text.

        Args:
            text: Decimal digits, optionally surrounded by whitespace.

        Returns:
            Snowflake of this class holding the parsed value.

        Raises:
            SnowflakeParseError: If text is not an unsigned 64-bit integer.
        """
        value = _parse_digits(text)
        if value is None:
            raise SnowflakeParseError(text)
        return cls(value)

    # Conversion

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    def __bool__(self) -> bool:
        return self.value != 0

    def to_json(self) -> str:
        """Interchange form: decimal text, never a JSON number.

        64-bit values do not survive a trip through an IEEE-754 double.
        """
        return str(self.value)

    # Queries

    def is_empty(self) -> bool:
        """Check if this is the empty sentinel (zero)."""
        return self.value == 0

    def creation_time(self) -> float:
        """Creation time in seconds since the Unix epoch."""
        return ((self.value >> TIMESTAMP_SHIFT) + DISCORD_EPOCH) / 1000.0

    @property
    def timestamp(self) -> int:
        """Creation time in milliseconds since the Unix epoch."""
        return (self.value >> TIMESTAMP_SHIFT) + DISCORD_EPOCH

    @property
    def created_at(self) -> datetime:
        """Creation time as an aware UTC datetime."""
        return _EPOCH_DATETIME + timedelta(milliseconds=self.value >> TIMESTAMP_SHIFT)

    @property
    def worker_id(self) -> int:
        return (self.value & WORKER_ID_MASK) >> WORKER_ID_SHIFT

    @property
    def process_id(self) -> int:
        return (self.value & PROCESS_ID_MASK) >> PROCESS_ID_SHIFT

    @property
    def increment(self) -> int:
        return self.value & INCREMENT_MASK

    def parts(self) -> SnowflakeParts:
        """Decompose into all embedded fields."""
        return SnowflakeParts(
            timestamp=self.timestamp,
            worker_id=self.worker_id,
            process_id=self.process_id,
            increment=self.increment,
        )

    # Equality, ordering, hashing follow the raw integer

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Snowflake):
            return self.value == other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: Snowflake | int) -> bool:
        other_value = _comparable(other)
        if other_value is None:
            return NotImplemented
        return self.value < other_value

    def __le__(self, other: Snowflake | int) -> bool:
        other_value = _comparable(other)
        if other_value is None:
            return NotImplemented
        return self.value <= other_value

    def __gt__(self, other: Snowflake | int) -> bool:
        other_value = _comparable(other)
        if other_value is None:
            return NotImplemented
        return self.value > other_value

    def __ge__(self, other: Snowflake | int) -> bool:
        other_value = _comparable(other)
        if other_value is None:
            return NotImplemented
        return self.value >= other_value

    # pydantic v2 integration

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda sf: sf.to_json(), when_used="json-unless-none"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": r"^[0-9]+$", "format": "snowflake"}

    @classmethod
    def _validate(cls, value: Any) -> Snowflake:
        # pydantic only converts ValueError/AssertionError into ValidationError
        try:
            return cls(value)
        except TypeError as e:
            raise ValueError(str(e)) from e


def _comparable(other: object) -> int | None:
    if isinstance(other, Snowflake):
        return other.value
    if isinstance(other, int) and not isinstance(other, bool):
        return other
    return None


def _check_kind(target: type[Snowflake], source: type[Snowflake]) -> None:
    """Reject construction of one snowflake kind from an unrelated kind.

    Raises:
        TypeError: If source may not be reinterpreted as target.
    """
    if target is Snowflake or source is Snowflake or issubclass(source, target):
        return
    if any(issubclass(source, kind) for kind in target.related_kinds):
        return
    raise TypeError(f"Cannot construct {target.__name__} from {source.__name__}")
