"""Pure functions over raw snowflake values.

These work on plain ints and text, for callers that do not want the wrapper
type. ``load`` is the settings-aware entry point for untrusted payload fields.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, TypeVar

from flakeid.core.identity.models import (
    Snowflake,
    SnowflakeParseError,
    SnowflakeParts,
    _parse_digits,
)

if TYPE_CHECKING:
    from flakeid.config import SnowflakeSettings

S = TypeVar("S", bound=Snowflake)


def parse_snowflake(text: str) -> int:
    """Parse decimal text into a raw snowflake value.

    Raises:
        SnowflakeParseError: If text is not an unsigned 64-bit integer.
    """
    value = _parse_digits(text)
    if value is None:
        raise SnowflakeParseError(text)
    return value


def coerce_snowflake(text: str) -> int:
    """Parse decimal text, returning 0 for anything malformed."""
    return _parse_digits(text) or 0


def decode(value: int) -> SnowflakeParts:
    """Split a raw 64-bit value into its embedded fields."""
    return Snowflake(value).parts()


def load(
    value: int | str | Snowflake | None,
    kind: type[S] = Snowflake,  # type: ignore[assignment]
    settings: SnowflakeSettings | None = None,
) -> S:
    """Build a snowflake from a payload field, honouring SnowflakeSettings.

    With default settings this is exactly ``kind(value)``. In strict mode
    malformed text raises; with ``warn_on_malformed`` it emits a UserWarning
    before degrading to empty.

    Args:
        value: Raw field from a payload.
        kind: Snowflake class to build.
        settings: Parse settings (loaded from environment if None).

    Returns:
        Snowflake of the requested kind.

    Raises:
        SnowflakeParseError: In strict mode, if value is malformed text.
    """
    if settings is None:
        from flakeid.config import get_settings

        settings = get_settings()

    if isinstance(value, str) and _parse_digits(value) is None:
        if settings.strict:
            raise SnowflakeParseError(value)
        if settings.warn_on_malformed:
            warnings.warn(
                f"Malformed snowflake {value!r} treated as empty {kind.__name__}",
                stacklevel=2,
            )
    return kind(value)
