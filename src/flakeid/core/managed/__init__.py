"""Identified entities: the snowflake-keyed base shared by all entity kinds."""

from flakeid.core.managed.models import Identified, Managed

__all__ = [
    "Identified",
    "Managed",
]
