"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from flakeid import GuildId, Managed, RoleId
from flakeid.config import get_settings

# Known id from the Discord API documentation.
DOCS_SNOWFLAKE = 175928847299117063


@dataclass(eq=False)
class FixtureGuild(Managed[GuildId]):
    name: str = ""


@dataclass(eq=False)
class FixtureRole(Managed[RoleId]):
    name: str = ""
    position: int = 0


@pytest.fixture
def docs_snowflake():
    return DOCS_SNOWFLAKE


@pytest.fixture
def guild_cls():
    return FixtureGuild


@pytest.fixture
def role_cls():
    return FixtureRole


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
