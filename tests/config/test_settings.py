"""Tests for SnowflakeSettings."""

from flakeid.config import SnowflakeSettings, get_settings


def test_defaults_are_lossy_and_silent():
    settings = SnowflakeSettings()

    assert settings.strict is False
    assert settings.warn_on_malformed is False


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("SNOWFLAKE_STRICT", "1")
    monkeypatch.setenv("SNOWFLAKE_WARN_ON_MALFORMED", "true")

    settings = SnowflakeSettings()

    assert settings.strict is True
    assert settings.warn_on_malformed is True


def test_explicit_values_override_environment(monkeypatch):
    monkeypatch.setenv("SNOWFLAKE_STRICT", "true")

    assert SnowflakeSettings(strict=False).strict is False


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
