"""Tests for discord_binding.utils.snowflake module."""

from __future__ import annotations

from datetime import datetime, timezone

from discord_binding.utils.snowflake import DISCORD_EPOCH, snowflake_to_datetime


def test_snowflake_to_datetime_known_value() -> None:
    """Should convert a known snowflake to the expected datetime."""
    ms = DISCORD_EPOCH + 1_234_567
    snowflake = (ms - DISCORD_EPOCH) << 22

    result = snowflake_to_datetime(snowflake)

    assert result == datetime.fromtimestamp(ms / 1000, tz=timezone.utc)


def test_snowflake_to_datetime_accepts_string() -> None:
    """Snowflakes arrive from the API as strings."""
    snowflake = 1_234_567 << 22

    assert snowflake_to_datetime(str(snowflake)) == snowflake_to_datetime(snowflake)


def test_snowflake_zero_is_discord_epoch() -> None:
    result = snowflake_to_datetime(0)

    assert result == datetime(2015, 1, 1, tzinfo=timezone.utc)
