"""Mappers for converting Discord API JSON to models."""

from __future__ import annotations

from typing import Any

from discord_binding.models import Profile, User, UserConnection


def map_user(data: dict[str, Any]) -> User:
    """Convert Discord API user JSON to a User.

    Args:
        data: Raw user object from Discord API (may be partial)

    Returns:
        Frozen User instance
    """
    return User.model_validate(data)


def map_user_connection(data: dict[str, Any]) -> UserConnection:
    """Convert a connected-account object to a UserConnection."""
    return UserConnection.model_validate(data)


def map_user_connections(data: list[dict[str, Any]] | None) -> list[UserConnection]:
    """Convert the ``GET /users/@me/connections`` response."""
    return [map_user_connection(item) for item in data or []]


def map_profile(data: dict[str, Any]) -> Profile:
    """Convert Discord API profile JSON to a Profile.

    The profile endpoint has reported linked accounts under both
    ``connected_accounts`` and ``connections``; either is accepted.

    Args:
        data: Raw profile object from Discord API

    Returns:
        Frozen Profile instance
    """
    if "connections" not in data and "connected_accounts" in data:
        data = {**data, "connections": data["connected_accounts"]}
    return Profile.model_validate(data)
