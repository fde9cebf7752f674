"""Shared fixtures for discord-binding tests."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def user_data() -> dict[str, Any]:
    """A user object as returned by GET /users/{id}."""
    return {
        "id": "123456789012345678",
        "username": "Ada",
        "global_name": "Ada Lovelace",
        "discriminator": "0001",
        "avatar": "deadbeef",
        "banner": "a_cafebabe",
        "banner_color": "#ff0000",
        "accent_color": 16711680,
        "locale": "en-GB",
        "bot": False,
        "system": False,
        "public_flags": (1 << 6) | (1 << 22),  # HOUSE_BRAVERY | ACTIVE_DEVELOPER
        "premium_type": 2,
    }


@pytest.fixture
def current_user_data(user_data: dict[str, Any]) -> dict[str, Any]:
    """The session owner, including fields only sent for @me."""
    return {
        **user_data,
        "email": "ada@example.com",
        "phone": "+15555550100",
        "verified": True,
        "mfa_enabled": True,
        "bio": "Analytical engines",
        "pronouns": "she/her",
        "flags": 64,
    }


@pytest.fixture
def connection_data() -> dict[str, Any]:
    """A connected account object."""
    return {
        "id": "ada-gh",
        "name": "ada",
        "type": "github",
        "revoked": False,
        "integrations": [],
        "verified": True,
        "friend_sync": False,
        "show_activity": True,
        "visibility": 1,
    }


@pytest.fixture
def profile_data(
    user_data: dict[str, Any], connection_data: dict[str, Any]
) -> dict[str, Any]:
    """A profile object as returned by GET /users/{id}/profile."""
    return {
        "user": user_data,
        "connected_accounts": [connection_data],
        "premium_since": "2021-03-01T12:00:00+00:00",
        "premium_guild_since": "2022-06-15T08:30:00.000000Z",
        "mutual_guilds": [
            {"id": "111", "nick": "ada"},
            {"id": "222", "nick": None},
        ],
        "user_profile": {"bio": "Analytical engines", "accent_color": 16711680},
    }
