"""Discord bindings for Python.

Build a session with new() and resolve user resources:

    import discord_binding

    session = discord_binding.new("Bot " + token)
    async with discord_binding.RESTClient(session) as client:
        user = await client.get_current_user()
    print(user.avatar_url("256"))
"""

from discord_binding import endpoints
from discord_binding.models import (
    MutualGuild,
    Profile,
    User,
    UserConnection,
    UserFlags,
    UserPremiumType,
    UserSettingsType,
)
from discord_binding.resources import resolve_url
from discord_binding.rest import DiscordAPIError, DiscordRateLimitError, RESTClient
from discord_binding.session import Identify, IdentifyProperties, Session, new

# Follows Semantic Versioning
VERSION = "0.25.0"

__all__ = [
    "VERSION",
    "DiscordAPIError",
    "DiscordRateLimitError",
    "Identify",
    "IdentifyProperties",
    "MutualGuild",
    "Profile",
    "RESTClient",
    "Session",
    "User",
    "UserConnection",
    "UserFlags",
    "UserPremiumType",
    "UserSettingsType",
    "endpoints",
    "new",
    "resolve_url",
]
