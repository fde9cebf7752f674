"""Discord API resource models.

All models are frozen pydantic models built from raw API JSON.
"""

from discord_binding.models.enums import UserFlags, UserPremiumType, UserSettingsType
from discord_binding.models.profile import MutualGuild, Profile, UserConnection
from discord_binding.models.user import User

__all__ = [
    "MutualGuild",
    "Profile",
    "User",
    "UserConnection",
    "UserFlags",
    "UserPremiumType",
    "UserSettingsType",
]
