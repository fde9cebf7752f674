"""Discord REST and CDN endpoint builders.

Every function returns a plain URL (CDN) or a path relative to
ENDPOINT_API (REST). Nothing here validates ids or hashes.
"""

from __future__ import annotations


API_VERSION = "9"

ENDPOINT_DISCORD = "https://discord.com/"
ENDPOINT_API = ENDPOINT_DISCORD + "api/v" + API_VERSION + "/"

ENDPOINT_CDN = "https://cdn.discordapp.com/"
ENDPOINT_CDN_AVATARS = ENDPOINT_CDN + "avatars/"
ENDPOINT_CDN_BANNERS = ENDPOINT_CDN + "banners/"

# Number of legacy default avatars served under embed/avatars/
DEFAULT_AVATAR_COUNT = 5


# -------------------------------------------------------------------------
# CDN
# -------------------------------------------------------------------------


def default_user_avatar(discriminator: str | None) -> str:
    """URL of the platform default avatar keyed by the legacy discriminator.

    Anything other than ASCII digits (empty, signed, padded) selects avatar 0.
    """
    index = 0
    if discriminator and discriminator.isascii() and discriminator.isdigit():
        index = int(discriminator) % DEFAULT_AVATAR_COUNT
    return f"{ENDPOINT_CDN}embed/avatars/{index}.png"


def user_avatar(user_id: str, avatar_hash: str) -> str:
    return f"{ENDPOINT_CDN_AVATARS}{user_id}/{avatar_hash}.png"


def user_avatar_animated(user_id: str, avatar_hash: str) -> str:
    return f"{ENDPOINT_CDN_AVATARS}{user_id}/{avatar_hash}.gif"


def user_banner(user_id: str, banner_hash: str) -> str:
    return f"{ENDPOINT_CDN_BANNERS}{user_id}/{banner_hash}.png"


def user_banner_animated(user_id: str, banner_hash: str) -> str:
    return f"{ENDPOINT_CDN_BANNERS}{user_id}/{banner_hash}.gif"


# -------------------------------------------------------------------------
# REST (relative to ENDPOINT_API)
# -------------------------------------------------------------------------


def user(user_id: str) -> str:
    return f"users/{user_id}"


def user_profile(user_id: str) -> str:
    return f"users/{user_id}/profile"


def user_connections(user_id: str = "@me") -> str:
    return f"users/{user_id}/connections"
