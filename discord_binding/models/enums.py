"""Enumerations for Discord user objects.

See: https://discord.com/developers/docs/resources/user#user-object
"""

from __future__ import annotations

from enum import IntEnum, IntFlag


class UserFlags(IntFlag):
    """Bits of a user's ``public_flags`` / ``flags`` field."""

    STAFF = 1 << 0
    PARTNER = 1 << 1
    HYPESQUAD_EVENTS = 1 << 2
    BUG_HUNTER_LEVEL_1 = 1 << 3
    HOUSE_BRAVERY = 1 << 6
    HOUSE_BRILLIANCE = 1 << 7
    HOUSE_BALANCE = 1 << 8
    EARLY_SUPPORTER = 1 << 9
    TEAM_USER = 1 << 10
    SYSTEM = 1 << 12
    BUG_HUNTER_LEVEL_2 = 1 << 14
    VERIFIED_BOT = 1 << 16
    VERIFIED_BOT_DEVELOPER = 1 << 17
    CERTIFIED_MODERATOR = 1 << 18
    BOT_HTTP_INTERACTIONS = 1 << 19
    SPAMMER = 1 << 20
    ACTIVE_DEVELOPER = 1 << 22


class UserPremiumType(IntEnum):
    """Nitro subscription type.

    Only reported when the request is authorized with a Bearer token.
    """

    NONE = 0
    NITRO_CLASSIC = 1
    NITRO = 2
    NITRO_BASIC = 3


class UserSettingsType(IntEnum):
    """Kinds of protobuf user settings blobs."""

    PRELOADED = 1
    FRECENCY = 2
    TEST = 3
