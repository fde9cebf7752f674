"""Discord User model.

Users are IMMUTABLE SNAPSHOTS of what the API reported. An update from the
platform replaces the whole value; nothing here merges fields.

Design principles:
- id (snowflake string) is the only authoritative identity
- Display fields (username, discriminator, global_name, avatar) are best-effort
- Fields such as email, phone, token, bio and pronouns are only present for
  the user that owns the session
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from discord_binding import endpoints
from discord_binding.models.enums import UserFlags, UserPremiumType
from discord_binding.resources import resolve_url
from discord_binding.utils.snowflake import snowflake_to_datetime


class User(BaseModel):
    """A Discord user as returned by the REST API or the gateway."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    id: str
    username: str = ""

    # Display name (new username system). JSON name is global_name.
    display_name: str | None = Field(default=None, alias="global_name")

    # Legacy discriminator ("1234"). "0" or empty for migrated accounts.
    discriminator: str = ""

    locale: str | None = None

    # -------------------------------------------------------------------------
    # Visual identity
    # -------------------------------------------------------------------------

    # Avatar hash. None if the user has no custom avatar.
    avatar: str | None = None

    # Profile banner hash. None if the user has no banner.
    banner: str | None = None

    # Banner color as a hex code, e.g. "#ff0000"
    banner_color: str | None = None

    # Accent color as an integer representation of the hex code
    accent_color: int | None = None

    # -------------------------------------------------------------------------
    # Account type and flags
    # -------------------------------------------------------------------------

    bot: bool = False

    # Official Discord System user (urgent message system).
    system: bool = False

    # Bitfield, see UserFlags.
    public_flags: int = 0

    # Only available when authorized via a Bearer token.
    flags: int = 0

    # Values newer than UserPremiumType stay plain ints.
    premium_type: UserPremiumType | int = Field(
        default=UserPremiumType.NONE, union_mode="left_to_right"
    )

    # -------------------------------------------------------------------------
    # Session user only
    # -------------------------------------------------------------------------

    email: str | None = None
    phone: str | None = None
    token: str | None = None
    verified: bool = False
    mfa_enabled: bool = False
    bio: str | None = None
    pronouns: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def ensure_string_id(cls, v: Any) -> Any:
        """Accept integer snowflakes and store them as strings."""
        if isinstance(v, int):
            return str(v)
        return v

    @field_validator("premium_type", mode="before")
    @classmethod
    def null_premium_type(cls, v: Any) -> Any:
        """The API sends null for users without Nitro."""
        if v is None:
            return UserPremiumType.NONE
        return v

    @field_validator("public_flags", "flags", mode="before")
    @classmethod
    def null_flags(cls, v: Any) -> Any:
        if v is None:
            return 0
        return v

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.display_label()

    def display_label(self) -> str:
        """Return the legacy ``username#discriminator`` form.

        Deprecated: use ``username`` or ``display_name`` instead.
        """
        return self.username + "#" + self.discriminator

    def mention(self) -> str:
        """Return a string which mentions the user."""
        return "<@" + self.id + ">"

    def avatar_url(self, size: str = "") -> str:
        """Return the URL of the user's avatar.

        Args:
            size: Image size as a power of two. If empty, no size
                parameter is added to the URL.

        Users without a custom avatar get the default avatar for their
        discriminator. Animated hashes resolve to the GIF endpoint.
        """
        avatar_hash = self.avatar or ""
        return resolve_url(
            self.avatar,
            endpoints.default_user_avatar(self.discriminator),
            endpoints.user_avatar(self.id, avatar_hash),
            endpoints.user_avatar_animated(self.id, avatar_hash),
            size,
        )

    def banner_url(self, size: str = "") -> str:
        """Return the URL of the user's banner, or "" when there is none.

        Args:
            size: Image size as a power of two between 16 and 4096.
        """
        banner_hash = self.banner or ""
        return resolve_url(
            self.banner,
            None,
            endpoints.user_banner(self.id, banner_hash),
            endpoints.user_banner_animated(self.id, banner_hash),
            size,
        )

    @property
    def public_flag_set(self) -> UserFlags:
        return UserFlags(self.public_flags)

    def has_flag(self, flag: UserFlags) -> bool:
        """Check whether a public flag is set on this user."""
        return bool(self.public_flags & flag)

    @property
    def created_at(self) -> datetime:
        """Account creation time, decoded from the snowflake id."""
        return snowflake_to_datetime(self.id)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
