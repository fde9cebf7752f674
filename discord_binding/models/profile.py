"""Discord user profile models.

A Profile bundles a User with their linked accounts, premium timestamps and
the guilds shared with the session user. It has no behavior of its own.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from discord_binding.models.user import User


class UserConnection(BaseModel):
    """An external account (Twitch, GitHub, ...) linked to a user."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    name: str
    type: str
    revoked: bool = False
    integrations: list[dict[str, Any]] = Field(default_factory=list)
    verified: bool = False
    friend_sync: bool = False
    show_activity: bool = False
    visibility: int = 0


class MutualGuild(BaseModel):
    """A guild shared with the profile owner, with their nickname there."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    nickname: str | None = Field(default=None, alias="nick")


class Profile(BaseModel):
    """A user's profile as returned by ``GET /users/{id}/profile``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    user: User
    connections: list[UserConnection] = Field(default_factory=list)
    premium_since: datetime | None = None
    boosting_since: datetime | None = Field(default=None, alias="premium_guild_since")
    mutual_guilds: list[MutualGuild] = Field(default_factory=list)
    user_profile: dict[str, Any] = Field(default_factory=dict)

    @field_validator("connections", "mutual_guilds", "user_profile", mode="before")
    @classmethod
    def null_collections(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat JSON null as an empty collection."""
        if v is None:
            return {} if info.field_name == "user_profile" else []
        return v
