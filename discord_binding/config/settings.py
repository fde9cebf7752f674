"""Configuration management using pydantic-settings.

Provides validated configuration with support for:
- JSON config file (config.json)
- Environment variables prefixed with DISCORD_BINDING_
- Type coercion and validation
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AccountConfig(BaseModel):
    """Session settings for a single Discord account.

    The token must already carry its scheme prefix ("Bot " or "Bearer ").
    Unset optional fields keep the session defaults.
    """

    name: str
    token: str
    user_agent: str | None = None

    shard_id: int = Field(default=0, ge=0)
    shard_count: int = Field(default=1, ge=1)
    max_rest_retries: int = Field(default=3, ge=0)
    timeout: float = Field(default=20.0, gt=0)

    compress: bool = True
    state_enabled: bool = True
    should_reconnect_on_error: bool = True
    should_retry_on_rate_limit: bool = True

    system_locale: str | None = None
    intents: int | None = None

    @model_validator(mode="after")
    def check_shard_bounds(self) -> "AccountConfig":
        """Ensure the shard id addresses one of the configured shards."""
        if self.shard_id >= self.shard_count:
            raise ValueError(
                f"shard_id {self.shard_id} must be less than shard_count {self.shard_count}"
            )
        return self


class AppSettings(BaseSettings):
    """Application settings with validation.

    Settings are loaded from a JSON config file (config.json).
    """

    accounts: list[AccountConfig] = []

    model_config = SettingsConfigDict(
        env_prefix="DISCORD_BINDING_",
        extra="ignore",
    )

    @classmethod
    def from_json(cls, path: str | Path = "config.json") -> "AppSettings":
        """Load settings from a JSON config file.

        Args:
            path: Path to the JSON config file

        Returns:
            AppSettings instance with validated configuration
        """
        config_path = Path(path)
        if config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return cls(**data)
        return cls()

    def get_account(self, name: str | None = None) -> AccountConfig:
        """Return the named account, or the first one when name is None.

        Raises:
            ValueError: If no accounts are configured or the name is unknown
        """
        if not self.accounts:
            raise ValueError("No accounts configured")
        if name is None:
            return self.accounts[0]
        for account in self.accounts:
            if account.name == name:
                return account
        raise ValueError(f"Unknown account: {name}")


@lru_cache
def get_settings(config_path: str = "config.json") -> AppSettings:
    """Get cached application settings.

    Args:
        config_path: Path to JSON config file (default: config.json)

    Returns:
        Cached AppSettings instance
    """
    return AppSettings.from_json(config_path)


def load_config(path: str | Path = "config.json") -> AppSettings:
    """Load configuration from file, bypassing the cache."""
    get_settings.cache_clear()
    return AppSettings.from_json(path)
