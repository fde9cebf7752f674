"""Tests for discord_binding.config.settings."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from discord_binding.config.settings import (
    AccountConfig,
    AppSettings,
    get_settings,
    load_config,
)


def _write_config(path: Path, accounts: list[dict]) -> Path:
    config_path = path / "config.json"
    config_path.write_text(json.dumps({"accounts": accounts}), encoding="utf-8")
    return config_path


class TestAccountConfig:
    """Tests for AccountConfig validation."""

    def test_defaults(self) -> None:
        account = AccountConfig(name="main", token="Bot t")

        assert account.user_agent is None
        assert account.shard_id == 0
        assert account.shard_count == 1
        assert account.max_rest_retries == 3
        assert account.timeout == 20.0
        assert account.should_retry_on_rate_limit is True

    def test_rejects_zero_shard_count(self) -> None:
        with pytest.raises(ValidationError):
            AccountConfig(name="main", token="Bot t", shard_count=0)

    def test_rejects_negative_retries(self) -> None:
        with pytest.raises(ValidationError):
            AccountConfig(name="main", token="Bot t", max_rest_retries=-1)

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValidationError):
            AccountConfig(name="main", token="Bot t", timeout=0)

    def test_rejects_shard_id_outside_count(self) -> None:
        with pytest.raises(ValidationError, match="shard_id 2 must be less than"):
            AccountConfig(name="main", token="Bot t", shard_id=2, shard_count=2)


class TestAppSettings:
    """Tests for AppSettings loading and account lookup."""

    def test_from_json(self, tmp_path: Path) -> None:
        config_path = _write_config(
            tmp_path,
            [
                {"name": "main", "token": "Bot a"},
                {"name": "alt", "token": "Bearer b", "shard_count": 2},
            ],
        )

        settings = AppSettings.from_json(config_path)

        assert [a.name for a in settings.accounts] == ["main", "alt"]
        assert settings.accounts[1].shard_count == 2

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        settings = AppSettings.from_json(tmp_path / "nope.json")

        assert settings.accounts == []

    def test_ignores_unknown_keys(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.json"
        config_path.write_text(
            json.dumps({"accounts": [], "database_url": "x"}), encoding="utf-8"
        )

        settings = AppSettings.from_json(config_path)

        assert settings.accounts == []

    def test_get_account_defaults_to_first(self) -> None:
        settings = AppSettings(
            accounts=[
                AccountConfig(name="main", token="Bot a"),
                AccountConfig(name="alt", token="Bot b"),
            ]
        )

        assert settings.get_account().name == "main"
        assert settings.get_account("alt").token == "Bot b"

    def test_get_account_unknown_name(self) -> None:
        settings = AppSettings(accounts=[AccountConfig(name="main", token="Bot a")])

        with pytest.raises(ValueError, match="Unknown account: other"):
            settings.get_account("other")

    def test_get_account_without_accounts(self) -> None:
        with pytest.raises(ValueError, match="No accounts configured"):
            AppSettings().get_account()


class TestSettingsCache:
    """Tests for get_settings and load_config."""

    def test_get_settings_is_cached(self, tmp_path: Path) -> None:
        config_path = str(_write_config(tmp_path, [{"name": "a", "token": "Bot a"}]))
        get_settings.cache_clear()

        assert get_settings(config_path) is get_settings(config_path)

    def test_load_config_rereads_file(self, tmp_path: Path) -> None:
        config_path = _write_config(tmp_path, [{"name": "a", "token": "Bot a"}])
        get_settings(str(config_path))
        _write_config(tmp_path, [{"name": "b", "token": "Bot b"}])

        settings = load_config(config_path)

        assert settings.get_account().name == "b"
