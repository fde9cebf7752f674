"""Tests for discord_binding.endpoints."""

from __future__ import annotations

import pytest

from discord_binding import endpoints


class TestDefaultUserAvatar:
    """Tests for the discriminator-keyed default avatar."""

    @pytest.mark.parametrize(
        ("discriminator", "index"),
        [("0001", 1), ("0005", 0), ("1337", 2), ("9999", 4), ("0", 0)],
    )
    def test_uses_discriminator_modulo_five(self, discriminator: str, index: int) -> None:
        assert endpoints.default_user_avatar(discriminator) == (
            f"https://cdn.discordapp.com/embed/avatars/{index}.png"
        )

    def test_empty_discriminator_is_zero(self) -> None:
        assert endpoints.default_user_avatar("") == (
            "https://cdn.discordapp.com/embed/avatars/0.png"
        )

    def test_non_numeric_discriminator_is_zero(self) -> None:
        assert endpoints.default_user_avatar("abcd") == (
            "https://cdn.discordapp.com/embed/avatars/0.png"
        )

    @pytest.mark.parametrize("discriminator", [" 1", "1_0", "-3", "+4", "٣", None])
    def test_non_digit_forms_are_zero(self, discriminator: str | None) -> None:
        """Only plain ASCII digit strings count as a discriminator."""
        assert endpoints.default_user_avatar(discriminator) == (
            "https://cdn.discordapp.com/embed/avatars/0.png"
        )


class TestCdnEndpoints:
    """Tests for avatar and banner endpoints."""

    def test_user_avatar(self) -> None:
        assert endpoints.user_avatar("42", "abc") == (
            "https://cdn.discordapp.com/avatars/42/abc.png"
        )

    def test_user_avatar_animated(self) -> None:
        assert endpoints.user_avatar_animated("42", "a_abc") == (
            "https://cdn.discordapp.com/avatars/42/a_abc.gif"
        )

    def test_user_banner(self) -> None:
        assert endpoints.user_banner("42", "abc") == (
            "https://cdn.discordapp.com/banners/42/abc.png"
        )

    def test_user_banner_animated(self) -> None:
        assert endpoints.user_banner_animated("42", "a_abc") == (
            "https://cdn.discordapp.com/banners/42/a_abc.gif"
        )


class TestRestEndpoints:
    """Tests for REST paths."""

    def test_api_base(self) -> None:
        assert endpoints.ENDPOINT_API == "https://discord.com/api/v9/"

    def test_user(self) -> None:
        assert endpoints.user("@me") == "users/@me"

    def test_user_profile(self) -> None:
        assert endpoints.user_profile("42") == "users/42/profile"

    def test_user_connections_defaults_to_me(self) -> None:
        assert endpoints.user_connections() == "users/@me/connections"
