"""Discord REST API client configured from a Session.

This module provides an async HTTP client for Discord's REST API with:
- Headers, timeout and retry budget taken from the Session
- Rate limit handling (429 responses), optional per session
- Exponential backoff for server errors (5xx) and transport failures
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any

import httpx

from discord_binding import endpoints
from discord_binding.logger import logger
from discord_binding.mappers import map_profile, map_user, map_user_connections
from discord_binding.models import Profile, User, UserConnection
from discord_binding.session import Session


# Retry configuration
MAX_RATE_LIMIT_RETRIES = 30  # Cap on consecutive 429 retries
INITIAL_BACKOFF = 1.0  # seconds
MAX_BACKOFF = 64.0  # seconds


class DiscordAPIError(Exception):
    """Raised when Discord API returns an error."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"Discord API error {status_code}: {message}")


class DiscordRateLimitError(Exception):
    """Raised on a 429 when the session does not retry rate limits."""

    def __init__(self, retry_after: float) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited, retry after {retry_after}s")


@dataclass
class RESTClient:
    """Async Discord REST API client.

    Usage:
        async with RESTClient(session) as client:
            user = await client.get_current_user()
    """

    session: Session

    def __post_init__(self) -> None:
        self._client: httpx.AsyncClient | None = None

    @property
    def headers(self) -> dict[str, str]:
        """Build request headers."""
        return {
            "Authorization": self.session.token,
            "User-Agent": self.session.user_agent,
            "Content-Type": "application/json",
        }

    async def __aenter__(self) -> "RESTClient":
        self._client = httpx.AsyncClient(
            base_url=endpoints.ENDPOINT_API,
            headers=self.headers,
            timeout=self.session.transport_timeout.total_seconds(),
        )
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make a request with rate limit and retry handling."""
        if not self._client:
            raise RuntimeError("Client not initialized. Use async with.")

        max_retries = self.session.max_rest_retries
        backoff = INITIAL_BACKOFF
        rate_limit_retries = 0
        attempt = 0

        while True:
            try:
                response = await self._client.request(method, path, params=params)
            except (httpx.TimeoutException, httpx.TransportError) as e:
                if attempt < max_retries:
                    reason = "timeout" if isinstance(e, httpx.TimeoutException) else str(e)
                    logger.retry(attempt + 1, max_retries, backoff, reason)
                    await asyncio.sleep(backoff)
                    backoff = min(backoff * 2, MAX_BACKOFF)
                    attempt += 1
                    continue
                raise

            if response.status_code == 200:
                return response.json()

            if response.status_code == 204:
                return None

            # Rate limited - doesn't count as an attempt
            if response.status_code == 429:
                retry_after = float(response.headers.get("Retry-After", 1.0))
                if not self.session.should_retry_on_rate_limit:
                    raise DiscordRateLimitError(retry_after)
                rate_limit_retries += 1
                if rate_limit_retries > MAX_RATE_LIMIT_RETRIES:
                    raise DiscordAPIError(429, "Max rate limit retries exceeded")
                logger.rate_limit(retry_after)
                await asyncio.sleep(retry_after)
                continue

            # Client errors - fail immediately
            if response.status_code in (401, 403, 404):
                error_msg = response.text
                try:
                    body = response.json()
                except ValueError:
                    body = None
                if isinstance(body, dict):
                    error_msg = body.get("message", response.text)
                raise DiscordAPIError(response.status_code, error_msg)

            # Server errors - retry with backoff
            if response.status_code >= 500 and attempt < max_retries:
                logger.retry(
                    attempt + 1,
                    max_retries,
                    backoff,
                    f"HTTP {response.status_code}",
                )
                await asyncio.sleep(backoff)
                backoff = min(backoff * 2, MAX_BACKOFF)
                attempt += 1
                continue

            raise DiscordAPIError(response.status_code, response.text)

    # -------------------------------------------------------------------------
    # User endpoints
    # -------------------------------------------------------------------------

    async def get_user(self, user_id: str) -> User:
        """Fetch a user by id."""
        return map_user(await self._request("GET", endpoints.user(user_id)))

    async def get_current_user(self) -> User:
        """Fetch the user that owns the session token."""
        return map_user(await self._request("GET", endpoints.user("@me")))

    async def get_user_profile(self, user_id: str) -> Profile:
        """Fetch a user's profile (user tokens only)."""
        return map_profile(await self._request("GET", endpoints.user_profile(user_id)))

    async def get_user_connections(self) -> list[UserConnection]:
        """Fetch the session user's linked external accounts."""
        return map_user_connections(
            await self._request("GET", endpoints.user_connections())
        )
