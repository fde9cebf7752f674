"""Session bootstrap.

new() is the entry point of the binding: it builds a Session with every
default filled in, including the Identify payload sent during the gateway
handshake. Nothing here performs network I/O.

The token must be prefixed by the caller:
    "Bot ..."     for bot tokens
    "Bearer ..."  for OAuth2 tokens
It is stored verbatim in both Session.token and Session.identify.token.
Callers that change the token after construction must update both.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any

from discord_binding.logger import logger
from discord_binding.utils.json import compact_json
from discord_binding.utils.time import utcnow

if TYPE_CHECKING:
    from discord_binding.config.settings import AccountConfig


# Client fingerprint sent to the platform (Chrome 101 on Windows 10)
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/101.0.4951.67 Safari/537.36"
)
DEFAULT_BROWSER = "Chrome"
DEFAULT_BROWSER_VERSION = "101.0.4951.67"
DEFAULT_OS = "Windows"
DEFAULT_OS_VERSION = "10"
DEFAULT_RELEASE_CHANNEL = "stable"
DEFAULT_SYSTEM_LOCALE = "en-US"
DEFAULT_CLIENT_BUILD_NUMBER = 132647
DEFAULT_CAPABILITIES = 509

# Transport defaults
DEFAULT_SHARD_ID = 0
DEFAULT_SHARD_COUNT = 1
DEFAULT_MAX_REST_RETRIES = 3
DEFAULT_TRANSPORT_TIMEOUT = timedelta(seconds=20)


@dataclass
class IdentifyProperties:
    """Client metadata reported in the identify handshake."""

    os: str
    browser: str
    device: str
    browser_user_agent: str
    browser_version: str
    os_version: str
    referrer: str
    referring_domain: str
    referrer_current: str
    referring_domain_current: str
    release_channel: str
    system_locale: str
    client_build_number: int
    client_event_source: str | None

    def to_payload(self) -> dict[str, Any]:
        # client_event_source is sent as null rather than omitted
        return {
            "os": self.os,
            "browser": self.browser,
            "device": self.device,
            "browser_user_agent": self.browser_user_agent,
            "browser_version": self.browser_version,
            "os_version": self.os_version,
            "referrer": self.referrer,
            "referring_domain": self.referring_domain,
            "referrer_current": self.referrer_current,
            "referring_domain_current": self.referring_domain_current,
            "release_channel": self.release_channel,
            "system_locale": self.system_locale,
            "client_build_number": self.client_build_number,
            "client_event_source": self.client_event_source,
        }


@dataclass
class Identify:
    """The gateway identify payload. Mutable until the session is opened."""

    token: str
    properties: IdentifyProperties
    compress: bool
    capabilities: int
    large_threshold: int | None
    shard: tuple[int, int] | None
    intents: int | None

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON-ready ``d`` object of the identify op.

        Unset optional fields are omitted.
        """
        return compact_json(
            {
                "token": self.token,
                "properties": self.properties.to_payload(),
                "compress": self.compress,
                "large_threshold": self.large_threshold,
                "shard": list(self.shard) if self.shard is not None else None,
                "intents": self.intents,
                "capabilities": self.capabilities,
            }
        )


@dataclass
class Session:
    """Configuration and connection state for one Discord session.

    Build with new(); do not instantiate directly.
    """

    token: str
    identify: Identify

    state_enabled: bool
    compress: bool
    should_reconnect_on_error: bool
    should_retry_on_rate_limit: bool

    shard_id: int
    shard_count: int

    max_rest_retries: int
    transport_timeout: timedelta
    user_agent: str

    # Set to "now" so a heartbeat monitor treats the fresh session as acked.
    last_heartbeat_ack: datetime

    # Last gateway sequence number; written only by the gateway connection.
    _sequence: int = field(default=0, init=False, repr=False)

    def __repr__(self) -> str:
        return (
            f"<Session(shard={self.shard_id}/{self.shard_count}, "
            f"user_agent='{self.user_agent[:24]}...')>"
        )


def new_identify_properties() -> IdentifyProperties:
    """Return the default client fingerprint."""
    return IdentifyProperties(
        os=DEFAULT_OS,
        browser=DEFAULT_BROWSER,
        device="",
        browser_user_agent=DEFAULT_USER_AGENT,
        browser_version=DEFAULT_BROWSER_VERSION,
        os_version=DEFAULT_OS_VERSION,
        referrer="",
        referring_domain="",
        referrer_current="",
        referring_domain_current="",
        release_channel=DEFAULT_RELEASE_CHANNEL,
        system_locale=DEFAULT_SYSTEM_LOCALE,
        client_build_number=DEFAULT_CLIENT_BUILD_NUMBER,
        client_event_source=None,
    )


def new(token: str) -> Session:
    """Create a new Discord session with the provided token.

    Args:
        token: Credential including its scheme, e.g. "Bot ..." or "Bearer ..."

    Returns:
        Fully initialized Session. Fields may be modified before the
        session is opened.
    """
    session = Session(
        token=token,
        identify=Identify(
            token=token,
            properties=new_identify_properties(),
            compress=True,
            capabilities=DEFAULT_CAPABILITIES,
            large_threshold=None,
            shard=None,
            intents=None,
        ),
        state_enabled=True,
        compress=True,
        should_reconnect_on_error=True,
        should_retry_on_rate_limit=True,
        shard_id=DEFAULT_SHARD_ID,
        shard_count=DEFAULT_SHARD_COUNT,
        max_rest_retries=DEFAULT_MAX_REST_RETRIES,
        transport_timeout=DEFAULT_TRANSPORT_TIMEOUT,
        user_agent=DEFAULT_USER_AGENT,
        last_heartbeat_ack=utcnow(),
    )
    logger.session_created(session)
    return session


def session_from_account(account: "AccountConfig") -> Session:
    """Create a session from a configured account.

    Starts from new() and applies the account's overrides.
    """
    session = new(account.token)

    if account.user_agent:
        session.user_agent = account.user_agent
        session.identify.properties.browser_user_agent = account.user_agent

    session.compress = account.compress
    session.identify.compress = account.compress
    session.state_enabled = account.state_enabled
    session.should_reconnect_on_error = account.should_reconnect_on_error
    session.should_retry_on_rate_limit = account.should_retry_on_rate_limit
    session.max_rest_retries = account.max_rest_retries
    session.transport_timeout = timedelta(seconds=account.timeout)

    session.shard_id = account.shard_id
    session.shard_count = account.shard_count
    if account.shard_count > 1:
        session.identify.shard = (account.shard_id, account.shard_count)

    if account.system_locale:
        session.identify.properties.system_locale = account.system_locale
    if account.intents is not None:
        session.identify.intents = account.intents

    return session
