"""Rich-based logging utilities for the Discord binding.

Wraps a standard library logger with binding-specific messages (rate limits,
retries, session creation) and rich summary panels for the CLI.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from discord_binding.models.enums import UserPremiumType
from discord_binding.utils.logging import console

if TYPE_CHECKING:
    from discord_binding.models import Profile, User
    from discord_binding.session import Session


def premium_label(premium_type: UserPremiumType | int) -> str:
    """Name of a premium type, or its raw value when the enum has no member."""
    if isinstance(premium_type, UserPremiumType):
        return premium_type.name
    return str(premium_type)


class BindingLogger:
    """Logger for session and REST activity with rich output."""

    def __init__(self, logger_name: str | None = None) -> None:
        self.console: Console = console
        self._logger = logging.getLogger(logger_name or __name__)

    # -------------------------------------------------------------------------
    # Standard Logging (goes through Python logging)
    # -------------------------------------------------------------------------

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def success(self, message: str) -> None:
        """Print a success message with green checkmark."""
        self.console.print(f"[green]✓[/green] {message}")

    # -------------------------------------------------------------------------
    # REST: Rate Limiting & Retries
    # -------------------------------------------------------------------------

    def rate_limit(self, retry_after: float) -> None:
        """Log a rate limit warning with retry time."""
        self._logger.warning(f"Rate limited. Waiting {retry_after:.1f}s...")

    def retry(
        self, attempt: int, max_attempts: int, wait_time: float, reason: str = ""
    ) -> None:
        """Log a retry attempt with optional reason."""
        msg = f"Retry {attempt}/{max_attempts} in {wait_time:.1f}s"
        if reason:
            msg += f" ({reason})"
        self._logger.warning(msg)

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    def session_created(self, session: "Session") -> None:
        """Log session construction. Never logs the token."""
        self._logger.debug(
            f"Session created (shard {session.shard_id}/{session.shard_count}, "
            f"compress={session.compress}, max_rest_retries={session.max_rest_retries})"
        )

    # -------------------------------------------------------------------------
    # Summary
    # -------------------------------------------------------------------------

    def _print_summary_table(
        self,
        title: str,
        rows: list[tuple[str, str | int]],
        *,
        style: str = "cyan",
    ) -> None:
        """Print a summary panel of (label, value) rows."""
        self.console.print()

        table = Table.grid(padding=(0, 2))
        table.add_column("Field", style="bold")
        table.add_column("Value", style="green")

        for label, value in rows:
            if isinstance(value, int):
                table.add_row(label, f"{value:,}")
            else:
                table.add_row(label, str(value))

        panel = Panel(
            table,
            title=f"[bold]{title}[/bold]",
            border_style=style,
            padding=(1, 2),
        )
        self.console.print(panel)

    def user_summary(
        self,
        user: "User",
        *,
        size: str = "",
        profile: "Profile | None" = None,
    ) -> None:
        """Print a user's identity and resolved resource URLs."""
        rows: list[tuple[str, str | int]] = [
            ("ID", user.id),
            ("Mention", user.mention()),
            ("Label", user.display_label()),
            ("Display name", user.display_name or "-"),
            ("Bot", "yes" if user.bot else "no"),
            ("Premium", premium_label(user.premium_type)),
            ("Avatar", user.avatar_url(size)),
            ("Banner", user.banner_url(size) or "-"),
        ]

        if profile is not None:
            rows.append(("Connections", len(profile.connections)))
            rows.append(("Mutual guilds", len(profile.mutual_guilds)))
            if profile.premium_since:
                rows.append(("Premium since", profile.premium_since.isoformat()))
            if profile.boosting_since:
                rows.append(("Boosting since", profile.boosting_since.isoformat()))

        self._print_summary_table(user.username or user.id, rows)


# Global logger instance
logger = BindingLogger()
