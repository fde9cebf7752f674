"""CLI entry point for discord_binding.

Usage:
    python -m discord_binding                      # Show the session user
    python -m discord_binding --account alt        # Use a named account
    python -m discord_binding --user-id 123        # Show another user
    python -m discord_binding --profile            # Include profile data
    python -m discord_binding --debug              # Show debug info
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from discord_binding.config.settings import load_config
from discord_binding.logger import logger
from discord_binding.rest import RESTClient
from discord_binding.session import Session, session_from_account
from discord_binding.utils.logging import setup_logging


async def show_user(
    session: Session,
    user_id: str | None = None,
    with_profile: bool = False,
    size: str = "",
) -> None:
    """Fetch a user (default: the session user) and print a summary."""
    async with RESTClient(session) as client:
        if user_id:
            user = await client.get_user(user_id)
        else:
            user = await client.get_current_user()

        profile = None
        if with_profile:
            profile = await client.get_user_profile(user.id)

    logger.user_summary(user, size=size, profile=profile)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Discord session and user lookup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m discord_binding
      Show the user owning the first account's token

  python -m discord_binding --user-id 123456789012345678 --size 512
      Show another user with 512px avatar/banner URLs

  python -m discord_binding --config /path/to/config.json --account alt
      Use a custom config file and a named account
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        default="config.json",
        help="Path to config.json (default: config.json)",
    )
    parser.add_argument(
        "--account",
        type=str,
        help="Account name from config (default: first account)",
    )
    parser.add_argument(
        "--user-id",
        type=str,
        help="Look up this user instead of the session user",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Also fetch the user's profile",
    )
    parser.add_argument(
        "--size",
        type=str,
        default="256",
        help="Image size for avatar/banner URLs (default: 256)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output (DEBUG level)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode with third-party library logs",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Optional file to write logs to",
    )

    args = parser.parse_args()

    if args.debug:
        log_level = logging.DEBUG
        debug_third_party = True
    elif args.verbose:
        log_level = logging.DEBUG
        debug_third_party = False
    else:
        log_level = logging.INFO
        debug_third_party = False

    setup_logging(
        level=log_level,
        log_file=args.log_file,
        debug_third_party=debug_third_party,
    )

    try:
        settings = load_config(args.config)
        account = settings.get_account(args.account)
        session = session_from_account(account)
        logger.info(f"Using account '{account.name}'")

        asyncio.run(
            show_user(
                session,
                user_id=args.user_id,
                with_profile=args.profile,
                size=args.size,
            )
        )
        logger.success("Lookup complete")
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        raise


if __name__ == "__main__":
    main()
