"""Logging setup for applications built on discord_binding.

Records from the binding go through the ``discord_binding`` logger
namespace. The library never installs handlers itself; an application
(or the bundled CLI) calls setup_logging() once.

    from discord_binding.utils.logging import setup_logging

    setup_logging(level=logging.DEBUG)
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


PACKAGE_LOGGER = "discord_binding"

# HTTP stack used by RESTClient
TRANSPORT_LOGGERS = ("httpx", "httpcore")

LOG_FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Shared by RichHandler and every rich panel the binding prints.
console = Console()


def setup_logging(
    level: int = logging.INFO,
    log_file: str | Path | None = None,
    debug_third_party: bool = False,
) -> logging.Logger:
    """Route binding log records to the shared rich console.

    Args:
        level: Level for the ``discord_binding`` namespace
        log_file: Also append binding records to this file
        debug_third_party: Show httpx/httpcore records at DEBUG instead
            of only their warnings

    Returns:
        The configured ``discord_binding`` logger
    """
    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))

    # Third-party records reach the console through the root logger only.
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)

    transport_level = logging.DEBUG if debug_third_party else logging.WARNING
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for old_handler in list(package_logger.handlers):
        package_logger.removeHandler(old_handler)
        old_handler.close()

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(LOG_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        package_logger.addHandler(file_handler)

    return package_logger
