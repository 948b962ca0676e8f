"""
Logging setup for termclip.

Installs a rich handler on stderr so log records never mix with
truncated output written to stdout.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str | None = None) -> None:
    """
    Configure the root logger with a RichHandler.

    Args:
        level: Logging level name. Falls back to the configured
            TERMCLIP_LOG_LEVEL when omitted.
    """
    if level is None:
        from termclip.config import get_config

        level = get_config().log_level

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
