# verdant/logging/logger.py
"""
Unified logging setup for verdant.

All modules use:
    from verdant.logging.logger import get_logger
    logger = get_logger(__name__)

Configuration (format, level, handler) happens once, in configure_logging(),
which the CLI calls before running a command.
"""

import logging
import sys

DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def configure_logging(
    level: int = logging.WARNING,
    fmt: str = DEFAULT_FORMAT,
    stream=sys.stderr,
) -> None:
    """
    Configure the root logging handler.

    Safe to call multiple times; a second call only changes the level.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Return the logger for a module.

    Do NOT configure logging here.
    """
    return logging.getLogger(name)
