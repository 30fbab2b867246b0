# verdant/logging/__init__.py
"""
Logging for verdant.

    from verdant.logging import get_logger
    logger = get_logger(__name__)
"""

from verdant.logging.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
