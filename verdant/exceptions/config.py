"""
Configuration failures: invalid option values or combinations, unreadable
config files. Raised before processing; no partial output is produced.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from verdant.exceptions.base import VerdantError


class ConfigError(VerdantError):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config values don't match the schema."""

    pass


class UnknownFormatError(ConfigError):
    """Raised when no renderer exists for the requested output format."""

    pass
