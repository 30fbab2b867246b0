"""
Unified import surface for all verdant exceptions.
"""

from .base import VerdantError
from .config import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    UnknownFormatError,
)
from .input import InputError
from .integrity import MALFORMED_HEADING, UNCLOSED_FENCE, IntegrityWarning
from .pipeline import PipelineStageError

__all__ = [
    "VerdantError",
    "InputError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "UnknownFormatError",
    "IntegrityWarning",
    "UNCLOSED_FENCE",
    "MALFORMED_HEADING",
    "PipelineStageError",
]
