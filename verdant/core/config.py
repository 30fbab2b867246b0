# verdant/core/config.py
"""
Run configuration for verdant.

CompressionConfig is the immutable value object handed to every stage of a
run. It is built once, from defaults, an optional YAML file and CLI
overrides, and never mutated afterwards.

Usage:
    from verdant.core.config import build_config, load_config

    config = build_config({"level": "high", "format": "dense"})
    config = load_config("verdant.yaml", overrides={"chunking": True})

Errors:
    ConfigNotFoundError    - config file doesn't exist
    ConfigParseError       - YAML is invalid or not a mapping
    ConfigValidationError  - values don't match the schema
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from verdant.exceptions.config import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)
from verdant.logging.logger import get_logger

logger = get_logger(__name__)


# =============================================================================
# Enumerations
# =============================================================================


class CompressionLevel(str, Enum):
    """Ordinal compression level gating the lexical rule ladder."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EXTREME = "extreme"

    @property
    def rank(self) -> int:
        return _LEVEL_ORDER.index(self)

    def at_least(self, other: "CompressionLevel") -> bool:
        return self.rank >= other.rank


_LEVEL_ORDER = [
    CompressionLevel.LOW,
    CompressionLevel.MEDIUM,
    CompressionLevel.HIGH,
    CompressionLevel.EXTREME,
]


class OutputFormat(str, Enum):
    """Wire format of the rendered output."""

    CLASSIC = "classic"
    DENSE = "dense"

    @property
    def extension(self) -> str:
        return "vrd" if self is OutputFormat.DENSE else "md"


# File extensions double as format names on the command line.
_FORMAT_ALIASES = {"md": "classic", "vrd": "dense"}


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
        for err in error.errors()
    )


# =============================================================================
# Schema
# =============================================================================


class CompressionConfig(BaseModel):
    """
    Immutable configuration for one compression run.

    Example YAML:
        level: high
        format: dense
        profile: claude
        chunking: true
        max_lines_per_chunk: 800
        strip_emoji: true
        chronological: true
        ai_mode: false

    Invalid values raise ConfigValidationError whether the model is built
    directly or through build_config()/load_config().
    """

    level: CompressionLevel = Field(
        default=CompressionLevel.MEDIUM, description="Compression level"
    )
    format: OutputFormat = Field(default=OutputFormat.CLASSIC, description="Output format")
    profile: str = Field(default="claude", description="Target model profile")
    chronological: bool = Field(
        default=True, description="Order documents oldest first by modification time"
    )
    strip_emoji: bool = Field(default=True, description="Remove emoji characters")
    chunking: bool = Field(default=False, description="Split output into chunks")
    max_lines_per_chunk: int = Field(default=800, description="Line budget per chunk")
    deduplicate: Optional[bool] = Field(
        default=None,
        description="Cross-file paragraph dedupe; None enables it from 'medium' up",
    )
    dedupe_min_chars: int = Field(
        default=0, description="Paragraphs shorter than this are never deduplicated"
    )
    output_prefix: str = Field(default="compressed", description="Output file prefix")
    ai_mode: bool = Field(
        default=False,
        description="Run the full extreme rule ladder and write a DICT header at any level",
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="wrap")
    @classmethod
    def as_config_error(cls, data: Any, handler: Any) -> "CompressionConfig":
        """Report invalid values as ConfigValidationError, however the model is built."""
        try:
            return handler(data)
        except ValidationError as e:
            raise ConfigValidationError(f"Invalid configuration: {_describe(e)}") from e

    @field_validator("level", "format", "profile", mode="before")
    @classmethod
    def lowercase_names(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().lower()
            return _FORMAT_ALIASES.get(v, v)
        return v

    @field_validator("profile")
    @classmethod
    def known_profile(cls, v: str) -> str:
        from verdant.compression.profiles import available_profiles

        if v not in available_profiles():
            raise ValueError(f"unknown profile {v!r}, expected one of {available_profiles()}")
        return v

    @field_validator("max_lines_per_chunk")
    @classmethod
    def positive_chunk_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"must be >= 1, got {v}")
        return v

    @field_validator("dedupe_min_chars")
    @classmethod
    def non_negative_min_chars(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"must be >= 0, got {v}")
        return v

    @field_validator("output_prefix")
    @classmethod
    def non_empty_prefix(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @property
    def dedupe_enabled(self) -> bool:
        """Whether the DuplicateDetector runs for this configuration."""
        if self.deduplicate is None:
            return self.level.at_least(CompressionLevel.MEDIUM)
        return self.deduplicate

    @property
    def lexical_level(self) -> CompressionLevel:
        """Level whose rule ladder runs; ai_mode always runs the full ladder."""
        return CompressionLevel.EXTREME if self.ai_mode else self.level

    @property
    def writes_dictionary(self) -> bool:
        """Whether rendered output lists a DICT entry for each code it uses."""
        return self.format is OutputFormat.DENSE or self.ai_mode

    @property
    def extension(self) -> str:
        return self.format.extension


# =============================================================================
# Loading
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return it as a dictionary.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"Loaded config from {p}")
    return data


def build_config(
    data: Optional[Mapping[str, Any]] = None,
    path: Optional[Path] = None,
) -> CompressionConfig:
    """
    Validate a mapping into a CompressionConfig.

    Raises:
        ConfigValidationError: If any value is invalid; carries `path`
    """
    try:
        return CompressionConfig(**dict(data or {}))
    except ConfigValidationError as e:
        if path is None:
            raise
        raise ConfigValidationError(str(e), path=path) from e


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> CompressionConfig:
    """
    Load configuration from an optional YAML file plus overrides.

    Overrides whose value is None are ignored, so callers can pass every
    CLI option and only the ones the user actually set take effect.

    Examples:
        >>> load_config(overrides={"level": "extreme"}).level
        <CompressionLevel.EXTREME: 'extreme'>
    """
    data: Dict[str, Any] = {}
    resolved = Path(path) if path is not None else None

    if resolved is not None:
        data.update(load_yaml(resolved))

    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value

    return build_config(data, path=resolved)


__all__ = [
    "CompressionLevel",
    "OutputFormat",
    "CompressionConfig",
    "load_yaml",
    "build_config",
    "load_config",
]
