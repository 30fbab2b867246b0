# verdant/compression/profiles.py
"""
Model profiles.

A profile is a static set of rendering preferences for one downstream
consumer. It never rewrites text on its own; it only picks between
equivalent outputs where the structure stage or a renderer has more than
one valid choice:

- heading_prefix:      "H2:Setup" vs "SECTION_L2:Setup"
- uppercase_code_tags: "⟦python" vs "⟦PYTHON"
- context_markers:     NOTE line and chunk footer in classic output
- code_first:          dense records list X: lines before the C: line
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from verdant.core.notation import DEFAULT_HEADING_PREFIX, SECTION_HEADING_PREFIX
from verdant.exceptions.config import ConfigError


@dataclass(frozen=True)
class ModelProfile:
    name: str
    note: str
    heading_prefix: str = DEFAULT_HEADING_PREFIX
    uppercase_code_tags: bool = False
    context_markers: bool = True
    code_first: bool = False

    @property
    def target(self) -> str:
        """Profile name as written in output headers."""
        return self.name.upper()


PROFILES: Dict[str, ModelProfile] = {
    "claude": ModelProfile(
        name="claude",
        note="Structured data with technical notation",
    ),
    "gpt": ModelProfile(
        name="gpt",
        note="Consistent formatting with explicit context",
        heading_prefix=SECTION_HEADING_PREFIX,
    ),
    "copilot": ModelProfile(
        name="copilot",
        note="Code-focused with file-type hints",
        uppercase_code_tags=True,
        context_markers=False,
        code_first=True,
    ),
}


def get_profile(name: str) -> ModelProfile:
    """
    Look up a profile by name (case-insensitive).

    Raises:
        ConfigError: If no profile has that name
    """
    try:
        return PROFILES[name.lower()]
    except KeyError:
        raise ConfigError(
            f"Unknown model profile {name!r}. Available: {available_profiles()}"
        ) from None


def available_profiles() -> List[str]:
    return sorted(PROFILES)


__all__ = ["ModelProfile", "PROFILES", "get_profile", "available_profiles"]
