# verdant/cli/commands/profiles.py
"""
Profiles command: list the available model profiles.

Usage:
    verdant profiles
"""

from __future__ import annotations

from verdant.cli.ui import ui
from verdant.compression.profiles import PROFILES, available_profiles


def command() -> None:
    """Print every model profile and what it changes."""
    ui.profiles(PROFILES[name] for name in available_profiles())
