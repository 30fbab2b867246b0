"""
Root of the verdant exception hierarchy.
"""

from __future__ import annotations


class VerdantError(Exception):
    """Base class for all errors raised by verdant."""

    pass
