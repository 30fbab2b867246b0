"""
Input failures: raised before any pipeline stage runs.
"""

from __future__ import annotations

from typing import Optional

from verdant.exceptions.base import VerdantError


class InputError(VerdantError):
    """The document set is empty, or a document cannot be decoded as text."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)
