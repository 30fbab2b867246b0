# verdant/core/hashing.py
"""
Content fingerprints for duplicate detection.

A fingerprint is the SHA-256 of a paragraph's normalized text. It is used
for equality only, never for ordering. Within one run, equal fingerprints
are taken to mean equal text.
"""

from __future__ import annotations

import hashlib


def compute_bytes_hash(data: bytes) -> str:
    """
    Compute SHA-256 hash of raw bytes.

    Returns:
        SHA-256 hash as hex string with "sha256:" prefix
    """
    return f"sha256:{hashlib.sha256(data).hexdigest()}"


def compute_text_fingerprint(text: str) -> str:
    """
    Fingerprint a paragraph's normalized text.

    Examples:
        >>> compute_text_fingerprint("hello") == compute_text_fingerprint("hello")
        True
    """
    return compute_bytes_hash(text.encode("utf-8"))


__all__ = [
    "compute_bytes_hash",
    "compute_text_fingerprint",
]
