# verdant/core/notation.py
"""
The condensed structural notation emitted by the structure stage.

Every marker is a line prefix, so later stages can recognise structure
without re-parsing markdown:

    H2:Installation          heading, level 2 (SECTION_L2: for some profiles)
    •item                    bullet list item, depth 0
    •1>nested item           bullet list item, depth 1
    №step                    numbered list item
    ☐todo / ☑done            unchecked / checked checkbox item
    ⟦python ... ⟧            code fence; body lines are verbatim

Lexical rules rewrite only the payload after a marker prefix, never the
prefix itself, and never anything between fence delimiters.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

DEFAULT_HEADING_PREFIX = "H"
SECTION_HEADING_PREFIX = "SECTION_L"

BULLET = "•"
NUMBERED = "№"
CHECKED = "☑"
UNCHECKED = "☐"

FENCE_OPEN = "⟦"
FENCE_CLOSE = "⟧"

HEADING_RE = re.compile(r"^(?:H|SECTION_L)([1-6]):")
ITEM_RE = re.compile(r"^[•№☑☐](?:\d+>)?")


def format_heading(level: int, text: str, prefix: str = DEFAULT_HEADING_PREFIX) -> str:
    return f"{prefix}{level}:{text}"


def format_item(marker: str, depth: int, text: str) -> str:
    depth_part = f"{depth}>" if depth > 0 else ""
    return f"{marker}{depth_part}{text}"


def format_fence_open(language: str) -> str:
    return f"{FENCE_OPEN}{language}"


def parse_heading(line: str) -> Optional[Tuple[int, str]]:
    """Return (level, text) for a heading marker line, else None."""
    match = HEADING_RE.match(line)
    if match is None:
        return None
    return int(match.group(1)), line[match.end():]


def is_heading(line: str) -> bool:
    return HEADING_RE.match(line) is not None


def is_fence_open(line: str) -> bool:
    return line.startswith(FENCE_OPEN)


def is_fence_close(line: str) -> bool:
    return line == FENCE_CLOSE


def fence_language(line: str) -> str:
    """Language tag of a fence-open line ("" when none was given)."""
    return line[len(FENCE_OPEN):]


def split_marker(line: str) -> Tuple[str, str]:
    """
    Split a line into (marker prefix, payload).

    Lines without a structural marker return an empty prefix.

    Examples:
        >>> split_marker("H2:Setup")
        ('H2:', 'Setup')
        >>> split_marker("•1>nested")
        ('•1>', 'nested')
        >>> split_marker("plain text")
        ('', 'plain text')
    """
    match = HEADING_RE.match(line) or ITEM_RE.match(line)
    if match is None:
        return "", line
    return line[: match.end()], line[match.end():]


__all__ = [
    "DEFAULT_HEADING_PREFIX",
    "SECTION_HEADING_PREFIX",
    "BULLET",
    "NUMBERED",
    "CHECKED",
    "UNCHECKED",
    "FENCE_OPEN",
    "FENCE_CLOSE",
    "format_heading",
    "format_item",
    "format_fence_open",
    "parse_heading",
    "is_heading",
    "is_fence_open",
    "is_fence_close",
    "fence_language",
    "split_marker",
]
