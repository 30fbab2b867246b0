# verdant/pipeline/steps/markdown.py
"""
Line patterns for the markdown subset verdant recognises.

There is no markdown AST: every construct is identified from a single
line, plus fence pairing which needs the opening line to find its close.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

FENCE_OPEN_RE = re.compile(r"^(?P<indent>[ \t]*)(?P<fence>`{3,}|~{3,})[ \t]*(?P<info>[^`]*?)[ \t]*$")
HEADING_RE = re.compile(r"^(?P<hashes>#{1,6})[ \t]+(?P<text>.*?)(?:[ \t]+#+)?[ \t]*$")
LIST_ITEM_RE = re.compile(r"^(?P<indent>[ \t]*)(?P<marker>[-*+]|\d{1,9}[.)])[ \t]+(?P<text>.*)$")
CHECKBOX_RE = re.compile(r"^\[(?P<state>[ xX])\](?:[ \t]+(?P<text>.*))?$")

TAB_WIDTH = 4


@dataclass(frozen=True)
class Fence:
    """An opening code fence line."""

    char: str
    length: int
    info: str

    @property
    def language(self) -> str:
        """First word of the info string ("" when absent)."""
        return self.info.split()[0] if self.info.strip() else ""

    def closes(self, line: str) -> bool:
        """Same marker character, at least as long, at any indentation."""
        stripped = line.strip()
        return len(stripped) >= self.length and stripped == self.char * len(stripped)


def match_fence(line: str) -> Optional[Fence]:
    match = FENCE_OPEN_RE.match(line)
    if match is None:
        return None
    fence = match.group("fence")
    return Fence(char=fence[0], length=len(fence), info=match.group("info"))


def indent_width(indent: str) -> int:
    return len(indent.expandtabs(TAB_WIDTH))


__all__ = [
    "FENCE_OPEN_RE",
    "HEADING_RE",
    "LIST_ITEM_RE",
    "CHECKBOX_RE",
    "Fence",
    "match_fence",
    "indent_width",
]
