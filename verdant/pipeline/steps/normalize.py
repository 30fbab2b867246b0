# verdant/pipeline/steps/normalize.py
"""
Normalize Step - whitespace and emoji cleanup.

Per document, outside code fences:
- emoji removed (when enabled)
- trailing whitespace trimmed
- runs of spaces after the indentation collapsed to one
- three or more consecutive blank lines collapsed to one

Lines inside a fence are copied unchanged. An unclosed fence leaves the
rest of the document untouched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from verdant.core.document import Document
from verdant.core.stats import StatsCollector
from verdant.logging.logger import get_logger
from verdant.logging.tags import NORMALIZE

from .markdown import Fence, match_fence

logger = get_logger(__name__)

EMOJI_RE = re.compile(
    "["
    "\U0001F600-\U0001F64F"  # emoticons
    "\U0001F300-\U0001F5FF"  # symbols & pictographs
    "\U0001F680-\U0001F6FF"  # transport & map
    "\U0001F1E0-\U0001F1FF"  # flags
    "\u2600-\u26FF"  # misc symbols
    "\u2700-\u27BF"  # dingbats
    "\U0001F900-\U0001F9FF"  # supplemental symbols & pictographs
    "\U0001FA70-\U0001FAFF"  # symbols & pictographs extended-A
    "]"
)
# Variation selector 16 and zero-width joiner, left dangling once the
# emoji they modified are gone.
EMOJI_MODIFIER_RE = re.compile("[\uFE0F\u200D]")
SPACE_RUN_RE = re.compile(r" {2,}")


def strip_emoji(text: str) -> Tuple[str, int]:
    """Remove emoji, returning the new text and how many were removed."""
    text, count = EMOJI_RE.subn("", text)
    return EMOJI_MODIFIER_RE.sub("", text), count


def _clean_line(line: str) -> str:
    body = line.lstrip(" \t")
    indent = line[: len(line) - len(body)]
    body = SPACE_RUN_RE.sub(" ", body).rstrip()
    return indent + body if body else ""


def normalize_text(text: str, remove_emoji: bool = True) -> Tuple[str, int]:
    """
    Normalize one document's text.

    Returns:
        (normalized text, number of emoji removed)
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    out: List[str] = []
    fence: Optional[Fence] = None
    blank_run: List[str] = []
    emoji = 0

    def flush_blanks() -> None:
        out.extend(blank_run[:1] if len(blank_run) >= 3 else blank_run)
        blank_run.clear()

    for line in text.split("\n"):
        if fence is not None:
            out.append(line)
            if fence.closes(line):
                fence = None
            continue

        if remove_emoji:
            line, removed = strip_emoji(line)
            emoji += removed
        line = _clean_line(line)

        if not line:
            blank_run.append(line)
            continue

        flush_blanks()
        fence = match_fence(line)
        out.append(line)

    flush_blanks()
    return "\n".join(out).strip("\n"), emoji


@dataclass(frozen=True)
class NormalizedDocument:
    """A source document paired with its normalized text."""

    document: Document
    text: str


@dataclass
class NormalizeStep:
    """Normalize every document independently."""

    strip_emoji: bool = True

    def __call__(self, documents: List[Document], stats: StatsCollector) -> List[NormalizedDocument]:
        result: List[NormalizedDocument] = []
        for doc in documents:
            text, emoji = normalize_text(doc.raw_text, remove_emoji=self.strip_emoji)
            if emoji:
                stats.record_emoji(emoji)
                logger.debug(f"{NORMALIZE} {doc.path}: removed {emoji} emoji")
            result.append(NormalizedDocument(document=doc, text=text))

        logger.debug(f"{NORMALIZE} normalized {len(result)} documents")
        return result


__all__ = ["EMOJI_RE", "strip_emoji", "normalize_text", "NormalizedDocument", "NormalizeStep"]
