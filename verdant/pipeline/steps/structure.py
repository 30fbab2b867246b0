# verdant/pipeline/steps/structure.py
"""
Structure Step - rewrite markdown structure into condensed notation.

Headings, list items, checkbox items and code fences become the line
prefixes of verdant.core.notation; the document is then segmented into
paragraphs:

- blank lines separate paragraphs
- a heading is always its own paragraph
- a fenced code block is always its own paragraph

Malformed headings and unclosed fences are passed through unmodified and
reported as IntegrityWarnings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from verdant.compression.profiles import ModelProfile, get_profile
from verdant.core.document import CompressedDocument, Paragraph, ParagraphKind
from verdant.core.notation import (
    BULLET,
    CHECKED,
    FENCE_CLOSE,
    NUMBERED,
    UNCHECKED,
    format_fence_open,
    format_heading,
    format_item,
)
from verdant.core.stats import StatsCollector
from verdant.exceptions.integrity import MALFORMED_HEADING, UNCLOSED_FENCE, IntegrityWarning
from verdant.logging.logger import get_logger
from verdant.logging.tags import STRUCTURE

from .markdown import CHECKBOX_RE, HEADING_RE, LIST_ITEM_RE, indent_width, match_fence
from .normalize import NormalizedDocument

logger = get_logger(__name__)


@dataclass
class _Segmenter:
    """Collects rewritten lines into (kind, lines) blocks."""

    blocks: List[Tuple[ParagraphKind, List[str]]] = field(default_factory=list)
    current: List[str] = field(default_factory=list)

    def flush(self) -> None:
        if self.current:
            self.blocks.append((ParagraphKind.TEXT, self.current))
            self.current = []

    def add_line(self, line: str) -> None:
        self.current.append(line)

    def add_block(self, kind: ParagraphKind, lines: List[str]) -> None:
        self.flush()
        self.blocks.append((kind, lines))


@dataclass
class _ListState:
    """Indent stack of the list run currently being read."""

    stack: List[int] = field(default_factory=list)

    def depth_for(self, width: int) -> int:
        while self.stack and self.stack[-1] > width:
            self.stack.pop()
        if not self.stack or width > self.stack[-1]:
            self.stack.append(width)
        return len(self.stack) - 1

    def reset(self) -> None:
        self.stack.clear()


def _rewrite_item(line: str, lists: _ListState) -> Optional[str]:
    match = LIST_ITEM_RE.match(line)
    if match is None:
        return None

    depth = lists.depth_for(indent_width(match.group("indent")))
    marker = match.group("marker")
    text = match.group("text")

    if marker in "-*+":
        checkbox = CHECKBOX_RE.match(text)
        if checkbox is not None:
            symbol = UNCHECKED if checkbox.group("state") == " " else CHECKED
            return format_item(symbol, depth, checkbox.group("text") or "")
        return format_item(BULLET, depth, text)
    return format_item(NUMBERED, depth, text)


def structure_text(
    text: str,
    source: str,
    profile: ModelProfile,
) -> Tuple[List[Paragraph], List[IntegrityWarning]]:
    """
    Rewrite one normalized document and split it into paragraphs.

    Returns:
        (paragraphs, integrity warnings)
    """
    lines = text.split("\n") if text else []
    segmenter = _Segmenter()
    lists = _ListState()
    warnings: List[IntegrityWarning] = []

    i = 0
    while i < len(lines):
        line = lines[i]

        if not line.strip():
            segmenter.flush()
            i += 1
            continue

        fence = match_fence(line)
        if fence is not None:
            lists.reset()
            close = next((j for j in range(i + 1, len(lines)) if fence.closes(lines[j])), None)
            if close is None:
                warnings.append(IntegrityWarning(UNCLOSED_FENCE, source, i + 1, line.strip()))
                segmenter.add_block(ParagraphKind.CODE, lines[i:])
                break
            language = fence.language.upper() if profile.uppercase_code_tags else fence.language
            body = lines[i + 1 : close]
            segmenter.add_block(
                ParagraphKind.CODE, [format_fence_open(language), *body, FENCE_CLOSE]
            )
            i = close + 1
            continue

        if line.startswith("#"):
            heading = HEADING_RE.match(line)
            if heading is not None and heading.group("text"):
                lists.reset()
                level = len(heading.group("hashes"))
                segmenter.add_block(
                    ParagraphKind.HEADING,
                    [format_heading(level, heading.group("text"), profile.heading_prefix)],
                )
                i += 1
                continue
            warnings.append(IntegrityWarning(MALFORMED_HEADING, source, i + 1, line[:40]))
            segmenter.add_line(line)
            i += 1
            continue

        item = _rewrite_item(line, lists)
        if item is not None:
            segmenter.add_line(item)
        else:
            if line == line.lstrip():
                lists.reset()
            segmenter.add_line(line)
        i += 1

    segmenter.flush()

    paragraphs: List[Paragraph] = []
    next_start = 1
    for kind, block in segmenter.blocks:
        end = next_start + len(block) - 1
        paragraphs.append(
            Paragraph(
                source=source,
                line_start=next_start,
                line_end=end,
                text="\n".join(block),
                kind=kind,
            )
        )
        # one blank separator line between paragraphs
        next_start = end + 2
    return paragraphs, warnings


@dataclass
class StructureStep:
    """Apply structure_text to every normalized document."""

    profile: ModelProfile = field(default_factory=lambda: get_profile("claude"))

    def __call__(
        self, documents: List[NormalizedDocument], stats: StatsCollector
    ) -> List[CompressedDocument]:
        result: List[CompressedDocument] = []
        for normalized in documents:
            path = normalized.document.path
            paragraphs, warnings = structure_text(normalized.text, path, self.profile)
            for warning in warnings:
                stats.record_warning(warning)
                logger.warning(f"{STRUCTURE} {warning}")
            result.append(CompressedDocument(document=normalized.document, paragraphs=tuple(paragraphs)))

        total = sum(len(d.paragraphs) for d in result)
        logger.debug(f"{STRUCTURE} {len(result)} documents, {total} paragraphs")
        return result


__all__ = ["structure_text", "StructureStep"]
