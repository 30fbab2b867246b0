# verdant/chunking/engine.py
"""
Chunker - greedy first-fit packing of atomic units into chunks.

An atomic unit is the smallest region that is never split:
- a paragraph
- a code fence (always its own paragraph)
- a heading block: consecutive headings plus the unit that follows them

Units are packed in order; a chunk is closed as soon as the next unit
would push the rendered output past `max_lines`. The budget covers the
renderer's layout too: `reserved_lines` header and footer lines per
output, and `section_lines` wrapper lines each time a unit opens a new
document block. A unit that cannot fit even in an empty chunk gets a
chunk of its own, which is the only case an output may exceed the budget.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from verdant.core.chunk import Chunk, ChunkSection
from verdant.core.document import CompressedDocument, Paragraph
from verdant.core.stats import estimate_tokens
from verdant.logging.logger import get_logger
from verdant.logging.tags import CHUNKING

logger = get_logger(__name__)


def chunk_filename(prefix: str, index: int, extension: str) -> str:
    """
    Output name of chunk `index`.

    Examples:
        >>> chunk_filename("compressed", 2, "md")
        'compressed_chunk_2.md'
        >>> chunk_filename("docs_chunk", 2, "vrd")
        'docs_chunk_2.vrd'
    """
    if "chunk" in prefix:
        return f"{prefix}_{index}.{extension}"
    return f"{prefix}_chunk_{index}.{extension}"


def single_filename(prefix: str, extension: str) -> str:
    return f"{prefix}.{extension}"


@dataclass(frozen=True)
class AtomicUnit:
    """Paragraphs of one document that must stay together."""

    document: CompressedDocument
    paragraphs: Tuple[Paragraph, ...]

    @property
    def line_count(self) -> int:
        return sum(p.line_count for p in self.paragraphs)


def atomic_units(documents: Sequence[CompressedDocument]) -> List[AtomicUnit]:
    """Split documents into atomic units, in order."""
    units: List[AtomicUnit] = []
    for doc in documents:
        pending: List[Paragraph] = []
        for paragraph in doc.paragraphs:
            pending.append(paragraph)
            if not paragraph.is_heading:
                units.append(AtomicUnit(doc, tuple(pending)))
                pending = []
        if pending:
            # trailing headings with nothing after them
            units.append(AtomicUnit(doc, tuple(pending)))
    return units


@dataclass
class Chunker:
    """
    Pack compressed documents into Chunks.

    With `enabled=False` everything goes into exactly one chunk.
    """

    max_lines: int = 800
    enabled: bool = True
    prefix: str = "compressed"
    extension: str = "md"
    reserved_lines: int = 0
    section_lines: int = 0

    @property
    def capacity(self) -> int:
        """Content lines available in one chunk."""
        return self.max_lines - self.reserved_lines

    def _cost(self, unit: AtomicUnit, current: List[AtomicUnit]) -> int:
        opens_section = not current or current[-1].document is not unit.document
        return unit.line_count + (self.section_lines if opens_section else 0)

    def _pack(self, units: List[AtomicUnit]) -> List[Tuple[List[AtomicUnit], bool]]:
        if not self.enabled:
            return [(units, False)]

        groups: List[Tuple[List[AtomicUnit], bool]] = []
        current: List[AtomicUnit] = []
        used = 0

        for unit in units:
            if current and used + self._cost(unit, current) > self.capacity:
                groups.append((current, False))
                current, used = [], 0
            size = self._cost(unit, current)
            if size > self.capacity:
                groups.append(([unit], True))
                continue
            current.append(unit)
            used += size

        if current or not groups:
            groups.append((current, False))
        return groups

    def _sections(self, units: List[AtomicUnit], started: set) -> Tuple[ChunkSection, ...]:
        sections: List[ChunkSection] = []
        doc: Optional[CompressedDocument] = None
        paragraphs: List[Paragraph] = []

        def close() -> None:
            if doc is not None:
                sections.append(
                    ChunkSection(
                        document=doc.document,
                        paragraphs=tuple(paragraphs),
                        continued=doc.path in started,
                    )
                )
                started.add(doc.path)

        for unit in units:
            if unit.document is not doc:
                close()
                doc, paragraphs = unit.document, []
            paragraphs.extend(unit.paragraphs)
        close()
        return tuple(sections)

    def name_for(self, index: int) -> str:
        if not self.enabled:
            return single_filename(self.prefix, self.extension)
        return chunk_filename(self.prefix, index, self.extension)

    def __call__(self, documents: Sequence[CompressedDocument]) -> List[Chunk]:
        groups = self._pack(atomic_units(documents))
        total = len(groups)
        started: set = set()
        chunks: List[Chunk] = []

        for index, (units, overflow) in enumerate(groups, start=1):
            sections = self._sections(units, started)
            lines = tuple(line for section in sections for line in section.lines)
            byte_size = len("\n".join(lines).encode("utf-8"))
            next_pointer = self.name_for(index + 1) if self.enabled and index < total else None
            chunks.append(
                Chunk(
                    index=index,
                    total_chunks=total,
                    sections=sections,
                    lines=lines,
                    byte_size=byte_size,
                    estimated_tokens=estimate_tokens(byte_size),
                    next_pointer=next_pointer,
                    overflow=overflow,
                )
            )
            if overflow:
                logger.warning(
                    f"{CHUNKING} chunk {index} holds one unit of {len(lines)} lines "
                    f"(budget {self.max_lines})"
                )

        logger.debug(f"{CHUNKING} {total} chunks, max_lines={self.max_lines}")
        return chunks


__all__ = ["chunk_filename", "single_filename", "AtomicUnit", "atomic_units", "Chunker"]
