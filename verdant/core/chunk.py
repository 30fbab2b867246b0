# verdant/core/chunk.py
"""
Chunk - the bounded output unit produced by the Chunker.

A chunk is an ordered slice of the compressed corpus with:
- 1-based position and total count
- per-document sections (so renderers can emit one block per document)
- flattened body lines and their size
- a pointer to its successor (None for the last chunk)

Chunks are created only by the Chunker and are immutable once emitted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from verdant.core.document import Document, Paragraph


@dataclass(frozen=True)
class ChunkSection:
    """The paragraphs of one document that landed in a chunk."""

    document: Document
    paragraphs: Tuple[Paragraph, ...] = field(default_factory=tuple)
    continued: bool = False  # document began in an earlier chunk

    @property
    def path(self) -> str:
        return self.document.path

    @property
    def lines(self) -> List[str]:
        out: List[str] = []
        for paragraph in self.paragraphs:
            out.extend(paragraph.lines)
        return out


@dataclass(frozen=True)
class Chunk:
    """One output unit of a run."""

    index: int
    total_chunks: int
    sections: Tuple[ChunkSection, ...]
    lines: Tuple[str, ...]
    byte_size: int
    estimated_tokens: int
    next_pointer: Optional[str] = None
    overflow: bool = False  # holds a single atomic unit larger than the budget

    @property
    def is_last(self) -> bool:
        return self.next_pointer is None

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def __repr__(self) -> str:
        return f"Chunk({self.index}/{self.total_chunks}, {self.line_count} lines)"


__all__ = ["ChunkSection", "Chunk"]
