# verdant/core/document.py
"""
Core document types for the compression pipeline.

Flow: Document → (normalize, structure) → CompressedDocument of Paragraphs
      → (dedupe, lexical) → Chunker

Documents are created by the ingestion collaborator and consumed
read-only. Paragraphs are derived per run and discarded after chunking.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from functools import cached_property
from typing import Iterable, Optional, Tuple

from verdant.core.hashing import compute_text_fingerprint
from verdant.core.tags import derive_tags
from verdant.exceptions.input import InputError

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class Document:
    """
    One source markdown document.

    Immutable once loaded. `path` is the display identity used in rendered
    output; `modified` is only used for ordering and metadata.
    """

    path: str
    raw_text: str
    modified: datetime = _EPOCH
    tags: Tuple[str, ...] = ()

    @classmethod
    def from_text(
        cls,
        path: str,
        text: str,
        modified: Optional[datetime] = None,
    ) -> "Document":
        """Build a document and derive its tags from path and content."""
        return cls(
            path=path,
            raw_text=text,
            modified=modified or _EPOCH,
            tags=derive_tags(path, text),
        )

    @classmethod
    def from_bytes(
        cls,
        path: str,
        data: bytes,
        modified: Optional[datetime] = None,
    ) -> "Document":
        """
        Decode UTF-8 bytes into a document.

        Raises:
            InputError: If the bytes are not valid UTF-8 text
        """
        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise InputError(f"Document is not valid UTF-8 text: {e.reason}", path=path) from e
        return cls.from_text(path, text, modified)

    @property
    def size(self) -> int:
        """Size of the raw text in bytes."""
        return len(self.raw_text.encode("utf-8"))

    @property
    def line_count(self) -> int:
        return len(self.raw_text.splitlines())

    def __repr__(self) -> str:
        return f"Document({self.path!r}, {self.line_count} lines)"


class ParagraphKind(Enum):
    """Kinds of atomic paragraph produced by the structure stage."""

    TEXT = "text"  # prose, lists, checkboxes
    HEADING = "heading"  # a single heading marker line
    CODE = "code"  # a whole fenced block, delimiters included


@dataclass(frozen=True)
class Paragraph:
    """
    A contiguous run of non-blank lines within a document.

    line_start/line_end are 1-based and inclusive, counted in the
    structure-compressed text of the source document.
    """

    source: str
    line_start: int
    line_end: int
    text: str
    kind: ParagraphKind = ParagraphKind.TEXT

    @cached_property
    def fingerprint(self) -> str:
        """Stable hash of the normalized text, used for equality."""
        return compute_text_fingerprint(self.text)

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")

    @property
    def line_count(self) -> int:
        return self.text.count("\n") + 1

    @property
    def is_code(self) -> bool:
        return self.kind is ParagraphKind.CODE

    @property
    def is_heading(self) -> bool:
        return self.kind is ParagraphKind.HEADING

    def with_text(self, text: str) -> "Paragraph":
        return replace(self, text=text)

    def __repr__(self) -> str:
        preview = self.text[:40] + "..." if len(self.text) > 40 else self.text
        return f"Paragraph({self.kind.value}, {self.source}:{self.line_start}, {preview!r})"


@dataclass(frozen=True)
class CompressedDocument:
    """
    A document together with its current paragraphs.

    Every stage returns a new instance; nothing is modified in place.
    """

    document: Document
    paragraphs: Tuple[Paragraph, ...] = field(default_factory=tuple)

    @property
    def path(self) -> str:
        return self.document.path

    @property
    def text(self) -> str:
        """Paragraphs joined back into blank-line separated text."""
        return "\n\n".join(p.text for p in self.paragraphs)

    def with_paragraphs(self, paragraphs: Iterable[Paragraph]) -> "CompressedDocument":
        return replace(self, paragraphs=tuple(paragraphs))

    def __repr__(self) -> str:
        return f"CompressedDocument({self.path!r}, {len(self.paragraphs)} paragraphs)"


__all__ = [
    "Document",
    "ParagraphKind",
    "Paragraph",
    "CompressedDocument",
]
