# verdant/pipeline/steps/dedupe.py
"""
Dedupe Step - remove repeated paragraphs across the whole corpus.

One sequential fold over the documents in input order, threading a
FingerprintAccumulator. The first occurrence of a paragraph is kept; every
later occurrence, in the same document or a later one, is dropped.

Code paragraphs are never removed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Set, Tuple

from verdant.core.document import CompressedDocument, Paragraph
from verdant.logging.logger import get_logger
from verdant.logging.tags import DEDUPE

logger = get_logger(__name__)


def fingerprint_key(paragraph: Paragraph) -> str:
    return paragraph.fingerprint


@dataclass
class FingerprintAccumulator:
    """
    The set of paragraph keys seen so far in a fold.

    `key` decides what counts as "the same paragraph"; swap it to change
    the equality used for deduplication.
    """

    key: Callable[[Paragraph], str] = fingerprint_key
    seen: Set[str] = field(default_factory=set)

    def admit(self, paragraph: Paragraph) -> bool:
        """Record the paragraph; False if an equal one was admitted before."""
        k = self.key(paragraph)
        if k in self.seen:
            return False
        self.seen.add(k)
        return True

    def __len__(self) -> int:
        return len(self.seen)


@dataclass
class DedupeStep:
    """
    Remove duplicate paragraphs.

    Paragraphs shorter than `min_chars` are exempt and never recorded.
    """

    min_chars: int = 0

    def __call__(
        self,
        documents: List[CompressedDocument],
        accumulator: FingerprintAccumulator | None = None,
    ) -> Tuple[List[CompressedDocument], int]:
        acc = accumulator if accumulator is not None else FingerprintAccumulator()
        result: List[CompressedDocument] = []
        removed = 0

        for doc in documents:
            kept: List[Paragraph] = []
            for paragraph in doc.paragraphs:
                if paragraph.is_code or len(paragraph.text) < self.min_chars:
                    kept.append(paragraph)
                    continue
                if acc.admit(paragraph):
                    kept.append(paragraph)
                else:
                    removed += 1
                    logger.debug(
                        f"{DEDUPE} dropped {paragraph.source}:{paragraph.line_start} "
                        f"({paragraph.fingerprint[:19]})"
                    )
            result.append(doc.with_paragraphs(kept))

        logger.debug(f"{DEDUPE} removed={removed}, unique={len(acc)}")
        return result, removed


__all__ = ["fingerprint_key", "FingerprintAccumulator", "DedupeStep"]
