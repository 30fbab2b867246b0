# verdant/core/stats.py
"""
Run-wide compression statistics.

StatsCollector accumulates counters while a run executes; freeze() turns it
into the immutable CompressionStats read after the run. Statistics never
feed back into compression decisions.

Token counts are an estimate (CHARS_PER_TOKEN characters per token), not
the output of a real tokenizer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from verdant.exceptions.integrity import IntegrityWarning

CHARS_PER_TOKEN = 4


def estimate_tokens(chars: int) -> int:
    return chars // CHARS_PER_TOKEN


def _percent(part: int, whole: int) -> float:
    if whole <= 0:
        return 0.0
    return part / whole * 100.0


@dataclass(frozen=True)
class CompressionStats:
    """Immutable aggregate counters for one run."""

    original_chars: int = 0
    compressed_chars: int = 0
    original_lines: int = 0
    compressed_lines: int = 0
    paragraphs_removed: int = 0
    emoji_removed: int = 0
    chunks_created: int = 0
    warnings: Tuple[IntegrityWarning, ...] = ()

    @property
    def original_tokens(self) -> int:
        return estimate_tokens(self.original_chars)

    @property
    def compressed_tokens(self) -> int:
        return estimate_tokens(self.compressed_chars)

    @property
    def tokens_saved(self) -> int:
        return max(self.original_tokens - self.compressed_tokens, 0)

    @property
    def compressed_percent(self) -> float:
        """Compressed size as a percentage of the original size."""
        return _percent(self.compressed_chars, self.original_chars)

    @property
    def char_reduction(self) -> float:
        """Percentage of characters removed (negative if output grew)."""
        if self.original_chars <= 0:
            return 0.0
        return 100.0 - self.compressed_percent

    @property
    def line_reduction(self) -> float:
        if self.original_lines <= 0:
            return 0.0
        return 100.0 - _percent(self.compressed_lines, self.original_lines)


@dataclass
class StatsCollector:
    """Mutable accumulator used during a run; frozen once the run ends."""

    original_chars: int = 0
    compressed_chars: int = 0
    original_lines: int = 0
    compressed_lines: int = 0
    paragraphs_removed: int = 0
    emoji_removed: int = 0
    chunks_created: int = 0
    warnings: List[IntegrityWarning] = field(default_factory=list)
    _frozen: bool = field(default=False, repr=False)

    def _check_open(self) -> None:
        if self._frozen:
            raise RuntimeError("StatsCollector is frozen; statistics are write-once")

    def record_original(self, text: str) -> None:
        self._check_open()
        self.original_chars += len(text)
        self.original_lines += len(text.splitlines())

    def record_compressed(self, chars: int, lines: int) -> None:
        """Count one output's document records; headers and footers are excluded."""
        self._check_open()
        self.compressed_chars += chars
        self.compressed_lines += lines

    def record_emoji(self, count: int) -> None:
        self._check_open()
        self.emoji_removed += count

    def record_duplicates(self, count: int) -> None:
        self._check_open()
        self.paragraphs_removed += count

    def record_chunks(self, count: int) -> None:
        self._check_open()
        self.chunks_created += count

    def record_warning(self, warning: IntegrityWarning) -> None:
        self._check_open()
        self.warnings.append(warning)

    def freeze(self) -> CompressionStats:
        """Close the collector and return the immutable statistics."""
        self._frozen = True
        return CompressionStats(
            original_chars=self.original_chars,
            compressed_chars=self.compressed_chars,
            original_lines=self.original_lines,
            compressed_lines=self.compressed_lines,
            paragraphs_removed=self.paragraphs_removed,
            emoji_removed=self.emoji_removed,
            chunks_created=self.chunks_created,
            warnings=tuple(self.warnings),
        )


__all__ = [
    "CHARS_PER_TOKEN",
    "estimate_tokens",
    "CompressionStats",
    "StatsCollector",
]
