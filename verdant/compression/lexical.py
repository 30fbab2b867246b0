# verdant/compression/lexical.py
"""
Lexical compression ladder.

Rules are applied in a fixed order, each one over the whole corpus before
the next starts, and each only when the configured level reaches its
threshold:

    fluff          medium+
    sentence       high+
    emphasis       extreme
    articles       extreme
    flow           extreme
    abbreviations  extreme
    symbols        extreme

Code paragraphs, inline `code` spans and structural marker prefixes are
never touched.

When the output carries a dictionary, an abbreviation is only substituted
if its uses across the whole corpus save at least the size of its DICT
entry.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Iterable, List, Optional, Tuple

from verdant.compression.rules import (
    ABBREVIATIONS,
    DictionaryEntry,
    apply_flow,
    apply_symbols,
    compress_sentences,
    find_abbreviations,
    pays_off,
    remove_articles,
    remove_fluff,
    strip_emphasis,
    substitute_abbreviations,
    tidy,
)
from verdant.core.config import CompressionLevel
from verdant.core.document import CompressedDocument, Paragraph
from verdant.core.notation import split_marker
from verdant.logging.logger import get_logger
from verdant.logging.tags import LEXICAL

logger = get_logger(__name__)

# Backtick runs of equal length delimit an inline code span.
INLINE_CODE_RE = re.compile(r"(`+)(?:(?!\1).)+?\1")


@dataclass(frozen=True)
class LexicalRule:
    """A named text transformation gated by a minimum level."""

    name: str
    min_level: CompressionLevel
    apply: Callable[..., str]
    scan: Optional[Callable[[str], List[Tuple[DictionaryEntry, int]]]] = None

    def enabled_at(self, level: CompressionLevel) -> bool:
        return level.at_least(self.min_level)


LEXICAL_RULES: Tuple[LexicalRule, ...] = (
    LexicalRule("fluff", CompressionLevel.MEDIUM, remove_fluff),
    LexicalRule("sentence", CompressionLevel.HIGH, compress_sentences),
    LexicalRule("emphasis", CompressionLevel.EXTREME, strip_emphasis),
    LexicalRule("articles", CompressionLevel.EXTREME, remove_articles),
    LexicalRule("flow", CompressionLevel.EXTREME, apply_flow),
    LexicalRule(
        "abbreviations",
        CompressionLevel.EXTREME,
        substitute_abbreviations,
        scan=find_abbreviations,
    ),
    LexicalRule("symbols", CompressionLevel.EXTREME, apply_symbols),
)


def rules_for_level(level: CompressionLevel) -> List[LexicalRule]:
    return [rule for rule in LEXICAL_RULES if rule.enabled_at(level)]


@dataclass
class AbbreviationLedger:
    """
    Records which abbreviations were substituted during a run.

    The dense renderer reads it to emit the DICT line; an abbreviation is
    only ever listed if it was actually used.
    """

    counts: Counter = field(default_factory=Counter)

    def record(self, entry: DictionaryEntry, count: int = 1) -> None:
        self.counts[entry.abbreviation] += count

    def __contains__(self, abbreviation: str) -> bool:
        return self.counts[abbreviation] > 0

    def __len__(self) -> int:
        return sum(1 for c in self.counts.values() if c > 0)

    def used_entries(self) -> List[DictionaryEntry]:
        """Used entries in table order."""
        return [e for e in ABBREVIATIONS if e.abbreviation in self]

    def entries_in(self, text: str) -> List[DictionaryEntry]:
        """Used entries whose code appears as a whole word in text."""
        return [
            e
            for e in self.used_entries()
            if re.search(rf"(?<!\w){re.escape(e.abbreviation)}(?!\w)", text)
        ]


def _apply_outside_code(payload: str, fn: Callable[[str], str]) -> str:
    parts: List[str] = []
    pos = 0
    for match in INLINE_CODE_RE.finditer(payload):
        parts.append(fn(payload[pos : match.start()]))
        parts.append(match.group(0))
        pos = match.end()
    parts.append(fn(payload[pos:]))
    return "".join(parts)


def _prose_segments(payload: str) -> List[str]:
    return INLINE_CODE_RE.split(payload)[::2] if "`" in payload else [payload]


@dataclass
class LexicalCompressor:
    """
    Apply the rule ladder for one compression level.

    One compressor serves one run: abbreviation usage accumulates in its
    ledger across every document it processes. Set `charge_dictionary`
    when the output lists a DICT entry for every code it uses.
    """

    level: CompressionLevel
    ledger: AbbreviationLedger = field(default_factory=AbbreviationLedger)
    charge_dictionary: bool = False

    @property
    def rules(self) -> List[LexicalRule]:
        return rules_for_level(self.level)

    def compress_line(self, line: str, fn: Callable[[str], str]) -> str:
        prefix, payload = split_marker(line)
        indent = payload[: len(payload) - len(payload.lstrip())]
        body = payload[len(indent):]
        if not body:
            return line

        body = _apply_outside_code(body, lambda s: tidy(fn(s)))
        body = body.strip(" \t")
        # A deletion at the start can leave a dangling comma
        body = re.sub(r"^,\s*", "", body)
        return prefix + indent + body

    def compress_paragraph(
        self, paragraph: Paragraph, fn: Callable[[str], str]
    ) -> Optional[Paragraph]:
        if paragraph.is_code:
            return paragraph
        lines = []
        for line in paragraph.lines:
            out = self.compress_line(line, fn)
            if out.strip():
                lines.append(out)
        if not lines:
            return None
        text = "\n".join(lines)
        return paragraph if text == paragraph.text else paragraph.with_text(text)

    def apply_rule(
        self, documents: Iterable[CompressedDocument], fn: Callable[[str], str]
    ) -> List[CompressedDocument]:
        result = []
        for doc in documents:
            paragraphs = []
            for paragraph in doc.paragraphs:
                compressed = self.compress_paragraph(paragraph, fn)
                if compressed is not None:
                    paragraphs.append(compressed)
            result.append(doc.with_paragraphs(paragraphs))
        return result

    def scan(self, documents: Iterable[CompressedDocument], rule: LexicalRule) -> Counter:
        """Count a scanning rule's matches over every prose segment of the corpus."""
        counts: Counter = Counter()
        for doc in documents:
            for paragraph in doc.paragraphs:
                if paragraph.is_code:
                    continue
                for line in paragraph.lines:
                    _, payload = split_marker(line)
                    for segment in _prose_segments(payload):
                        for entry, count in rule.scan(segment):
                            counts[entry] += count
        return counts

    def select_entries(self, counts: Counter) -> List[DictionaryEntry]:
        """Entries worth substituting, recorded in the ledger."""
        chosen = []
        for entry, count in counts.items():
            if self.charge_dictionary and not pays_off(entry, count):
                logger.debug(
                    f"{LEXICAL} {entry.abbreviation} skipped: "
                    f"{count} use(s) do not cover its DICT entry"
                )
                continue
            self.ledger.record(entry, count)
            chosen.append(entry)
        return chosen

    def __call__(self, documents: List[CompressedDocument]) -> List[CompressedDocument]:
        rules = self.rules
        if not rules:
            logger.debug(f"{LEXICAL} level={self.level.value}: no rules active")
            return list(documents)

        for rule in rules:
            fn = rule.apply
            if rule.scan is not None:
                chosen = self.select_entries(self.scan(documents, rule))
                fn = partial(rule.apply, entries=frozenset(chosen))

            before = sum(len(d.text) for d in documents)
            documents = self.apply_rule(documents, fn)
            after = sum(len(d.text) for d in documents)
            logger.debug(f"{LEXICAL} rule={rule.name}: {before} → {after} chars")

        if len(self.ledger):
            logger.debug(
                f"{LEXICAL} abbreviations used: "
                f"{', '.join(e.abbreviation for e in self.ledger.used_entries())}"
            )
        return documents


__all__ = [
    "LexicalRule",
    "LEXICAL_RULES",
    "rules_for_level",
    "AbbreviationLedger",
    "LexicalCompressor",
    "INLINE_CODE_RE",
]
