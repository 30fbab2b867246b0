# verdant/compression/rules.py
"""
Lexical rewrite rules and their fixed tables.

Each rule is a pure `str -> str` function over a run of prose that is
known to contain no structural marker and no inline code. The ladder in
verdant.compression.lexical decides which rules run and in what order:

    fluff (medium) → sentence (high)
    → emphasis → articles → flow → abbreviations → symbols (extreme)

Every rewrite is shorter than or equal to what it replaces, which is what
makes higher levels never produce larger output.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Collection, List, Match, Optional, Pattern, Sequence, Tuple


@dataclass(frozen=True)
class DictionaryEntry:
    """One abbreviation: `code` stands for `expansion` in dense output."""

    abbreviation: str
    expansion: str

    def __str__(self) -> str:
        return f"{self.abbreviation}={self.expansion}"


# =============================================================================
# Tables
# =============================================================================

# (phrase, replacement); an empty replacement deletes the phrase and a
# trailing comma.
FLUFF_PHRASES: List[Tuple[str, str]] = [
    ("it is important to note that", ""),
    ("it should be noted that", ""),
    ("it is worth mentioning that", ""),
    ("please note that", ""),
    ("as mentioned above", ""),
    ("as mentioned earlier", ""),
    ("as we can see", ""),
    ("in spite of the fact that", "although"),
    ("due to the fact that", "because"),
    ("at this point in time", "now"),
    ("for the purpose of", "for"),
    ("in the event that", "if"),
    ("has the ability to", "can"),
    ("with regard to", "about"),
    ("with respect to", "about"),
    ("in order to", "to"),
    ("is able to", "can"),
    ("a number of", "several"),
    ("and so on", "etc"),
]

QUALIFIERS: List[str] = [
    "very",
    "really",
    "quite",
    "basically",
    "just",
    "simply",
    "essentially",
    "actually",
    "literally",
]

CONNECTORS: List[str] = ["however", "furthermore", "moreover", "additionally"]

SYNONYM_PAIRS: List[Tuple[str, str]] = [
    ("each and every", "every"),
    ("first and foremost", "first"),
    ("any and all", "all"),
    ("null and void", "void"),
    ("full and complete", "complete"),
    ("various different", "various"),
    ("absolutely essential", "essential"),
    ("completely eliminate", "eliminate"),
    ("basic fundamentals", "fundamentals"),
    ("close proximity", "proximity"),
    ("end result", "result"),
    ("past history", "history"),
    ("future plans", "plans"),
]

REDUNDANT_CLAUSES: List[str] = [
    "as you can see",
    "as shown below",
    "as a matter of fact",
    "in other words",
    "needless to say",
    "if you will",
    "so to speak",
    "of course",
]

ARTICLES: List[str] = ["a", "an", "the", "An", "The"]

ABBREVIATIONS: List[DictionaryEntry] = [
    DictionaryEntry("FN", "function"),
    DictionaryEntry("PARAM", "parameter"),
    DictionaryEntry("DOC", "documentation"),
    DictionaryEntry("EX", "example"),
    DictionaryEntry("INST", "installation"),
    DictionaryEntry("CFG", "configuration"),
    DictionaryEntry("AUTH", "authentication"),
    DictionaryEntry("AUTHZ", "authorization"),
    DictionaryEntry("DB", "database"),
    DictionaryEntry("MW", "middleware"),
    DictionaryEntry("COMP", "component"),
    DictionaryEntry("IMPL", "implementation"),
    DictionaryEntry("ENV", "environment"),
    DictionaryEntry("REPO", "repository"),
    DictionaryEntry("APP", "application"),
    DictionaryEntry("DEV", "development"),
    DictionaryEntry("PROD", "production"),
]

# Longest phrases first so "greater than or equal to" wins over "equal to".
SYMBOLS: List[Tuple[str, str]] = [
    ("greater than or equal to", "≥"),
    ("less than or equal to", "≤"),
    ("if and only if", "⟺"),
    ("is equivalent to", "≡"),
    ("equivalent to", "≡"),
    ("not equal to", "≠"),
    ("approximately", "≈"),
    ("there exists", "∃"),
    ("therefore", "∴"),
    ("results in", "→"),
    ("leads to", "→"),
    ("because", "∵"),
    ("implies", "⟹"),
    ("infinity", "∞"),
    ("returns", "→"),
    ("for all", "∀"),
    ("equals", "="),
]


# =============================================================================
# Helpers
# =============================================================================


def _phrase_pattern(phrase: str) -> str:
    return r"\b" + r"\s+".join(re.escape(word) for word in phrase.split()) + r"\b"


def _match_case(original: str, replacement: str) -> str:
    if replacement and original[:1].isupper() and replacement[:1].islower():
        return replacement[0].upper() + replacement[1:]
    return replacement


def _deleter(pattern: Pattern[str]) -> Callable[[Match[str]], str]:
    """
    Build a substitution that deletes the match.

    The pattern's last group captures the first character after the
    deleted words; it is upper-cased when the deleted text started a
    capitalised sentence.
    """

    def repl(match: Match[str]) -> str:
        following = match.group(match.lastindex or 0) or ""
        if match.group(0)[:1].isupper():
            return following.upper()
        return following

    return repl


def _replacer(replacement: str) -> Callable[[Match[str]], str]:
    def repl(match: Match[str]) -> str:
        return _match_case(match.group(0), replacement)

    return repl


def _compile_table(table: Sequence[Tuple[str, str]]) -> List[Tuple[Pattern[str], Callable]]:
    compiled = []
    for phrase, replacement in table:
        if replacement:
            pattern = re.compile(_phrase_pattern(phrase), re.IGNORECASE)
            compiled.append((pattern, _replacer(replacement)))
        else:
            pattern = re.compile(_phrase_pattern(phrase) + r",?\s*(\w?)", re.IGNORECASE)
            compiled.append((pattern, _deleter(pattern)))
    return compiled


_WS_RE = re.compile(r"[ \t]{2,}")
_SPACE_BEFORE_PUNCT_RE = re.compile(r"[ \t]+([,.;:!?])")
_DOUBLE_COMMA_RE = re.compile(r",\s*,")


def tidy(text: str) -> str:
    """Clean up whitespace and punctuation left behind by deletions."""
    text = _WS_RE.sub(" ", text)
    text = _SPACE_BEFORE_PUNCT_RE.sub(r"\1", text)
    return _DOUBLE_COMMA_RE.sub(",", text)


# =============================================================================
# Rules
# =============================================================================

_FLUFF = _compile_table(FLUFF_PHRASES)


def remove_fluff(text: str) -> str:
    """Delete or shorten filler phrases."""
    for pattern, repl in _FLUFF:
        text = pattern.sub(repl, text)
    return tidy(text)


_QUALIFIER_RE = re.compile(r"\b(?:" + "|".join(QUALIFIERS) + r")\s+(\w?)", re.IGNORECASE)
_CONNECTOR_RE = re.compile(r"\b(?:" + "|".join(CONNECTORS) + r")\b,?\s*(\w?)", re.IGNORECASE)
_SYNONYMS = _compile_table(SYNONYM_PAIRS)
_REPEAT_RE = re.compile(r"\b([A-Za-z]+)(\s+\1\b)+", re.IGNORECASE)
_CLAUSE_ALT = "|".join(_phrase_pattern(c) for c in REDUNDANT_CLAUSES)
_INNER_CLAUSE_RE = re.compile(r",\s*(?:" + _CLAUSE_ALT + r")\s*,", re.IGNORECASE)
_LEADING_CLAUSE_RE = re.compile(r"(?:^|(?<=[.!?]\s))(?:" + _CLAUSE_ALT + r"),\s*(\w?)", re.IGNORECASE)


def compress_sentences(text: str) -> str:
    """Remove qualifiers, connectors, synonym pairs, repeats and redundant clauses."""
    text = _INNER_CLAUSE_RE.sub("", text)
    text = _LEADING_CLAUSE_RE.sub(_deleter(_LEADING_CLAUSE_RE), text)
    text = _CONNECTOR_RE.sub(_deleter(_CONNECTOR_RE), text)
    text = _QUALIFIER_RE.sub(_deleter(_QUALIFIER_RE), text)
    for pattern, repl in _SYNONYMS:
        text = pattern.sub(repl, text)
    text = _REPEAT_RE.sub(r"\1", text)
    return tidy(text)


# Only delete an article that stands alone between whitespace-delimited
# words; "x-the", "a/b" or "A" used as a label are left as they are.
_ARTICLE_RE = re.compile(r"(?<![\w'\-/.])(?:" + "|".join(ARTICLES) + r")[ \t]+(?=[\w\"'(\[])(\w?)")


def remove_articles(text: str) -> str:
    """Delete articles where doing so cannot merge two words."""
    return tidy(_ARTICLE_RE.sub(_deleter(_ARTICLE_RE), text))


# A lone "*" with whitespace on either side ("2 * 3") is arithmetic, not emphasis.
_STRONG_RE = re.compile(r"\*\*(?=\S)(.+?)(?<=\S)\*\*")
_EM_RE = re.compile(r"(?<![\w*])\*(?=[^\s*])(.+?)(?<=[^\s*])\*(?![\w*])")


def strip_emphasis(text: str) -> str:
    """Drop `**strong**` and `*em*` markup, keeping the words."""
    text = _STRONG_RE.sub(r"\1", text)
    return _EM_RE.sub(r"\1", text)


# (pattern, replacement) in application order
FLOW_PATTERNS: List[Tuple[str, str]] = [
    (r"\b(\w+)\s+passes\s+(\w+)\s+to\s+(\w+)", r"\1→\2→\3"),
    (r"\b(\w+)\s+(?:triggers|causes|leads\s+to|results\s+in)\s+(\w+)", r"\1→\2"),
    (r",?\s+(?:and\s+)?then\s+(?=\w)", "→"),
    (r"\s+followed\s+by\s+(?=\w)", "→"),
]

_FLOW = [(re.compile(pattern, re.IGNORECASE), repl) for pattern, repl in FLOW_PATTERNS]


def apply_flow(text: str) -> str:
    """Rewrite cause/sequence phrasing as arrow chains ("A triggers B" → "A→B")."""
    for pattern, repl in _FLOW:
        text = pattern.sub(repl, text)
    return text


_ABBREVIATION_PATTERNS: List[Tuple[DictionaryEntry, Pattern[str]]] = [
    (entry, re.compile(rf"\b{re.escape(entry.expansion)}\b", re.IGNORECASE))
    for entry in ABBREVIATIONS
]


def dictionary_cost(entry: DictionaryEntry) -> int:
    """Characters an entry adds to a DICT line, separator included."""
    return len(str(entry)) + 1


def pays_off(entry: DictionaryEntry, count: int) -> bool:
    """Whether `count` substitutions save at least the entry's dictionary cost."""
    saved = count * (len(entry.expansion) - len(entry.abbreviation))
    return saved >= dictionary_cost(entry)


def find_abbreviations(text: str) -> List[Tuple[DictionaryEntry, int]]:
    """Return (entry, match count) for every dictionary term present in text."""
    found = []
    for entry, pattern in _ABBREVIATION_PATTERNS:
        count = len(pattern.findall(text))
        if count:
            found.append((entry, count))
    return found


def substitute_abbreviations(
    text: str, entries: Optional[Collection[DictionaryEntry]] = None
) -> str:
    """
    Replace whole-word dictionary terms with their short codes.

    Args:
        text: Prose to rewrite
        entries: Restrict substitution to these entries (default: all)
    """
    for entry, pattern in _ABBREVIATION_PATTERNS:
        if entries is None or entry in entries:
            text = pattern.sub(entry.abbreviation, text)
    return text


_SYMBOL_PATTERNS = [
    (re.compile(_phrase_pattern(phrase), re.IGNORECASE), symbol) for phrase, symbol in SYMBOLS
]


def apply_symbols(text: str) -> str:
    """Replace logical and mathematical connector words with symbols."""
    for pattern, symbol in _SYMBOL_PATTERNS:
        text = pattern.sub(symbol, text)
    return text


__all__ = [
    "DictionaryEntry",
    "FLUFF_PHRASES",
    "QUALIFIERS",
    "CONNECTORS",
    "SYNONYM_PAIRS",
    "REDUNDANT_CLAUSES",
    "ARTICLES",
    "ABBREVIATIONS",
    "SYMBOLS",
    "tidy",
    "remove_fluff",
    "compress_sentences",
    "remove_articles",
    "strip_emphasis",
    "FLOW_PATTERNS",
    "apply_flow",
    "dictionary_cost",
    "pays_off",
    "find_abbreviations",
    "substitute_abbreviations",
    "apply_symbols",
]
