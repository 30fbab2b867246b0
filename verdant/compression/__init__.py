# verdant/compression/__init__.py
"""Model profiles and the lexical rewrite ladder."""

from .lexical import (
    LEXICAL_RULES,
    AbbreviationLedger,
    LexicalCompressor,
    LexicalRule,
    rules_for_level,
)
from .profiles import PROFILES, ModelProfile, available_profiles, get_profile
from .rules import ABBREVIATIONS, DictionaryEntry

__all__ = [
    "LEXICAL_RULES",
    "AbbreviationLedger",
    "LexicalCompressor",
    "LexicalRule",
    "rules_for_level",
    "PROFILES",
    "ModelProfile",
    "available_profiles",
    "get_profile",
    "ABBREVIATIONS",
    "DictionaryEntry",
]
