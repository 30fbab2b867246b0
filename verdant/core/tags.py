# verdant/core/tags.py
"""
Derived document tags.

Short classification labels inferred from a document's path and content by
keyword lookup. They only appear in rendered metadata (the dense format's
T: field); no compression decision reads them.
"""

from __future__ import annotations

from typing import List, Tuple

MAX_TAGS = 5

# (keyword, tag)
_FRAMEWORKS: List[Tuple[str, str]] = [
    ("react", "react"),
    ("vue", "vue"),
    ("angular", "angular"),
    ("express", "express"),
    ("fastapi", "fastapi"),
    ("django", "django"),
    ("flask", "flask"),
    ("spring", "spring"),
    ("rails", "rails"),
    ("nextjs", "nextjs"),
]

_LANGUAGES: List[Tuple[str, str]] = [
    ("javascript", "js"),
    ("typescript", "ts"),
    ("python", "python"),
    ("rust", "rust"),
    ("golang", "go"),
    ("java", "java"),
    ("c++", "cpp"),
    ("c#", "csharp"),
    ("php", "php"),
    ("ruby", "ruby"),
]

_TECHNOLOGIES: List[Tuple[str, str]] = [
    ("docker", "docker"),
    ("kubernetes", "k8s"),
    ("aws", "aws"),
    ("azure", "azure"),
    ("gcp", "gcp"),
    ("redis", "redis"),
    ("postgresql", "postgres"),
    ("mysql", "mysql"),
    ("mongodb", "mongo"),
    ("elasticsearch", "elastic"),
]

_CONCEPTS: List[Tuple[str, str]] = [
    ("authentication", "auth"),
    ("authorization", "authz"),
    ("security", "security"),
    ("testing", "testing"),
    ("deployment", "deploy"),
    ("monitoring", "monitoring"),
    ("logging", "logging"),
    ("caching", "cache"),
    ("scaling", "scale"),
    ("performance", "perf"),
]

_ALL_PATTERNS = _FRAMEWORKS + _LANGUAGES + _TECHNOLOGIES + _CONCEPTS


def derive_tags(path: str, text: str) -> Tuple[str, ...]:
    """
    Infer up to MAX_TAGS sorted tags from a document's path and content.

    Matching is a case-insensitive substring test, so "javascript" also
    yields "java".
    """
    haystack = f"{path}\n{text}".lower()
    tags = {tag for keyword, tag in _ALL_PATTERNS if keyword in haystack}
    return tuple(sorted(tags)[:MAX_TAGS])


__all__ = ["derive_tags", "MAX_TAGS"]
