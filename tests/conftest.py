# tests/conftest.py
"""
Shared fixtures for the verdant test suite.

Most tests build documents in memory; only ingestion and CLI tests touch
the filesystem, always under tmp_path.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict

import pytest

from verdant.compression.profiles import get_profile
from verdant.core.document import CompressedDocument, Document
from verdant.pipeline.steps.normalize import normalize_text
from verdant.pipeline.steps.structure import structure_text

FIXED_TIME = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def make_compressed(path: str, text: str, profile: str = "claude") -> CompressedDocument:
    """Normalize and structure text into a CompressedDocument."""
    doc = Document.from_text(path, text)
    normalized, _ = normalize_text(text)
    paragraphs, _ = structure_text(normalized, path, get_profile(profile))
    return CompressedDocument(document=doc, paragraphs=tuple(paragraphs))


@pytest.fixture
def compressed_doc() -> Callable[..., CompressedDocument]:
    return make_compressed


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_TIME


@pytest.fixture
def docs_dir(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """Write {relative path: content} under tmp_path/docs and return the directory."""

    def _write(files: Dict[str, str]) -> Path:
        root = tmp_path / "docs"
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _write


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """The CLI installs a root handler bound to the runner's stream; undo it."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
