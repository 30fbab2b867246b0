# tests/unit/test_ingestion.py
"""Tests for markdown discovery, ordering and output writing."""

import os
from datetime import datetime, timezone

import pytest

from verdant.core.document import Document
from verdant.exceptions import InputError, VerdantError
from verdant.ingestion.source import MarkdownSource, load_documents, order_documents
from verdant.ingestion.writer import write_outputs
from verdant.render.base import RenderedOutput


def set_mtime(path, seconds):
    os.utime(path, (seconds, seconds))


class TestLoadDocuments:
    def test_chronological_order(self, docs_dir):
        root = docs_dir({"a.md": "A", "b.md": "B", "c.md": "C"})
        set_mtime(root / "a.md", 3_000)
        set_mtime(root / "b.md", 1_000)
        set_mtime(root / "c.md", 2_000)

        docs = load_documents(root)

        assert [d.path for d in docs] == ["b.md", "c.md", "a.md"]
        assert docs[0].modified == datetime.fromtimestamp(1_000, tz=timezone.utc)

    def test_ties_broken_by_path(self, docs_dir):
        root = docs_dir({"z.md": "Z", "m.md": "M"})
        set_mtime(root / "z.md", 5_000)
        set_mtime(root / "m.md", 5_000)

        assert [d.path for d in load_documents(root)] == ["m.md", "z.md"]

    def test_path_order_when_not_chronological(self, docs_dir):
        root = docs_dir({"b.md": "B", "a.md": "A"})
        set_mtime(root / "a.md", 9_000)
        set_mtime(root / "b.md", 1_000)

        docs = load_documents(root, chronological=False)

        assert [d.path for d in docs] == ["a.md", "b.md"]

    def test_recursive_with_relative_paths(self, docs_dir):
        root = docs_dir({"top.md": "t", "sub/deep/inner.md": "i", "notes.txt": "skip"})

        paths = sorted(d.path for d in load_documents(root))

        assert paths == ["sub/deep/inner.md", "top.md"]

    def test_single_file(self, docs_dir):
        root = docs_dir({"only.md": "# Only"})

        docs = load_documents(root / "only.md")

        assert [(d.path, d.raw_text) for d in docs] == [("only.md", "# Only")]

    def test_non_recursive(self, docs_dir):
        root = docs_dir({"top.md": "t", "sub/inner.md": "i"})

        docs = MarkdownSource(recursive=False).load(root)

        assert [d.path for d in docs] == ["top.md"]

    def test_utf8_bom_stripped(self, docs_dir, tmp_path):
        root = docs_dir({})
        root.mkdir(parents=True, exist_ok=True)
        (root / "bom.md").write_bytes("\ufeff# Title".encode("utf-8"))

        assert load_documents(root)[0].raw_text == "# Title"

    def test_tags_derived(self, docs_dir):
        root = docs_dir({"python/guide.md": "Deploy with docker"})

        assert load_documents(root)[0].tags == ("docker", "python")


class TestLoadErrors:
    def test_empty_directory(self, tmp_path):
        with pytest.raises(InputError, match="No markdown files found"):
            load_documents(tmp_path)

    def test_missing_path(self, tmp_path):
        with pytest.raises(InputError, match="does not exist"):
            load_documents(tmp_path / "missing")

    def test_undecodable_file(self, docs_dir):
        root = docs_dir({})
        root.mkdir(parents=True, exist_ok=True)
        (root / "bad.md").write_bytes(b"\xff\xfe\x00bad")

        with pytest.raises(InputError) as exc_info:
            load_documents(root)

        assert exc_info.value.path == "bad.md"


class TestOrderDocuments:
    def test_pure_ordering(self):
        early = datetime(2020, 1, 1, tzinfo=timezone.utc)
        late = datetime(2024, 1, 1, tzinfo=timezone.utc)
        docs = [Document("b.md", "", late), Document("a.md", "", late), Document("c.md", "", early)]

        assert [d.path for d in order_documents(docs)] == ["c.md", "a.md", "b.md"]
        assert [d.path for d in order_documents(docs, chronological=False)] == ["a.md", "b.md", "c.md"]


class TestWriteOutputs:
    def test_writes_files(self, tmp_path):
        outputs = [
            RenderedOutput.from_text("out_chunk_1.md", "one\n"),
            RenderedOutput.from_text("out_chunk_2.md", "two •\n"),
        ]

        written = write_outputs(outputs, tmp_path / "out")

        assert [p.name for p in written] == ["out_chunk_1.md", "out_chunk_2.md"]
        assert (tmp_path / "out" / "out_chunk_2.md").read_text(encoding="utf-8") == "two •\n"

    def test_unwritable_target(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")

        with pytest.raises(VerdantError, match="Cannot write output"):
            write_outputs([RenderedOutput.from_text("a.md", "a")], blocker)
