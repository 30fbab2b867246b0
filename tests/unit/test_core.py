# tests/unit/test_core.py
"""Tests for core types: stats, notation, profiles, documents, tags."""

import pytest

from verdant.compression.profiles import available_profiles, get_profile
from verdant.core.document import Document, Paragraph, ParagraphKind
from verdant.core.notation import (
    format_heading,
    format_item,
    is_heading,
    parse_heading,
    split_marker,
)
from verdant.core.stats import CompressionStats, StatsCollector, estimate_tokens
from verdant.core.tags import MAX_TAGS, derive_tags
from verdant.exceptions import ConfigError, InputError, IntegrityWarning


class TestStats:
    def test_collector_freezes(self):
        collector = StatsCollector()
        collector.record_original("abcdefgh\nij")
        collector.record_compressed(4, 1)
        collector.record_emoji(2)
        collector.record_duplicates(1)
        collector.record_chunks(3)

        stats = collector.freeze()

        assert stats.original_chars == 11
        assert stats.original_lines == 2
        assert stats.compressed_chars == 4
        assert stats.original_tokens == 2
        assert stats.compressed_tokens == 1
        assert stats.tokens_saved == 1
        assert stats.emoji_removed == 2
        assert stats.paragraphs_removed == 1
        assert stats.chunks_created == 3

    def test_write_once(self):
        collector = StatsCollector()
        collector.freeze()

        with pytest.raises(RuntimeError):
            collector.record_emoji(1)

    def test_percentages(self):
        stats = CompressionStats(original_chars=200, compressed_chars=50, original_lines=10, compressed_lines=4)

        assert stats.compressed_percent == 25.0
        assert stats.char_reduction == 75.0
        assert stats.line_reduction == 60.0

    def test_empty_run_percentages(self):
        stats = CompressionStats()

        assert stats.compressed_percent == 0.0
        assert stats.char_reduction == 0.0
        assert stats.line_reduction == 0.0

    def test_estimate_tokens(self):
        assert estimate_tokens(0) == 0
        assert estimate_tokens(7) == 1
        assert estimate_tokens(8) == 2


class TestNotation:
    @pytest.mark.parametrize(
        "line,expected",
        [
            ("H2:Setup", ("H2:", "Setup")),
            ("SECTION_L1:Intro", ("SECTION_L1:", "Intro")),
            ("•1>nested", ("•1>", "nested")),
            ("№step", ("№", "step")),
            ("☐12>todo", ("☐12>", "todo")),
            ("plain text", ("", "plain text")),
            ("H7:not a heading", ("", "H7:not a heading")),
        ],
    )
    def test_split_marker(self, line, expected):
        assert split_marker(line) == expected

    def test_format_item_depth(self):
        assert format_item("•", 0, "a") == "•a"
        assert format_item("☑", 2, "b") == "☑2>b"

    def test_heading_round_trip(self):
        line = format_heading(3, "Deep", "SECTION_L")

        assert is_heading(line)
        assert parse_heading(line) == (3, "Deep")
        assert parse_heading("plain") is None


class TestProfiles:
    def test_available(self):
        assert available_profiles() == ["claude", "copilot", "gpt"]

    def test_lookup_case_insensitive(self):
        assert get_profile("GPT").heading_prefix == "SECTION_L"

    def test_copilot_preferences(self):
        copilot = get_profile("copilot")

        assert copilot.uppercase_code_tags
        assert copilot.code_first
        assert not copilot.context_markers
        assert copilot.target == "COPILOT"

    def test_unknown(self):
        with pytest.raises(ConfigError, match="Available"):
            get_profile("llama")


class TestDocument:
    def test_from_bytes(self):
        doc = Document.from_bytes("a.md", "héllo\nworld".encode("utf-8"))

        assert doc.raw_text == "héllo\nworld"
        assert doc.size == 12
        assert doc.line_count == 2

    def test_from_bytes_invalid(self):
        with pytest.raises(InputError, match="UTF-8") as exc_info:
            Document.from_bytes("bin.md", b"\xff\xfe")

        assert exc_info.value.path == "bin.md"

    def test_paragraph_properties(self):
        paragraph = Paragraph("a.md", 1, 3, "⟦\nx\n⟧", ParagraphKind.CODE)

        assert paragraph.is_code
        assert not paragraph.is_heading
        assert paragraph.line_count == 3
        assert paragraph.with_text("y").text == "y"
        assert paragraph.text == "⟦\nx\n⟧"


class TestTags:
    def test_sorted_and_capped(self):
        text = "react vue angular django flask docker redis"

        tags = derive_tags("x.md", text)

        assert len(tags) == MAX_TAGS
        assert list(tags) == sorted(tags)

    def test_path_counts(self):
        assert derive_tags("kubernetes/setup.md", "") == ("k8s",)


class TestIntegrityWarning:
    def test_equality_ignores_detail(self):
        a = IntegrityWarning("unclosed_fence", "a.md", 3, "```python")
        b = IntegrityWarning("unclosed_fence", "a.md", 3)

        assert a == b
        assert len({a, b}) == 1
        assert "a.md" in str(a)

    def test_is_user_warning(self):
        assert issubclass(IntegrityWarning, UserWarning)
