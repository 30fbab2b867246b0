# tests/unit/test_structure.py
"""Tests for the markdown → notation rewrite and paragraph segmentation."""

import pytest

from verdant.compression.profiles import get_profile
from verdant.core.document import Document, ParagraphKind
from verdant.core.stats import StatsCollector
from verdant.exceptions.integrity import MALFORMED_HEADING, UNCLOSED_FENCE
from verdant.pipeline.steps.normalize import NormalizedDocument
from verdant.pipeline.steps.structure import StructureStep, structure_text

CLAUDE = get_profile("claude")


def texts(source, profile=CLAUDE):
    paragraphs, _ = structure_text(source, "doc.md", profile)
    return [p.text for p in paragraphs]


class TestHeadings:
    def test_heading_levels(self):
        assert texts("# Title\n\n## Sub Section ##") == ["H1:Title", "H2:Sub Section"]

    def test_gpt_uses_section_prefix(self):
        assert texts("### Deep", get_profile("gpt")) == ["SECTION_L3:Deep"]

    def test_heading_is_its_own_paragraph(self):
        paragraphs, _ = structure_text("# A\ntext line", "doc.md", CLAUDE)

        assert [p.text for p in paragraphs] == ["H1:A", "text line"]
        assert [p.kind for p in paragraphs] == [ParagraphKind.HEADING, ParagraphKind.TEXT]

    def test_heading_with_hash_in_text(self):
        assert texts("## C# notes") == ["H2:C# notes"]

    @pytest.mark.parametrize("line", ["#hashtag here", "####### seven", "#"])
    def test_malformed_heading_passes_through(self, line):
        paragraphs, warnings = structure_text(f"intro\n{line}", "doc.md", CLAUDE)

        assert paragraphs[0].text == f"intro\n{line}"
        assert len(warnings) == 1
        assert warnings[0].kind == MALFORMED_HEADING
        assert warnings[0].line == 2
        assert warnings[0].source == "doc.md"


class TestLists:
    def test_bullets_with_depth(self):
        source = "- one\n- two\n  - nested\n    - deeper\n- back"

        assert texts(source) == ["•one\n•two\n•1>nested\n•2>deeper\n•back"]

    def test_star_and_plus_bullets(self):
        assert texts("* star\n+ plus") == ["•star\n•plus"]

    def test_numbered(self):
        assert texts("1. first\n2) second") == ["№first\n№second"]

    def test_nested_numbered_under_bullet(self):
        assert texts("- parent\n   1. child") == ["•parent\n№1>child"]

    def test_checkboxes(self):
        source = "- [ ] todo\n- [x] done\n  - [X] sub"

        assert texts(source) == ["☐todo\n☑done\n☑1>sub"]

    def test_depth_resets_after_plain_line(self):
        source = "- a\n  - b\n\nplain\n\n  - c"

        assert texts(source) == ["•a\n•1>b", "plain", "•c"]

    def test_horizontal_rule_is_not_a_bullet(self):
        assert texts("---") == ["---"]


class TestFences:
    def test_fence_rewritten(self):
        paragraphs, _ = structure_text("```python\ndef f():\n    return 1\n```", "doc.md", CLAUDE)

        assert paragraphs[0].text == "⟦python\ndef f():\n    return 1\n⟧"
        assert paragraphs[0].kind == ParagraphKind.CODE

    def test_copilot_uppercases_language(self):
        assert texts("```python\nx\n```", get_profile("copilot")) == ["⟦PYTHON\nx\n⟧"]

    def test_fence_with_blank_lines_is_one_paragraph(self):
        assert texts("```\na\n\nb\n```") == ["⟦\na\n\nb\n⟧"]

    def test_fence_splits_surrounding_text(self):
        paragraphs, _ = structure_text("intro\n```\ncode\n```\noutro", "doc.md", CLAUDE)

        assert [p.kind for p in paragraphs] == [
            ParagraphKind.TEXT,
            ParagraphKind.CODE,
            ParagraphKind.TEXT,
        ]

    def test_markdown_inside_fence_untouched(self):
        assert texts("```md\n# not a heading\n- not a bullet\n```") == [
            "⟦md\n# not a heading\n- not a bullet\n⟧"
        ]

    def test_unclosed_fence_passes_through(self):
        paragraphs, warnings = structure_text("text\n\n```js\nlet x", "doc.md", CLAUDE)

        assert [p.text for p in paragraphs] == ["text", "```js\nlet x"]
        assert paragraphs[1].kind == ParagraphKind.CODE
        assert [(w.kind, w.line) for w in warnings] == [(UNCLOSED_FENCE, 3)]

    def test_fence_nested_in_list_item(self):
        source = "- Step one:\n\n    ```python\n    x = the   function(a, b)\n    ```"

        paragraphs, warnings = structure_text(source, "doc.md", CLAUDE)

        assert [p.text for p in paragraphs] == [
            "•Step one:",
            "⟦python\n    x = the   function(a, b)\n⟧",
        ]
        assert paragraphs[1].kind == ParagraphKind.CODE
        assert warnings == []


class TestSegmentation:
    def test_line_numbers(self):
        paragraphs, _ = structure_text("# A\n\npara one\npara two\n\n# B", "doc.md", CLAUDE)

        assert [(p.line_start, p.line_end) for p in paragraphs] == [(1, 1), (3, 4), (6, 6)]

    def test_empty_text(self):
        assert structure_text("", "doc.md", CLAUDE) == ([], [])


class TestStructureStep:
    def test_records_warnings(self):
        stats = StatsCollector()
        doc = Document.from_text("bad.md", "#oops\n```\nnever closed")
        normalized = [NormalizedDocument(document=doc, text=doc.raw_text)]

        result = StructureStep(CLAUDE)(normalized, stats)

        assert result[0].document is doc
        assert {w.kind for w in stats.warnings} == {MALFORMED_HEADING, UNCLOSED_FENCE}
