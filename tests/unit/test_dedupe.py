# tests/unit/test_dedupe.py
"""Tests for cross-document paragraph deduplication."""

from verdant.pipeline.steps.dedupe import DedupeStep, FingerprintAccumulator


def all_texts(docs):
    return [[p.text for p in d.paragraphs] for d in docs]


class TestDedupeStep:
    """First occurrence wins, in input order."""

    def test_duplicate_across_documents(self, compressed_doc):
        a = compressed_doc("a.md", "This is a test paragraph.")
        b = compressed_doc("b.md", "This is a test paragraph.")

        docs, removed = DedupeStep()([a, b])

        assert removed == 1
        assert all_texts(docs) == [["This is a test paragraph."], []]

    def test_duplicates_equal_after_normalization(self, compressed_doc):
        a = compressed_doc("a.md", "Same   words here.   ")
        b = compressed_doc("b.md", "Same words here.")

        _, removed = DedupeStep()([a, b])

        assert removed == 1

    def test_duplicate_within_document(self, compressed_doc):
        doc = compressed_doc("a.md", "Repeat me.\n\nOther.\n\nRepeat me.")

        docs, removed = DedupeStep()([doc])

        assert removed == 1
        assert all_texts(docs) == [["Repeat me.", "Other."]]

    def test_order_decides_survivor(self, compressed_doc):
        a = compressed_doc("a.md", "Shared.\n\nOnly in a.")
        b = compressed_doc("b.md", "Only in b.\n\nShared.")

        docs, _ = DedupeStep()([b, a])

        assert all_texts(docs) == [["Only in b.", "Shared."], ["Only in a."]]

    def test_code_paragraphs_exempt(self, compressed_doc):
        fence = "```\nprint(1)\n```"
        a = compressed_doc("a.md", fence)
        b = compressed_doc("b.md", fence)

        docs, removed = DedupeStep()([a, b])

        assert removed == 0
        assert all_texts(docs) == [["⟦\nprint(1)\n⟧"], ["⟦\nprint(1)\n⟧"]]

    def test_headings_deduplicated(self, compressed_doc):
        a = compressed_doc("a.md", "# Setup\n\nfirst")
        b = compressed_doc("b.md", "# Setup\n\nsecond")

        docs, removed = DedupeStep()([a, b])

        assert removed == 1
        assert all_texts(docs) == [["H1:Setup", "first"], ["second"]]

    def test_min_chars_exempts_short_paragraphs(self, compressed_doc):
        a = compressed_doc("a.md", "short")
        b = compressed_doc("b.md", "short")

        _, removed = DedupeStep(min_chars=10)([a, b])

        assert removed == 0

    def test_idempotent(self, compressed_doc):
        docs = [
            compressed_doc("a.md", "One.\n\nTwo.\n\nOne."),
            compressed_doc("b.md", "Two.\n\nThree."),
        ]

        once, first = DedupeStep()(docs)
        twice, second = DedupeStep()(once)

        assert first == 2
        assert second == 0
        assert all_texts(twice) == all_texts(once)

    def test_input_documents_unchanged(self, compressed_doc):
        a = compressed_doc("a.md", "x")
        b = compressed_doc("b.md", "x")

        DedupeStep()([a, b])

        assert [p.text for p in b.paragraphs] == ["x"]


class TestFingerprintAccumulator:
    """The accumulator is explicit and its equality is swappable."""

    def test_custom_key(self, compressed_doc):
        a = compressed_doc("a.md", "Hello")
        b = compressed_doc("b.md", "hello")
        acc = FingerprintAccumulator(key=lambda p: p.text.lower())

        _, removed = DedupeStep()([a, b], acc)

        assert removed == 1
        assert len(acc) == 1

    def test_default_key_is_case_sensitive(self, compressed_doc):
        a = compressed_doc("a.md", "Hello")
        b = compressed_doc("b.md", "hello")

        _, removed = DedupeStep()([a, b])

        assert removed == 0

    def test_shared_accumulator_across_calls(self, compressed_doc):
        acc = FingerprintAccumulator()
        DedupeStep()([compressed_doc("a.md", "seen")], acc)

        docs, removed = DedupeStep()([compressed_doc("b.md", "seen")], acc)

        assert removed == 1
        assert all_texts(docs) == [[]]

    def test_fingerprints_match_for_equal_text(self, compressed_doc):
        a = compressed_doc("a.md", "Same text.")
        b = compressed_doc("b.md", "Same text.")

        assert a.paragraphs[0].fingerprint == b.paragraphs[0].fingerprint
        assert a.paragraphs[0].fingerprint.startswith("sha256:")
