# verdant/pipeline/pipeline.py
"""
CompressionPipeline - wires the compression stages together.

    normalize → structure → dedupe → lexical → chunk → render

The pipeline is a pure function of (documents, config, clock): it never
touches the filesystem and never reorders its input. Ordering documents
(chronologically or otherwise) is the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, List, Sequence, TypeVar

from verdant.chunking.engine import Chunker
from verdant.compression.lexical import AbbreviationLedger, LexicalCompressor
from verdant.compression.profiles import get_profile
from verdant.core.chunk import Chunk
from verdant.core.config import CompressionConfig
from verdant.core.document import CompressedDocument, Document
from verdant.core.stats import CompressionStats, StatsCollector
from verdant.exceptions.base import VerdantError
from verdant.exceptions.input import InputError
from verdant.exceptions.pipeline import PipelineStageError
from verdant.logging.logger import get_logger
from verdant.logging.tags import PIPELINE
from verdant.render.base import RenderContext, RenderedOutput
from verdant.render.registry import get_renderer

from .steps.dedupe import DedupeStep, FingerprintAccumulator
from .steps.normalize import NormalizeStep
from .steps.structure import StructureStep

logger = get_logger(__name__)

T = TypeVar("T")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CompressionResult:
    """Everything a run produces."""

    outputs: List[RenderedOutput]
    chunks: List[Chunk]
    documents: List[CompressedDocument]
    stats: CompressionStats
    ledger: AbbreviationLedger


@dataclass
class CompressionPipeline:
    """
    One configured compression run.

    `clock` supplies the timestamp written into dense headers; inject a
    fixed one for reproducible output.
    """

    config: CompressionConfig = field(default_factory=CompressionConfig)
    clock: Callable[[], datetime] = utc_now

    def _stage(self, name: str, fn: Callable[..., T], *args) -> T:
        try:
            return fn(*args)
        except VerdantError:
            raise
        except Exception as e:
            raise PipelineStageError(name, f"{type(e).__name__}: {e}") from e

    def run(self, documents: Sequence[Document]) -> CompressionResult:
        """
        Compress a pre-ordered document set.

        Raises:
            InputError: If the document set is empty
            PipelineStageError: If a stage fails unexpectedly
        """
        if not documents:
            raise InputError("No documents to compress")

        config = self.config
        profile = get_profile(config.profile)
        renderer = get_renderer(config.format)
        stats = StatsCollector()
        for doc in documents:
            stats.record_original(doc.raw_text)

        logger.info(
            f"{PIPELINE} Compressing {len(documents)} documents "
            f"(level={config.level.value}, format={config.format.value}, profile={profile.name})"
        )

        normalized = self._stage("normalize", NormalizeStep(config.strip_emoji), list(documents), stats)
        structured = self._stage("structure", StructureStep(profile), normalized, stats)

        if config.dedupe_enabled:
            deduped, removed = self._stage(
                "dedupe",
                DedupeStep(config.dedupe_min_chars),
                structured,
                FingerprintAccumulator(),
            )
            stats.record_duplicates(removed)
        else:
            deduped = structured
            logger.debug(f"{PIPELINE} dedupe skipped at level={config.level.value}")

        ledger = AbbreviationLedger()
        lexical = LexicalCompressor(
            config.lexical_level, ledger, charge_dictionary=config.writes_dictionary
        )
        compressed = self._stage("lexical", lexical, deduped)

        context = RenderContext(
            profile=profile,
            level=config.level,
            chunking=config.chunking,
            ledger=ledger,
            original_chars=stats.original_chars,
            ai_mode=config.ai_mode,
            generated_at=self.clock(),
        )
        chunker = Chunker(
            max_lines=config.max_lines_per_chunk,
            enabled=config.chunking,
            prefix=config.output_prefix,
            extension=config.extension,
            reserved_lines=renderer.reserved_lines(context),
            section_lines=renderer.section_lines,
        )
        chunks = self._stage("chunk", chunker, compressed)
        stats.record_chunks(len(chunks))

        names = [chunker.name_for(chunk.index) for chunk in chunks]
        outputs = self._stage("render", renderer.render, chunks, context, names)
        for output in outputs:
            stats.record_compressed(output.content_chars, output.content_lines)

        frozen = stats.freeze()
        logger.info(
            f"{PIPELINE} {frozen.original_chars} → {frozen.compressed_chars} chars "
            f"in {len(outputs)} output(s), {frozen.paragraphs_removed} duplicates removed"
        )
        return CompressionResult(
            outputs=outputs,
            chunks=chunks,
            documents=compressed,
            stats=frozen,
            ledger=ledger,
        )


def compress_documents(
    documents: Sequence[Document],
    config: CompressionConfig | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> CompressionResult:
    """Convenience wrapper: build a pipeline and run it once."""
    return CompressionPipeline(config or CompressionConfig(), clock).run(documents)


__all__ = ["CompressionResult", "CompressionPipeline", "compress_documents", "utc_now"]
