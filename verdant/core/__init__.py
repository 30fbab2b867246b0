"""
Core data model shared by every stage: documents, paragraphs, chunks,
configuration, statistics and the structural notation.
"""

from verdant.core.chunk import Chunk, ChunkSection
from verdant.core.config import (
    CompressionConfig,
    CompressionLevel,
    OutputFormat,
    build_config,
    load_config,
)
from verdant.core.document import CompressedDocument, Document, Paragraph, ParagraphKind
from verdant.core.stats import CompressionStats, StatsCollector

__all__ = [
    "Chunk",
    "ChunkSection",
    "CompressionConfig",
    "CompressionLevel",
    "OutputFormat",
    "build_config",
    "load_config",
    "CompressedDocument",
    "Document",
    "Paragraph",
    "ParagraphKind",
    "CompressionStats",
    "StatsCollector",
]
