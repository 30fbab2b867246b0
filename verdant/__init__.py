"""
verdant - markdown compression for LLM context windows.

verdant turns a directory of markdown documents into a denser,
semantically equivalent text sized for a model's context window:
duplicate paragraphs are removed across files, prose is progressively
compressed, and the result is split into navigable chunks in a classic
(markdown-like) or dense (dictionary/marker) format.

Quick Start:
    >>> import verdant
    >>> result = verdant.compress("./docs", level="high", format="dense")
    >>> print(result.outputs[0].text)

Public API:
    Types:
        - Document, Paragraph, CompressedDocument
        - Chunk, CompressionStats
        - CompressionConfig, CompressionLevel, OutputFormat

    Runtime:
        - compress: load, compress and return (no files written)
        - CompressionPipeline: the configured stage pipeline
        - load_documents: filesystem discovery with chronological ordering

Architecture:
    verdant/
    ├── core/          # data model, config, notation, stats
    ├── pipeline/      # normalize → structure → dedupe steps + pipeline
    ├── compression/   # lexical rule ladder, model profiles
    ├── chunking/      # greedy line-budget chunker
    ├── render/        # classic and dense renderer plugins
    ├── ingestion/     # markdown discovery and output writing
    └── cli/           # typer CLI
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

__version__ = "0.2.0"

from verdant.core import (
    Chunk,
    CompressedDocument,
    CompressionConfig,
    CompressionLevel,
    CompressionStats,
    Document,
    OutputFormat,
    Paragraph,
    load_config,
)
from verdant.exceptions import (
    ConfigError,
    InputError,
    IntegrityWarning,
    PipelineStageError,
    VerdantError,
)
from verdant.ingestion import load_documents, write_outputs
from verdant.pipeline import CompressionPipeline, CompressionResult


def compress(
    source: Union[str, Path],
    config_path: Optional[Union[str, Path]] = None,
    **overrides: Any,
) -> CompressionResult:
    """
    Compress every markdown file under `source`.

    Module-level convenience matching `verdant compress`, minus writing.
    Keyword arguments are CompressionConfig fields.

    Raises:
        InputError: If no documents can be loaded
        ConfigError: If the configuration is invalid
    """
    config = load_config(config_path, overrides)
    documents = load_documents(source, chronological=config.chronological)
    return CompressionPipeline(config).run(documents)


__all__ = [
    "__version__",
    "compress",
    "Chunk",
    "CompressedDocument",
    "CompressionConfig",
    "CompressionLevel",
    "CompressionStats",
    "Document",
    "OutputFormat",
    "Paragraph",
    "load_config",
    "ConfigError",
    "InputError",
    "IntegrityWarning",
    "PipelineStageError",
    "VerdantError",
    "load_documents",
    "write_outputs",
    "CompressionPipeline",
    "CompressionResult",
]
