# verdant/cli/commands/compress.py
"""
Compress command: compress a directory of markdown documents.

Usage:
    verdant compress ./docs
    verdant compress ./docs -o out -l extreme -f dense --chunk --max-lines 400
    verdant compress ./docs --config verdant.yaml --stats
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from verdant.cli.ui import ui
from verdant.core.config import load_config
from verdant.exceptions.base import VerdantError
from verdant.ingestion.source import load_documents
from verdant.ingestion.writer import write_outputs
from verdant.logging.logger import configure_logging, get_logger
from verdant.logging.tags import CLI
from verdant.pipeline.pipeline import CompressionPipeline

logger = get_logger(__name__)


def command(
    input_path: Path,
    output: Path,
    overrides: Optional[Dict[str, Any]] = None,
    config_path: Optional[Path] = None,
    show_stats: bool = False,
    verbose: bool = False,
) -> None:
    """
    Run one compression.

    Args:
        input_path: Markdown file or directory
        output: Directory receiving the output files
        overrides: CompressionConfig fields set explicitly on the command line
        config_path: Optional YAML config; overrides win over its values
        show_stats: Print the statistics table
        verbose: Enable debug logging
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        config = load_config(config_path, overrides)
        documents = load_documents(input_path, chronological=config.chronological)
        result = CompressionPipeline(config).run(documents)
        written = write_outputs(result.outputs, output)
    except VerdantError as e:
        logger.debug(f"{CLI} compress failed", exc_info=True)
        ui.error(str(e))
        raise typer.Exit(code=1)

    ui.success(
        f"Compressed {len(documents)} document(s) into {len(written)} file(s) "
        f"({config.level.value}, {config.format.value}, {config.profile})"
    )
    for path in written:
        ui.info(f"  {path}")

    warnings = result.stats.warnings
    if warnings:
        ui.warning(f"{len(warnings)} integrity warning(s); malformed regions kept as-is")
        for w in warnings:
            ui.info(f"  {w}")

    if show_stats:
        ui.stats(result.stats)
