# verdant/cli/cli.py
"""
verdant CLI - Main application.

Commands:
    verdant compress    Compress a directory of markdown documents
    verdant profiles    List model profiles

NOTE: Commands use lazy loading - the pipeline is only imported when a
command is invoked.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import typer
from click.core import ParameterSource

app = typer.Typer(
    name="verdant",
    help="verdant - compress markdown documentation for LLM context windows.",
    no_args_is_help=True,
    add_completion=False,
)

# CLI parameter name → CompressionConfig field
_CONFIG_FIELDS = {
    "level": "level",
    "fmt": "format",
    "model": "profile",
    "chunk": "chunking",
    "max_lines": "max_lines_per_chunk",
    "chronological": "chronological",
    "strip_emoji": "strip_emoji",
    "dedupe": "deduplicate",
    "prefix": "output_prefix",
    "ai_mode": "ai_mode",
}


def _explicit_overrides(ctx: typer.Context, values: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only the options the user actually passed on the command line."""
    return {
        _CONFIG_FIELDS[name]: value
        for name, value in values.items()
        if ctx.get_parameter_source(name) not in (None, ParameterSource.DEFAULT)
    }


# =============================================================================
# LAZY COMMANDS
# =============================================================================


@app.command("compress")
def compress(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., help="Markdown file or directory to compress."),
    output: Path = typer.Option(Path("."), "--output", "-o", help="Output directory."),
    level: str = typer.Option("medium", "--level", "-l", help="low, medium, high or extreme."),
    fmt: str = typer.Option("classic", "--format", "-f", help="classic (md) or dense (vrd)."),
    model: str = typer.Option("claude", "--model", "-m", help="Target profile: claude, gpt, copilot."),
    chunk: bool = typer.Option(False, "--chunk/--no-chunk", help="Split output into chunks."),
    max_lines: int = typer.Option(800, "--max-lines", help="Line budget per chunk."),
    chronological: bool = typer.Option(
        True, "--chronological/--no-chronological", help="Order files by modification time."
    ),
    strip_emoji: bool = typer.Option(True, "--strip-emoji/--keep-emoji", help="Remove emoji."),
    dedupe: bool = typer.Option(
        True, "--dedupe/--no-dedupe", help="Remove duplicate paragraphs (default: medium and up)."
    ),
    prefix: str = typer.Option("compressed", "--prefix", "-p", help="Output file name prefix."),
    ai_mode: bool = typer.Option(
        False, "--ai-mode", help="Apply every lexical rule and write the abbreviation dictionary."
    ),
    stats: bool = typer.Option(False, "--stats", "-s", help="Show compression statistics."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML configuration file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Compress markdown documents into classic or dense output."""
    from verdant.cli.commands import compress as mod

    overrides = _explicit_overrides(
        ctx,
        {
            "level": level,
            "fmt": fmt,
            "model": model,
            "chunk": chunk,
            "max_lines": max_lines,
            "chronological": chronological,
            "strip_emoji": strip_emoji,
            "dedupe": dedupe,
            "prefix": prefix,
            "ai_mode": ai_mode,
        },
    )
    mod.command(
        input_path=input_path,
        output=output,
        overrides=overrides,
        config_path=config,
        show_stats=stats,
        verbose=verbose,
    )


@app.command("profiles")
def profiles() -> None:
    """List model profiles."""
    from verdant.cli.commands import profiles as mod

    mod.command()


if __name__ == "__main__":
    app()
