# verdant/cli/ui.py
"""
Shared rich output helpers for CLI commands.

Usage:
    from verdant.cli.ui import ui

    ui.header("verdant compress")
    ui.success("Done!")
    ui.stats(result.stats)
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from verdant.compression.profiles import ModelProfile
from verdant.core.stats import CompressionStats

console = Console()


class UI:
    """Consistent styling for command output."""

    def header(self, title: str, subtitle: str = "") -> None:
        content = f"[bold]{title}[/bold]"
        if subtitle:
            content += f"\n[dim]{subtitle}[/dim]"
        console.print(Panel.fit(content, border_style="green"))

    def info(self, msg: str) -> None:
        console.print(f"[dim]{msg}[/dim]")

    def success(self, msg: str) -> None:
        console.print(f"[green]✓[/green] {msg}")

    def warning(self, msg: str) -> None:
        console.print(f"[yellow]⚠[/yellow] {msg}")

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {msg}", soft_wrap=True)

    def stats(self, stats: CompressionStats) -> None:
        """Print the before/after summary of a run."""
        table = Table(title="Compression statistics", show_header=True, header_style="bold")
        table.add_column("Metric")
        table.add_column("Original", justify="right")
        table.add_column("Compressed", justify="right")
        table.add_column("Reduction", justify="right")

        table.add_row(
            "Characters",
            f"{stats.original_chars:,}",
            f"{stats.compressed_chars:,}",
            f"{stats.char_reduction:.1f}%",
        )
        table.add_row(
            "Lines",
            f"{stats.original_lines:,}",
            f"{stats.compressed_lines:,}",
            f"{stats.line_reduction:.1f}%",
        )
        table.add_row(
            "Est. tokens",
            f"{stats.original_tokens:,}",
            f"{stats.compressed_tokens:,}",
            f"{stats.tokens_saved:,} saved",
        )
        console.print(table)

        console.print(f"Duplicates removed: {stats.paragraphs_removed}")
        if stats.emoji_removed:
            console.print(f"Emoji removed: {stats.emoji_removed}")
        console.print(f"Chunks created: {stats.chunks_created}")

    def profiles(self, profiles: Iterable[ModelProfile]) -> None:
        table = Table(title="Model profiles", show_header=True, header_style="bold")
        table.add_column("Name")
        table.add_column("Headings")
        table.add_column("Code tags")
        table.add_column("Context markers")
        table.add_column("Note")
        for p in profiles:
            table.add_row(
                p.name,
                f"{p.heading_prefix}1:",
                "UPPER" if p.uppercase_code_tags else "as written",
                "yes" if p.context_markers else "no",
                p.note,
            )
        console.print(table)


ui = UI()

__all__ = ["console", "ui", "UI"]
