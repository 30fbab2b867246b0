# verdant/render/base.py
"""
Renderer contract.

A renderer turns the run's chunks into output units. Both formats share
one input model: the Chunk list plus a RenderContext holding everything
else a header may need (profile, level, abbreviation ledger, run-wide
sizes, timestamp).

Each output separates its header and footer from its content, the
per-document records. Compressed-size statistics measure content only,
so a header that names the level cannot make a higher level look larger.

Renderers also describe their layout to the Chunker: `reserved_lines`
header and footer lines per output, and `section_lines` wrapper lines per
document block.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Protocol, runtime_checkable

from verdant.compression.lexical import AbbreviationLedger
from verdant.compression.profiles import ModelProfile
from verdant.core.chunk import Chunk
from verdant.core.config import CompressionLevel
from verdant.core.stats import estimate_tokens

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


@dataclass(frozen=True)
class RenderContext:
    """Run-wide inputs shared by every chunk of one render."""

    profile: ModelProfile
    level: CompressionLevel
    chunking: bool = False
    ledger: AbbreviationLedger = field(default_factory=AbbreviationLedger)
    original_chars: int = 0
    ai_mode: bool = False
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def timestamp(self) -> str:
        return self.generated_at.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class RenderedOutput:
    """One output unit, ready to be written."""

    name: str
    text: str
    byte_size: int
    line_count: int
    estimated_tokens: int
    content_chars: int = 0
    content_lines: int = 0

    @classmethod
    def from_text(cls, name: str, text: str, content: Optional[str] = None) -> "RenderedOutput":
        """
        Build an output from its full text.

        `content` is the part of `text` holding document records; it
        defaults to the whole text.
        """
        if content is None:
            content = text
        return cls(
            name=name,
            text=text,
            byte_size=len(text.encode("utf-8")),
            line_count=len(text.splitlines()),
            estimated_tokens=estimate_tokens(len(text)),
            content_chars=len(content),
            content_lines=len(content.splitlines()),
        )


@runtime_checkable
class Renderer(Protocol):
    """Protocol implemented by renderer plugins."""

    plugin_name: str
    extension: str
    section_lines: int

    def reserved_lines(self, context: RenderContext) -> int: ...

    def render(
        self, chunks: List[Chunk], context: RenderContext, names: List[str]
    ) -> List[RenderedOutput]: ...


__all__ = ["TIMESTAMP_FORMAT", "RenderContext", "RenderedOutput", "Renderer"]
