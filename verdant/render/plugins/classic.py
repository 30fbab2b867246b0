# verdant/render/plugins/classic.py
"""
Classic format: markdown-like, one block per source document.

    TARGET:CLAUDE
    NOTE:Structured data with technical notation
    CHUNK:1/3 | NEXT:compressed_chunk_2.md
    ---
    F:guide/setup.md
    H1:Setup
    •Install package
    |
    ---
    CHUNK_END | Lines:3 | Est.tokens:7

The NOTE line and the CHUNK_END footer are only written for profiles
that keep context markers; the CHUNK lines only when chunking. In AI mode
the header also carries `MODE:AI_OPTIMIZED` and a `DICT:{...}` line for
the codes used in the chunk.
"""

from __future__ import annotations

from typing import List

from verdant.core.chunk import Chunk
from verdant.logging.logger import get_logger
from verdant.logging.tags import RENDER
from verdant.render.base import RenderContext, RenderedOutput

logger = get_logger(__name__)

AI_MODE = "MODE:AI_OPTIMIZED"


class ClassicRenderer:
    plugin_name = "classic"
    extension = "md"
    section_lines = 2  # F:<path> and the closing bar

    def reserved_lines(self, context: RenderContext) -> int:
        profile = context.profile
        lines = 2  # TARGET and ---
        if context.ai_mode:
            lines += 2
        if profile.context_markers:
            lines += 1
        if context.chunking:
            lines += 1
            if profile.context_markers:
                lines += 2
        return lines

    def body(self, chunk: Chunk) -> List[str]:
        lines: List[str] = []
        for section in chunk.sections:
            lines.append(f"F:{section.path}")
            lines.extend(section.lines)
            lines.append("|")
        return lines

    def header(self, chunk: Chunk, context: RenderContext) -> List[str]:
        profile = context.profile
        lines: List[str] = [f"TARGET:{profile.target}"]
        if context.ai_mode:
            prose = "\n".join(
                p.text for section in chunk.sections for p in section.paragraphs if not p.is_code
            )
            entries = context.ledger.entries_in(prose)
            lines.append(AI_MODE)
            lines.append("DICT:{" + ",".join(str(e) for e in entries) + "}")
        if profile.context_markers:
            lines.append(f"NOTE:{profile.note}")
        if context.chunking:
            header = f"CHUNK:{chunk.index}/{chunk.total_chunks}"
            if chunk.next_pointer:
                header += f" | NEXT:{chunk.next_pointer}"
            lines.append(header)
        lines.append("---")
        return lines

    def footer(self, chunk: Chunk, context: RenderContext) -> List[str]:
        if not (context.chunking and context.profile.context_markers):
            return []
        return [
            "---",
            f"CHUNK_END | Lines:{chunk.line_count} | Est.tokens:{chunk.estimated_tokens}",
        ]

    def render_chunk(self, chunk: Chunk, context: RenderContext, name: str) -> RenderedOutput:
        body = self.body(chunk)
        lines = self.header(chunk, context) + body + self.footer(chunk, context)
        return RenderedOutput.from_text(name, "\n".join(lines) + "\n", content="\n".join(body))

    def render(
        self, chunks: List[Chunk], context: RenderContext, names: List[str]
    ) -> List[RenderedOutput]:
        outputs = [
            self.render_chunk(chunk, context, name) for chunk, name in zip(chunks, names)
        ]
        logger.debug(f"{RENDER} classic: {len(outputs)} output(s)")
        return outputs
