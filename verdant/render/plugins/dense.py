# verdant/render/plugins/dense.py
"""
Dense format (.vrd): dictionary header plus one record per document.

    VRD1.0|TARGET:CLAUDE|MODE:EXTREME|CHUNKS:1/2|NEXT:compressed_chunk_2.vrd
    META:{files:2,tokens:412,compressed:38.5%,generated:2025-01-01T00:00:00Z}
    DICT:{FN=function,DB=database}
    ---
    F:api.md|D:2025-01-01T00:00:00Z|S:2048|L:80|T:api,python
    H:API;Usage
    C:Call FN with PARAM. ¶ Second paragraph
    X:[python]def f():⏎    pass
    |

Bodies are rendered for every chunk before any header, because META
reports the run-wide compressed size.

Separator characters inside a field are escaped with a backslash: `|` in
paths, `;` in headings, `¶` in prose, `⏎` in code lines and `]` in the
code language. A backslash is itself escaped when it precedes a
backslash, a separator, or the end of the item.
"""

from __future__ import annotations

import re
from datetime import timezone
from functools import lru_cache
from typing import List, Pattern

from verdant.core.chunk import Chunk, ChunkSection
from verdant.core.notation import fence_language, is_fence_close, is_fence_open, parse_heading
from verdant.core.stats import estimate_tokens
from verdant.logging.logger import get_logger
from verdant.logging.tags import RENDER
from verdant.render.base import TIMESTAMP_FORMAT, RenderContext, RenderedOutput

logger = get_logger(__name__)

VERSION = "VRD1.0"
AI_MODE = "AI_OPTIMIZED"
PARAGRAPH_SEPARATOR = " ¶ "
CODE_LINE_SEPARATOR = "⏎"
HEADING_SEPARATOR = ";"
FIELD_SEPARATOR = "|"


@lru_cache(maxsize=None)
def _escape_pattern(chars: str) -> Pattern[str]:
    cls = re.escape(chars)
    return re.compile(rf"\\(?=[\\{cls}]|$)|[{cls}]")


def escape(text: str, chars: str) -> str:
    """
    Backslash-escape `chars` in one field item.

    With `chars=";"` the heading `A; B` is written with a backslash
    before the semicolon.
    """
    return _escape_pattern(chars).sub(lambda m: "\\" + m.group(0), text)


def _code_line(lines: List[str]) -> str:
    if len(lines) >= 2 and is_fence_open(lines[0]) and is_fence_close(lines[-1]):
        language = escape(fence_language(lines[0]), "]")
        body = lines[1:-1]
    else:
        # unclosed fence passed through as-is
        language, body = "", lines
    return f"X:[{language}]" + CODE_LINE_SEPARATOR.join(
        escape(line, CODE_LINE_SEPARATOR) for line in body
    )


def render_record(section: ChunkSection, code_first: bool = False) -> List[str]:
    """Render one document's F/H/C/X lines and the closing bar."""
    doc = section.document
    tags = ",".join(doc.tags)
    date = doc.modified.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)
    path = escape(doc.path, FIELD_SEPARATOR)
    out = [f"F:{path}|D:{date}|S:{doc.size}|L:{doc.line_count}|T:{tags}"]

    headings: List[str] = []
    prose: List[str] = []
    code: List[str] = []
    for paragraph in section.paragraphs:
        if paragraph.is_heading:
            parsed = parse_heading(paragraph.text)
            headings.append(escape(parsed[1] if parsed else paragraph.text, HEADING_SEPARATOR))
        elif paragraph.is_code:
            code.append(_code_line(paragraph.lines))
        else:
            text = " ".join(line.strip() for line in paragraph.lines)
            prose.append(escape(text, PARAGRAPH_SEPARATOR.strip()))

    if headings:
        out.append("H:" + HEADING_SEPARATOR.join(headings))
    content = ["C:" + PARAGRAPH_SEPARATOR.join(prose)] if prose else []
    out.extend(code + content if code_first else content + code)
    out.append("|")
    return out


class DenseRenderer:
    plugin_name = "dense"
    extension = "vrd"
    section_lines = 2  # F: record and the closing bar

    def reserved_lines(self, context: RenderContext) -> int:
        return 4  # version line, META, DICT, ---

    def header(self, chunk: Chunk, context: RenderContext, body: List[str], percent: float) -> List[str]:
        mode = AI_MODE if context.ai_mode else context.level.value.upper()
        first = (
            f"{VERSION}|TARGET:{context.profile.target}|MODE:{mode}"
            f"|CHUNKS:{chunk.index}/{chunk.total_chunks}"
        )
        if chunk.next_pointer:
            first += f"|NEXT:{chunk.next_pointer}"

        tokens = estimate_tokens(len("\n".join(body)))
        meta = (
            f"META:{{files:{len(chunk.sections)},tokens:{tokens},"
            f"compressed:{percent:.1f}%,generated:{context.timestamp}}}"
        )

        searchable = "\n".join(line for line in body if line.startswith(("H:", "C:")))
        entries = context.ledger.entries_in(searchable)
        dictionary = "DICT:{" + ",".join(str(e) for e in entries) + "}"
        return [first, meta, dictionary, "---"]

    def render(
        self, chunks: List[Chunk], context: RenderContext, names: List[str]
    ) -> List[RenderedOutput]:
        bodies: List[List[str]] = []
        for chunk in chunks:
            body: List[str] = []
            for section in chunk.sections:
                body.extend(render_record(section, context.profile.code_first))
            bodies.append(body)

        compressed_chars = sum(len("\n".join(body)) for body in bodies)
        percent = (
            compressed_chars / context.original_chars * 100.0 if context.original_chars else 0.0
        )

        outputs = []
        for chunk, body, name in zip(chunks, bodies, names):
            lines = self.header(chunk, context, body, percent) + body
            outputs.append(
                RenderedOutput.from_text(name, "\n".join(lines) + "\n", content="\n".join(body))
            )

        logger.debug(f"{RENDER} dense: {len(outputs)} output(s), compressed={percent:.1f}%")
        return outputs


__all__ = ["VERSION", "escape", "render_record", "DenseRenderer"]
