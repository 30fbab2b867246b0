"""
Non-fatal structural defects found in input documents.

An IntegrityWarning is never raised by the pipeline. The offending region is
passed through unmodified, the warning is recorded in CompressionStats and
logged, and processing continues.
"""

from __future__ import annotations

UNCLOSED_FENCE = "unclosed_fence"
MALFORMED_HEADING = "malformed_heading"


class IntegrityWarning(UserWarning):
    """A malformed region that was passed through unmodified."""

    def __init__(self, kind: str, source: str, line: int, detail: str = ""):
        self.kind = kind
        self.source = source
        self.line = line
        self.detail = detail
        message = f"{kind} in {source} at line {line}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntegrityWarning):
            return NotImplemented
        return (self.kind, self.source, self.line) == (other.kind, other.source, other.line)

    def __hash__(self) -> int:
        return hash((self.kind, self.source, self.line))
