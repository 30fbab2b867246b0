"""
Unexpected failures inside a pipeline stage.
"""

from __future__ import annotations

from verdant.exceptions.base import VerdantError


class PipelineStageError(VerdantError):
    """A stage failed on well-formed input; wraps the original exception."""

    def __init__(self, stage: str, message: str):
        self.stage = stage
        super().__init__(f"[{stage}] {message}")
