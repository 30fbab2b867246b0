# verdant/pipeline/steps/__init__.py
"""
Pipeline steps, in execution order:

    normalize → structure → dedupe

The lexical ladder (verdant.compression.lexical) runs after dedupe.
"""

from .dedupe import DedupeStep, FingerprintAccumulator
from .normalize import NormalizedDocument, NormalizeStep, normalize_text
from .structure import StructureStep, structure_text

__all__ = [
    "DedupeStep",
    "FingerprintAccumulator",
    "NormalizedDocument",
    "NormalizeStep",
    "normalize_text",
    "StructureStep",
    "structure_text",
]
