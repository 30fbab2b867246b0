# verdant/ingestion/__init__.py
"""Filesystem collaborators: document loading and output writing."""

from .source import DEFAULT_PATTERNS, MarkdownSource, load_documents, order_documents
from .writer import write_outputs

__all__ = [
    "DEFAULT_PATTERNS",
    "MarkdownSource",
    "load_documents",
    "order_documents",
    "write_outputs",
]
