# verdant/chunking/__init__.py
from .engine import AtomicUnit, Chunker, atomic_units, chunk_filename, single_filename

__all__ = ["AtomicUnit", "Chunker", "atomic_units", "chunk_filename", "single_filename"]
