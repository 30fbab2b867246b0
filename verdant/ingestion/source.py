# verdant/ingestion/source.py
"""
Markdown document discovery.

Finds markdown files under a directory (or a single file), reads them as
UTF-8 and orders them. Chronological ordering lives here rather than in
the pipeline so the pipeline never depends on file timestamps.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple, Union

from verdant.core.document import Document
from verdant.exceptions.input import InputError
from verdant.logging.logger import get_logger
from verdant.logging.tags import INGEST

logger = get_logger(__name__)

DEFAULT_PATTERNS: Tuple[str, ...] = ("*.md", "*.markdown")


def order_documents(documents: Iterable[Document], chronological: bool = True) -> List[Document]:
    """
    Order documents oldest first (ties broken by path), or by path only.

    Examples:
        >>> docs = [Document("b.md", ""), Document("a.md", "")]
        >>> [d.path for d in order_documents(docs)]
        ['a.md', 'b.md']
    """
    if chronological:
        return sorted(documents, key=lambda d: (d.modified, d.path))
    return sorted(documents, key=lambda d: d.path)


@dataclass
class MarkdownSource:
    """
    Load markdown documents from the local filesystem.

    Example:
        source = MarkdownSource()
        documents = source.load("./docs")
    """

    patterns: Sequence[str] = field(default_factory=lambda: DEFAULT_PATTERNS)
    recursive: bool = True
    chronological: bool = True

    def discover(self, root: Union[str, Path]) -> List[Path]:
        """Return every matching file under root (root itself if it is a file)."""
        root_path = Path(root)

        if not root_path.exists():
            raise InputError("Input path does not exist", path=str(root_path))

        if root_path.is_file():
            return [root_path]

        glob = root_path.rglob if self.recursive else root_path.glob
        found = {p for pattern in self.patterns for p in glob(pattern) if p.is_file()}
        return sorted(found)

    def _read(self, path: Path, root: Path) -> Document:
        display = path.name if root.is_file() else path.relative_to(root).as_posix()
        try:
            data = path.read_bytes()
            stat = path.stat()
        except OSError as e:
            raise InputError(f"Cannot read document: {e.strerror}", path=display) from e
        modified = datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc)
        return Document.from_bytes(display, data, modified)

    def load(self, root: Union[str, Path]) -> List[Document]:
        """
        Read and order all documents under root.

        Raises:
            InputError: If the path is missing, holds no markdown files, or a
                file cannot be decoded
        """
        root_path = Path(root)
        paths = self.discover(root_path)
        if not paths:
            raise InputError("No markdown files found", path=str(root_path))

        documents = [self._read(p, root_path) for p in paths]
        ordered = order_documents(documents, self.chronological)
        logger.info(f"{INGEST} Loaded {len(ordered)} documents from {root_path}")
        return ordered


def load_documents(root: Union[str, Path], chronological: bool = True) -> List[Document]:
    return MarkdownSource(chronological=chronological).load(root)


__all__ = ["DEFAULT_PATTERNS", "MarkdownSource", "order_documents", "load_documents"]
