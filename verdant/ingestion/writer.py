# verdant/ingestion/writer.py
"""Write rendered output units to disk."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

from verdant.exceptions.base import VerdantError
from verdant.logging.logger import get_logger
from verdant.logging.tags import INGEST
from verdant.render.base import RenderedOutput

logger = get_logger(__name__)


def write_outputs(outputs: Iterable[RenderedOutput], directory: Union[str, Path]) -> List[Path]:
    """
    Write each output as `<directory>/<output.name>` (UTF-8).

    Raises:
        VerdantError: If the directory or a file cannot be written
    """
    target = Path(directory)
    written: List[Path] = []
    try:
        target.mkdir(parents=True, exist_ok=True)
        for output in outputs:
            path = target / output.name
            path.write_text(output.text, encoding="utf-8")
            written.append(path)
            logger.debug(f"{INGEST} wrote {path} ({output.byte_size} bytes)")
    except OSError as e:
        raise VerdantError(f"Cannot write output to {target}: {e.strerror or e}") from e
    return written


__all__ = ["write_outputs"]
