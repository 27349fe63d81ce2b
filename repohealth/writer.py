"""Materialises generated documents on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from .logging import get_logger
from .models import WriteOutcome

_logger = get_logger("writer")


def ensure_directories(directories: Iterable[Path]) -> None:
    """Create each directory (and parents) when absent; existing ones are left alone."""
    for directory in directories:
        Path(directory).mkdir(parents=True, exist_ok=True)


class DocumentWriter:
    """Writes each document independently and reports per-file outcomes."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self.logger = _logger

    def write_all(self, documents: Sequence[Tuple[Path, str]]) -> List[WriteOutcome]:
        return [self.write(path, content) for path, content in documents]

    def write(self, path: Path, content: str) -> WriteOutcome:
        try:
            path.write_text(content, encoding=self.encoding)
        except OSError as exc:
            self.logger.error("Failed to create file: %s. Error: %s", path, exc)
            return WriteOutcome(path=path, success=False, error=str(exc))
        self.logger.info("%s created successfully.", path)
        return WriteOutcome(path=path, success=True)


__all__ = ["DocumentWriter", "ensure_directories"]
