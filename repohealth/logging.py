"""Logging utilities for repohealth runs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, MutableMapping, Tuple

_LOGGER_NAME = "repohealth"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the repohealth hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


class DocumentLogAdapter(logging.LoggerAdapter):
    """Tags every record with the document it concerns.

    Fourteen documents are generated at once, so their log lines interleave;
    the ``[label]`` prefix keeps each line attributable.
    """

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        document = self.extra["document"]
        extra = dict(kwargs.get("extra") or {})
        extra.setdefault("document", document)
        kwargs["extra"] = extra
        return f"[{document}] {msg}", kwargs


def document_logger(logger: logging.Logger, document: str) -> DocumentLogAdapter:
    """Return ``logger`` wrapped so each message names ``document``."""
    return DocumentLogAdapter(logger, {"document": document})


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the repohealth logger with console output and optional file sink.

    Verbose runs also show the emitting component (``dispatcher``, ``writer``...).
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Handlers are reset so repeated CLI invocations in one process do not duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console_format = (
        "[repohealth] %(levelname)s %(name)s: %(message)s"
        if verbose
        else "[repohealth] %(levelname)s %(message)s"
    )
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter(console_format))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s [%(threadName)s]: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["DocumentLogAdapter", "configure_logging", "document_logger", "get_logger"]
