"""Post-processing for generated documents."""

from .cleanup import ContentCleaner

__all__ = ["ContentCleaner"]
