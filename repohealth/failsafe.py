"""Fail-safe content used when a document cannot be generated."""

from __future__ import annotations

FALLBACK_CONTENT = "Content could not be generated. Please check the AI settings and try again."


def is_fallback(content: str) -> bool:
    """Return True when ``content`` is the placeholder written for a failed document."""
    return content.strip() == FALLBACK_CONTENT


__all__ = ["FALLBACK_CONTENT", "is_fallback"]
