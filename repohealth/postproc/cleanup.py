"""Cleanup applied to provider output before it is written to disk."""

from __future__ import annotations

import re

_WRAPPING_FENCE = re.compile(
    r"\A\s*```[\w.+-]*[ \t]*\n(?P<body>.*?)\n?```\s*\Z",
    re.DOTALL,
)


class ContentCleaner:
    """Strips a response-wide code fence and normalises line endings.

    The document body is otherwise written as the provider returned it, so
    Markdown hard breaks and heading spacing survive untouched.
    """

    def clean(self, content: str) -> str:
        normalized = content.replace("\r\n", "\n").replace("\r", "\n")
        unwrapped = self.unwrap_fence(normalized)
        if not unwrapped.strip():
            # A fence with nothing inside is kept verbatim rather than written as an empty file.
            unwrapped = normalized
        return unwrapped.strip("\n") + "\n"

    @staticmethod
    def unwrap_fence(content: str) -> str:
        """Return the body of a single code fence enclosing the whole content."""
        match = _WRAPPING_FENCE.match(content)
        if match is None:
            return content
        body = match.group("body")
        if "```" in body:
            return content
        return body


__all__ = ["ContentCleaner"]
