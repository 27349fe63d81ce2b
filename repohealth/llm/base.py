"""Provider capability shared by every text-generation backend."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class GenerationError(RuntimeError):
    """Raised by an adapter when its provider cannot produce usable text."""


@runtime_checkable
class ProviderAdapter(Protocol):
    """Turns a prompt into generated text using one vendor's SDK."""

    name: str

    def generate(self, prompt: str, credential: str) -> str:
        ...


def require_text(value: object, provider: str) -> str:
    """Return ``value`` stripped, raising when the provider sent nothing usable."""
    if not isinstance(value, str):
        raise GenerationError(f"{provider} returned no text content")
    text = value.strip()
    if not text:
        raise GenerationError(f"{provider} returned an empty response")
    return text


__all__ = ["GenerationError", "ProviderAdapter", "require_text"]
