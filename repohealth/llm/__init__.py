"""Text-generation provider adapters."""

from __future__ import annotations

from typing import Dict, Tuple, Type

from .base import GenerationError, ProviderAdapter, require_text
from .claude import ClaudeAdapter
from .gemini import GeminiAdapter
from .openai_chat import OpenAIAdapter

PROVIDERS: Dict[str, Type] = {
    OpenAIAdapter.name: OpenAIAdapter,
    GeminiAdapter.name: GeminiAdapter,
    ClaudeAdapter.name: ClaudeAdapter,
}


def available_providers() -> Tuple[str, ...]:
    """Return the provider identifiers accepted at selection time."""
    return tuple(PROVIDERS)


def create_adapter(name: str, **options: object) -> ProviderAdapter:
    """Instantiate the adapter registered under ``name``."""
    try:
        adapter_cls = PROVIDERS[name.lower()]
    except KeyError as exc:
        raise ValueError(f"Unknown provider '{name}'") from exc
    return adapter_cls(**options)


__all__ = [
    "ClaudeAdapter",
    "GeminiAdapter",
    "GenerationError",
    "OpenAIAdapter",
    "PROVIDERS",
    "ProviderAdapter",
    "available_providers",
    "create_adapter",
    "require_text",
]
