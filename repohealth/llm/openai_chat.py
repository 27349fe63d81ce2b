"""Adapter for OpenAI chat completions."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from openai import OpenAI, OpenAIError

from .base import GenerationError, require_text


class OpenAIAdapter:
    """Generates documents through the OpenAI chat completions API."""

    name = "openai"
    DEFAULT_MODEL = "gpt-4o-mini"
    SYSTEM_PROMPT = "You are a helpful assistant."

    def __init__(
        self,
        model: str | None = None,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        client_factory: Callable[[str], Any] | None = None,
    ) -> None:
        self.model = model or self.DEFAULT_MODEL
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._client_factory = client_factory or self._default_client

    def generate(self, prompt: str, credential: str) -> str:
        client = self._client_factory(credential)
        payload: Dict[str, object] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": self.SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
        }
        if self.temperature is not None:
            payload["temperature"] = self.temperature
        if self.max_tokens is not None:
            payload["max_tokens"] = self.max_tokens

        try:
            completion = client.chat.completions.create(**payload)
        except OpenAIError as exc:
            raise GenerationError(f"OpenAI completion failed: {exc}") from exc
        return require_text(self._extract_content(completion), "OpenAI")

    @staticmethod
    def _default_client(credential: str) -> OpenAI:
        return OpenAI(api_key=credential)

    @staticmethod
    def _extract_content(completion: Any) -> Optional[str]:
        choices = getattr(completion, "choices", None)
        if not choices:
            return None
        message = getattr(choices[0], "message", None)
        return getattr(message, "content", None)


__all__ = ["OpenAIAdapter"]
