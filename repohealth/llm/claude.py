"""Adapter for Anthropic Claude messages."""

from __future__ import annotations

from typing import Any, Callable, Optional

from anthropic import Anthropic, AnthropicError

from .base import GenerationError, require_text


class ClaudeAdapter:
    """Generates documents through the Anthropic messages API."""

    name = "claude"
    DEFAULT_MODEL = "claude-3-5-sonnet-20240620"
    DEFAULT_MAX_TOKENS = 1000
    SYSTEM_PROMPT = "You are a helpful assistant. Provide detailed and accurate responses."

    def __init__(
        self,
        model: str | None = None,
        *,
        temperature: Optional[float] = 0.0,
        max_tokens: Optional[int] = None,
        client_factory: Callable[[str], Any] | None = None,
    ) -> None:
        self.model = model or self.DEFAULT_MODEL
        self.temperature = temperature
        self.max_tokens = max_tokens or self.DEFAULT_MAX_TOKENS
        self._client_factory = client_factory or self._default_client

    def generate(self, prompt: str, credential: str) -> str:
        client = self._client_factory(credential)
        payload: dict[str, object] = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "system": self.SYSTEM_PROMPT,
            "messages": [{"role": "user", "content": prompt}],
        }
        if self.temperature is not None:
            payload["temperature"] = self.temperature

        try:
            response = client.messages.create(**payload)
        except AnthropicError as exc:
            raise GenerationError(f"Claude request failed: {exc}") from exc
        return require_text(self._extract_content(response), "Claude")

    @staticmethod
    def _default_client(credential: str) -> Anthropic:
        return Anthropic(api_key=credential)

    @staticmethod
    def _extract_content(response: Any) -> Optional[str]:
        blocks = getattr(response, "content", None)
        if not blocks:
            return None
        texts = [
            block.text
            for block in blocks
            if getattr(block, "type", "text") == "text" and isinstance(getattr(block, "text", None), str)
        ]
        if not texts:
            return None
        return "".join(texts)


__all__ = ["ClaudeAdapter"]
