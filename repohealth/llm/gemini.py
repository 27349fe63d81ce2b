"""Adapter for Google Gemini via google-generativeai."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from google.generativeai.types import (
    BlockedPromptException,
    HarmBlockThreshold,
    HarmCategory,
    StopCandidateException,
)

from .base import GenerationError, require_text

ModelFactory = Callable[..., Any]

# Thresholds sent with every Gemini request.
SAFETY_SETTINGS: Dict[HarmCategory, HarmBlockThreshold] = {
    HarmCategory.HARM_CATEGORY_HARASSMENT: HarmBlockThreshold.BLOCK_NONE,
    HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT: HarmBlockThreshold.BLOCK_NONE,
    HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_NONE,
}


class GeminiAdapter:
    """Generates documents with a Gemini model and relaxed safety thresholds.

    The default model factory calls ``genai.configure(api_key=...)``, which sets
    the credential process-wide in google-generativeai. Every request of one run
    carries the same key, so a single run is unaffected, but two runs with
    different Gemini keys in one process would race. Pass a ``model_factory``
    that builds an isolated client when that matters.
    """

    name = "gemini"
    DEFAULT_MODEL = "gemini-1.5-flash"

    def __init__(
        self,
        model: str | None = None,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        model_factory: ModelFactory | None = None,
    ) -> None:
        self.model = model or self.DEFAULT_MODEL
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._model_factory = model_factory or self._default_model

    def generate(self, prompt: str, credential: str) -> str:
        model = self._model_factory(
            credential,
            model_name=self.model,
            safety_settings=SAFETY_SETTINGS,
            generation_config=self._generation_config(),
        )
        try:
            response = model.generate_content(prompt)
            text = response.text if response is not None else None
        except google_exceptions.GoogleAPIError as exc:
            raise GenerationError(f"Gemini request failed: {exc}") from exc
        except (BlockedPromptException, StopCandidateException) as exc:
            raise GenerationError(f"Gemini blocked the response: {exc}") from exc
        except ValueError as exc:
            # `response.text` raises when the candidate carries no text parts.
            raise GenerationError(f"Gemini returned no usable candidate: {exc}") from exc
        return require_text(text, "Gemini")

    def _generation_config(self) -> Optional[Dict[str, object]]:
        config: Dict[str, object] = {}
        if self.temperature is not None:
            config["temperature"] = self.temperature
        if self.max_tokens is not None:
            config["max_output_tokens"] = self.max_tokens
        return config or None

    @staticmethod
    def _default_model(credential: str, **kwargs: Any) -> genai.GenerativeModel:
        genai.configure(api_key=credential)
        return genai.GenerativeModel(**kwargs)


__all__ = ["GeminiAdapter", "SAFETY_SETTINGS"]
