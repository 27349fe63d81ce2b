"""Concurrent dispatch of generation requests to the selected provider."""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import List, Sequence

from .failsafe import FALLBACK_CONTENT
from .llm.base import ProviderAdapter
from .logging import document_logger, get_logger
from .models import AnswerSet, GenerationRequest
from .prompting.builder import PromptBuilder
from .selection import ProviderSelection


class ContentDispatcher:
    """Fans every request out to the provider and joins the results in request order.

    Each request runs the blocking SDK call on its own worker thread. A failure in
    one request is logged and replaced by :data:`FALLBACK_CONTENT`; it never
    cancels or fails its siblings.
    """

    def __init__(
        self,
        adapter: ProviderAdapter,
        selection: ProviderSelection,
        *,
        prompt_builder: PromptBuilder | None = None,
        fallback: str = FALLBACK_CONTENT,
    ) -> None:
        self.adapter = adapter
        self.selection = selection
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.fallback = fallback
        self.logger = get_logger("dispatcher")

    async def generate_all(
        self, answers: AnswerSet, requests: Sequence[GenerationRequest]
    ) -> List[str]:
        self.logger.info(
            "Generating %d documents via %s", len(requests), self.selection.provider
        )
        if not requests:
            return []
        executor = ThreadPoolExecutor(
            max_workers=len(requests), thread_name_prefix="repohealth-generate"
        )
        try:
            tasks = [self._generate_one(answers, request, executor) for request in requests]
            return list(await asyncio.gather(*tasks))
        finally:
            # Never block the event loop on in-flight SDK calls after a cancellation.
            executor.shutdown(wait=False, cancel_futures=True)

    async def _generate_one(
        self, answers: AnswerSet, request: GenerationRequest, executor: Executor
    ) -> str:
        logger = document_logger(self.logger, request.kind)
        loop = asyncio.get_running_loop()
        try:
            prompt = self.prompt_builder.build(answers, request.instruction)
            content = await loop.run_in_executor(
                executor, self.adapter.generate, prompt, self.selection.credential
            )
        except Exception as exc:  # noqa: BLE001 - failures stay scoped to one document
            self._log_exception(logger, "Generation failed", exc)
            return self.fallback
        if not isinstance(content, str) or not content.strip():
            logger.warning("Provider returned no content")
            return self.fallback
        logger.debug("Generated %d chars", len(content))
        return content

    @staticmethod
    def _log_exception(
        logger: logging.LoggerAdapter, message: str, exc: Exception
    ) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.exception("%s: %s", message, exc)
        else:
            logger.warning("%s: %s", message, exc)


__all__ = ["ContentDispatcher"]
