"""Pipeline orchestration for a community-health scaffolding run."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional, Sequence

from .collector import InputCollector, Notifier, Reader
from .config import RepoHealthConfig, credential_from_env, load_config, provider_from_env
from .dispatcher import ContentDispatcher
from .failsafe import is_fallback
from .llm import ProviderAdapter, create_adapter
from .logging import get_logger
from .models import DocumentKind, RunResult
from .postproc import ContentCleaner
from .prompting import DOCUMENT_KINDS, TARGET_DIRECTORIES, PromptBuilder
from .selection import ProviderSelection, ProviderSelector
from .writer import DocumentWriter, ensure_directories

AdapterFactory = Callable[..., ProviderAdapter]


@dataclass
class RunSettings:
    """Operator overrides supplied on the command line."""

    provider: Optional[str] = None
    api_key: Optional[str] = None
    interactive: bool = True
    config_path: Optional[Path] = None


class Orchestrator:
    """Coordinates selection, collection, generation and writing for one run."""

    def __init__(
        self,
        reader: Reader | None = None,
        *,
        adapter_factory: AdapterFactory = create_adapter,
        prompt_builder: PromptBuilder | None = None,
        cleaner: ContentCleaner | None = None,
        writer: DocumentWriter | None = None,
        kinds: Sequence[DocumentKind] = DOCUMENT_KINDS,
        environ: Mapping[str, str] | None = None,
        notify: Notifier | None = None,
    ) -> None:
        self.reader = reader
        self.adapter_factory = adapter_factory
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.cleaner = cleaner or ContentCleaner()
        self.writer = writer or DocumentWriter()
        self.kinds = tuple(kinds)
        self.environ = environ
        self.notify = notify
        self.logger = get_logger("orchestrator")

    def run_sync(self, path: str, settings: RunSettings | None = None) -> RunResult:
        return asyncio.run(self.run(path, settings))

    async def run(self, path: str, settings: RunSettings | None = None) -> RunResult:
        settings = settings or RunSettings()
        root = Path(path).expanduser().resolve()
        config = load_config(settings.config_path or root)
        self.logger.info("Starting run for %s", root)

        selection = await self._select_provider(config, settings)
        adapter = self.adapter_factory(
            selection.provider, **config.generation.adapter_options(selection.provider)
        )

        collector = InputCollector(
            self.reader,
            prefilled=config.answers,
            interactive=settings.interactive,
            notify=self.notify,
        )
        answers = await collector.collect()

        ensure_directories(root / directory for directory in TARGET_DIRECTORIES)

        dispatcher = ContentDispatcher(adapter, selection, prompt_builder=self.prompt_builder)
        requests = self.prompt_builder.build_requests(self.kinds)
        results = await dispatcher.generate_all(answers, requests)

        documents = [
            (root / kind.path, self.cleaner.clean(content))
            for kind, content in zip(self.kinds, results)
        ]
        outcomes = self.writer.write_all(documents)

        fallbacks = sum(1 for content in results if is_fallback(content))
        result = RunResult(
            outcomes=outcomes,
            generated=len(results) - fallbacks,
            fallbacks=fallbacks,
        )
        if fallbacks:
            self.logger.warning(
                "%d of %d documents fell back to placeholder content", fallbacks, len(results)
            )
        self.logger.info("Wrote %d of %d files", result.written, len(outcomes))
        return result

    async def _select_provider(
        self, config: RepoHealthConfig, settings: RunSettings
    ) -> ProviderSelection:
        selector = ProviderSelector(
            self.reader,
            provider=settings.provider or config.provider or provider_from_env(self.environ),
            credential=settings.api_key or config.api_key,
            credential_lookup=lambda provider: credential_from_env(provider, self.environ),
            interactive=settings.interactive,
            notify=self.notify,
        )
        return await selector.select()


__all__ = ["Orchestrator", "RunSettings"]
