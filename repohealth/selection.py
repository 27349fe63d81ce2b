"""Provider and credential selection for a single run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

from .collector import Notifier, Reader, ask_question, terminal_reader
from .config import ConfigError
from .llm import available_providers
from .logging import get_logger


class MissingCredentialError(RuntimeError):
    """Raised when no credential is available and prompting is disabled."""


class SelectionState(Enum):
    UNSELECTED = "unselected"
    AWAITING_VALID_PROVIDER = "awaiting_valid_provider"
    AWAITING_CREDENTIAL = "awaiting_credential"
    READY = "ready"


@dataclass(frozen=True)
class ProviderSelection:
    """Request-scoped provider choice threaded through the dispatcher."""

    provider: str
    credential: str

    def __repr__(self) -> str:
        return f"ProviderSelection(provider={self.provider!r}, credential='***')"


class ProviderSelector:
    """Walks the operator from no provider to a ready (provider, credential) pair."""

    def __init__(
        self,
        reader: Reader | None = None,
        *,
        providers: Sequence[str] | None = None,
        provider: Optional[str] = None,
        credential: Optional[str] = None,
        credential_lookup: Callable[[str], Optional[str]] | None = None,
        interactive: bool = True,
        notify: Notifier | None = None,
    ) -> None:
        self.reader = reader or terminal_reader
        self.providers = tuple(name.lower() for name in (providers or available_providers()))
        self.preset_provider = provider.strip() if provider else None
        self.preset_credential = credential.strip() if credential else None
        self.credential_lookup = credential_lookup
        self.interactive = interactive
        self.logger = get_logger("selection")
        self.notify = notify if notify is not None else self.logger.warning
        self.state = SelectionState.UNSELECTED

    @property
    def provider_prompt(self) -> str:
        return f"Which AI platform would you like to use? ({'/'.join(self.providers)}): "

    def is_valid(self, name: str) -> bool:
        return name.strip().lower() in self.providers

    async def select(self) -> ProviderSelection:
        if self.state is SelectionState.READY:
            raise RuntimeError("Provider selection already completed for this run")
        provider = await self._choose_provider()
        credential = await self._choose_credential(provider)
        self.state = SelectionState.READY
        self.logger.debug("Selected provider %s", provider)
        return ProviderSelection(provider=provider, credential=credential)

    async def _choose_provider(self) -> str:
        self.state = SelectionState.AWAITING_VALID_PROVIDER
        if self.preset_provider:
            if not self.is_valid(self.preset_provider):
                raise ConfigError(
                    f"Unknown provider '{self.preset_provider}'. Choose one of: {', '.join(self.providers)}."
                )
            self.state = SelectionState.AWAITING_CREDENTIAL
            return self.preset_provider.lower()
        if not self.interactive:
            raise ConfigError("No provider configured. Pass --provider or set it in .repohealth.yml.")

        choice = await ask_question(self.reader, self.provider_prompt, mandatory=True, notify=self.notify)
        while not self.is_valid(choice):
            self.notify(f"Invalid platform. Please choose {self._choices_text()}.")
            choice = await ask_question(self.reader, self.provider_prompt, mandatory=True, notify=self.notify)
        self.state = SelectionState.AWAITING_CREDENTIAL
        return choice.lower()

    async def _choose_credential(self, provider: str) -> str:
        credential = self.preset_credential
        if not credential and self.credential_lookup is not None:
            credential = self.credential_lookup(provider)
        if credential:
            return credential
        if not self.interactive:
            raise MissingCredentialError(
                f"No API key available for {provider}. Pass --api-key or export the provider's key."
            )
        return await ask_question(
            self.reader,
            f"Please enter your {provider.upper()} API key: ",
            mandatory=True,
            notify=self.notify,
        )

    def _choices_text(self) -> str:
        if len(self.providers) < 2:
            return "".join(self.providers)
        return f"{', '.join(self.providers[:-1])}, or {self.providers[-1]}"


__all__ = [
    "MissingCredentialError",
    "ProviderSelection",
    "ProviderSelector",
    "SelectionState",
]
