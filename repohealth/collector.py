"""Interactive collection of the project metadata sent to the provider."""

from __future__ import annotations

import asyncio
import threading
from typing import Awaitable, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from .logging import get_logger
from .models import AnswerSet, Question

Reader = Callable[[str], Awaitable[str]]
Notifier = Callable[[str], None]

MANDATORY_NOTICE = "This question is mandatory. Please provide an answer."

QUESTIONS: Tuple[Question, ...] = (
    Question("authorName", "What is the name of the project owner or maintainer?\n> ", mandatory=True),
    Question(
        "projectLicense",
        "Which license type are you using for this project? (e.g., MIT, Apache 2.0, GPL):\n> ",
        mandatory=True,
    ),
    Question("bugAssignee", "Who should be assigned to manage and fix bugs?\n> ", mandatory=True),
    Question(
        "enhancementAssignee",
        "Who will handle the requests for feature enhancements?\n> ",
        mandatory=True,
    ),
    Question("featureAssignee", "Who will take care of adding new features?\n> ", mandatory=True),
    Question(
        "questionAssignee",
        "Who should address any general or technical questions?\n> ",
        mandatory=True,
    ),
    Question("orgName", "What's the name of your organization or company?\n> ", mandatory=True),
    Question(
        "socialMedia",
        "Please provide your organization's social media link (e.g., Twitter, LinkedIn):\n> ",
        mandatory=True,
    ),
    Question("email", "What's the contact email for developers or contributors?\n> ", mandatory=True),
    Question(
        "githubUsername",
        "Enter GitHub username(s) for funding, separated by commas (leave blank if none):\n> ",
        list_valued=True,
    ),
    Question("patreonUsername", "Enter the Patreon username for funding (leave blank if none):\n> "),
    Question(
        "tideliftPackage",
        "Provide the Tidelift package name (e.g., npm/package-name) for funding (leave blank if none):\n> ",
    ),
    Question(
        "customFunding",
        "Add any custom funding URLs (comma separated) or leave blank if none:\n> ",
        list_valued=True,
    ),
)


class MissingAnswerError(RuntimeError):
    """Raised when a mandatory answer is absent and prompting is disabled."""


async def terminal_reader(prompt: str) -> str:
    """Read one line from the terminal without blocking the event loop.

    The blocking read runs on a daemon thread, so an abandoned prompt never
    holds up interpreter shutdown.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[str] = loop.create_future()

    def _settle(line: Optional[str], error: Optional[BaseException]) -> None:
        if future.done():
            return
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(line or "")

    def _worker() -> None:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt) as exc:
            outcome: tuple[Optional[str], Optional[BaseException]] = (None, exc)
        else:
            outcome = (line, None)
        if not loop.is_closed():
            loop.call_soon_threadsafe(_settle, *outcome)

    threading.Thread(target=_worker, name="repohealth-input", daemon=True).start()
    return await future


async def ask_question(
    reader: Reader,
    prompt: str,
    *,
    mandatory: bool = False,
    notify: Notifier | None = None,
) -> str:
    """Ask ``prompt`` until an acceptable answer arrives and return it trimmed.

    Mandatory questions are re-asked verbatim for as long as the answer is
    blank. There is no attempt limit; cancelling the awaiting task is the only
    way out.
    """
    while True:
        answer = (await reader(prompt)).strip()
        if answer or not mandatory:
            return answer
        if notify is not None:
            notify(MANDATORY_NOTICE)


def normalize_list_answer(raw: str) -> str:
    """Canonicalise a comma-separated answer.

    Each element is trimmed and the result rejoined with ``", "``. Empty
    elements are kept, so ``"a, b ,c,"`` becomes ``"a, b, c, "``; a blank
    answer yields ``""``.
    """
    if not raw or not raw.strip():
        return ""
    return ", ".join(part.strip() for part in raw.split(","))


class InputCollector:
    """Gathers the fixed, ordered answer set from the operator."""

    def __init__(
        self,
        reader: Reader | None = None,
        *,
        questions: Sequence[Question] = QUESTIONS,
        prefilled: Mapping[str, str] | None = None,
        interactive: bool = True,
        notify: Notifier | None = None,
    ) -> None:
        self.reader = reader or terminal_reader
        self.questions = tuple(questions)
        self.prefilled: Dict[str, str] = dict(prefilled or {})
        self.interactive = interactive
        self.logger = get_logger("collector")
        self.notify = notify if notify is not None else self.logger.warning

    async def collect(self) -> AnswerSet:
        """Resolve every question in declared order and return the answers."""
        answers: List[Tuple[str, str]] = []
        for question in self.questions:
            raw = await self._resolve(question)
            value = normalize_list_answer(raw) if question.list_valued else raw
            answers.append((question.field, value))
        self.logger.debug("Collected %d answers", len(answers))
        return AnswerSet.from_pairs(answers)

    async def _resolve(self, question: Question) -> str:
        preset = self._preset(question.field)
        if preset is not None:
            if preset or not question.mandatory:
                self.logger.debug("Using configured answer for %s", question.field)
                return preset
        if not self.interactive:
            if question.mandatory:
                raise MissingAnswerError(
                    f"Answer for '{question.field}' is required in non-interactive mode."
                )
            return ""
        return await ask_question(
            self.reader,
            question.prompt,
            mandatory=question.mandatory,
            notify=self.notify,
        )

    def _preset(self, name: str) -> Optional[str]:
        value = self.prefilled.get(name)
        if value is None:
            return None
        return value.strip()


__all__ = [
    "InputCollector",
    "MANDATORY_NOTICE",
    "MissingAnswerError",
    "QUESTIONS",
    "ask_question",
    "normalize_list_answer",
    "terminal_reader",
]
