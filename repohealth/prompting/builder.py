"""Builds provider prompts from collected answers."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from jinja2 import Environment, FileSystemLoader

from ..models import AnswerSet, DocumentKind, GenerationRequest
from .constants import DOCUMENT_KINDS


class PromptBuilder:
    """Renders the answer set and a document instruction into one prompt string."""

    TEMPLATE_NAME = "document.j2"

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)

    def build(self, answers: AnswerSet, instruction: str) -> str:
        template = self._env.get_template(self.TEMPLATE_NAME)
        return template.render(answers=list(answers.items()), instruction=instruction)

    @staticmethod
    def build_requests(kinds: Sequence[DocumentKind] = DOCUMENT_KINDS) -> List[GenerationRequest]:
        return [GenerationRequest(kind=kind.label, instruction=kind.instruction) for kind in kinds]

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: list[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        loader = FileSystemLoader(directories)
        return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


__all__ = ["PromptBuilder"]
