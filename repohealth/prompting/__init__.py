"""Prompt construction for community-health documents."""

from .builder import PromptBuilder
from .constants import DOCUMENT_KINDS, TARGET_DIRECTORIES

__all__ = ["DOCUMENT_KINDS", "PromptBuilder", "TARGET_DIRECTORIES"]
