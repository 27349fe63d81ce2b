"""Core data models shared across repohealth components."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class Question:
    """A single operator prompt bound to an answer field."""

    field: str
    prompt: str
    mandatory: bool = False
    list_valued: bool = False


@dataclass(frozen=True)
class AnswerSet(Mapping):
    """Ordered, immutable answers collected for one run."""

    entries: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Mapping[str, str] | List[Tuple[str, str]]) -> "AnswerSet":
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        return cls(entries=tuple((str(key), str(value)) for key, value in items))

    def __getitem__(self, key: str) -> str:
        for name, value in self.entries:
            if name == key:
                return value
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def as_dict(self) -> Dict[str, str]:
        return dict(self.entries)


@dataclass(frozen=True)
class DocumentKind:
    """One community-health file the tool materialises."""

    key: str
    label: str
    instruction: str
    path: str


@dataclass(frozen=True)
class GenerationRequest:
    """Pairs a document label with the instruction sent to the provider."""

    kind: str
    instruction: str


@dataclass
class WriteOutcome:
    """Result of persisting a single generated document."""

    path: Path
    success: bool
    error: Optional[str] = None


@dataclass
class RunResult:
    """Summary of a completed generation run."""

    outcomes: List[WriteOutcome] = field(default_factory=list)
    generated: int = 0
    fallbacks: int = 0

    @property
    def written(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.success)

    @property
    def failed(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.success)
