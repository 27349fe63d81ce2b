"""Tests for interactive answer collection."""

from __future__ import annotations

import asyncio

import pytest

from repohealth.collector import (
    MANDATORY_NOTICE,
    QUESTIONS,
    InputCollector,
    MissingAnswerError,
    ask_question,
    normalize_list_answer,
    terminal_reader,
)
from repohealth.models import AnswerSet
from tests._fixtures.readers import ScriptedReader


@pytest.mark.parametrize("empty_attempts", [0, 1, 4])
def test_mandatory_question_reasks_until_answered(empty_attempts: int) -> None:
    reader = ScriptedReader([""] * empty_attempts + ["  Ada  "])
    notices: list[str] = []

    answer = asyncio.run(
        ask_question(reader, "Owner?\n> ", mandatory=True, notify=notices.append)
    )

    assert answer == "Ada"
    assert len(reader.prompts) == empty_attempts + 1
    assert set(reader.prompts) == {"Owner?\n> "}
    assert notices == [MANDATORY_NOTICE] * empty_attempts


def test_whitespace_only_answer_counts_as_empty_for_mandatory_questions() -> None:
    reader = ScriptedReader(["   ", "\t", "MIT"])

    answer = asyncio.run(ask_question(reader, "License?", mandatory=True))

    assert answer == "MIT"
    assert len(reader.prompts) == 3


def test_optional_question_accepts_empty_answer_immediately() -> None:
    reader = ScriptedReader(["", "unused"])

    answer = asyncio.run(ask_question(reader, "Patreon?", mandatory=False))

    assert answer == ""
    assert reader.prompts == ["Patreon?"]
    assert reader.remaining == 1


def test_normalize_list_answer_keeps_trailing_empty_element() -> None:
    assert normalize_list_answer("a, b ,c,") == "a, b, c, "


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", ""),
        ("   ", ""),
        ("octocat", "octocat"),
        (" octocat ,hubot ", "octocat, hubot"),
        ("https://a.example,https://b.example", "https://a.example, https://b.example"),
    ],
)
def test_normalize_list_answer_trims_and_rejoins(raw: str, expected: str) -> None:
    assert normalize_list_answer(raw) == expected


def test_collect_returns_answers_in_declared_order(answers_script: list[str]) -> None:
    reader = ScriptedReader(answers_script)

    answers = asyncio.run(InputCollector(reader).collect())

    assert isinstance(answers, AnswerSet)
    assert list(answers) == [question.field for question in QUESTIONS]
    assert answers["authorName"] == "Ada Lovelace"
    assert answers["githubUsername"] == "ada, charles"
    assert answers["customFunding"] == ""
    assert answers["patreonUsername"] == ""
    assert reader.prompts == [question.prompt for question in QUESTIONS]


def test_collect_reasks_blank_mandatory_field_before_advancing(answers_script: list[str]) -> None:
    script = ["", ""] + answers_script
    reader = ScriptedReader(script)

    answers = asyncio.run(InputCollector(reader, notify=lambda _: None).collect())

    assert answers["authorName"] == "Ada Lovelace"
    assert reader.prompts[:3] == [QUESTIONS[0].prompt] * 3
    assert len(reader.prompts) == len(QUESTIONS) + 2


def test_collect_uses_prefilled_answers_and_asks_for_the_rest() -> None:
    prefilled = {question.field: f"value-{index}" for index, question in enumerate(QUESTIONS)}
    prefilled["email"] = "   "
    prefilled["customFunding"] = "x.example ,y.example"
    reader = ScriptedReader(["dev@example.com"])

    answers = asyncio.run(InputCollector(reader, prefilled=prefilled).collect())

    assert reader.prompts == [next(q.prompt for q in QUESTIONS if q.field == "email")]
    assert answers["email"] == "dev@example.com"
    assert answers["customFunding"] == "x.example, y.example"
    assert answers["orgName"] == prefilled["orgName"]


def test_non_interactive_collect_requires_every_mandatory_answer() -> None:
    prefilled = {question.field: "set" for question in QUESTIONS if question.mandatory}
    del prefilled["projectLicense"]

    collector = InputCollector(ScriptedReader([]), prefilled=prefilled, interactive=False)

    with pytest.raises(MissingAnswerError, match="projectLicense"):
        asyncio.run(collector.collect())


def test_non_interactive_collect_defaults_optional_answers_to_empty() -> None:
    prefilled = {question.field: "set" for question in QUESTIONS if question.mandatory}

    answers = asyncio.run(
        InputCollector(ScriptedReader([]), prefilled=prefilled, interactive=False).collect()
    )

    optional = [question.field for question in QUESTIONS if not question.mandatory]
    assert all(answers[name] == "" for name in optional)


def test_answer_set_is_immutable_and_ordered() -> None:
    answers = AnswerSet.from_pairs([("b", "2"), ("a", "1")])

    assert list(answers.items()) == [("b", "2"), ("a", "1")]
    assert answers.as_dict() == {"b": "2", "a": "1"}
    with pytest.raises(AttributeError):
        answers.entries = ()  # type: ignore[misc]
    with pytest.raises(KeyError):
        answers["missing"]


def test_terminal_reader_returns_the_typed_line_unchanged(monkeypatch) -> None:
    prompts: list[str] = []

    def fake_input(prompt: str = "") -> str:
        prompts.append(prompt)
        return "  Ada, Charles  "

    monkeypatch.setattr("builtins.input", fake_input)

    line = asyncio.run(terminal_reader("Owner?\n> "))

    assert line == "  Ada, Charles  "
    assert prompts == ["Owner?\n> "]


def test_terminal_reader_propagates_end_of_input(monkeypatch) -> None:
    def closed_stdin(prompt: str = "") -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", closed_stdin)

    with pytest.raises(EOFError):
        asyncio.run(terminal_reader("Owner?\n> "))


def test_collector_without_reader_reads_from_the_terminal(
    monkeypatch, answers_script: list[str]
) -> None:
    replies = iter(answers_script)
    prompts: list[str] = []

    def fake_input(prompt: str = "") -> str:
        prompts.append(prompt)
        return next(replies)

    monkeypatch.setattr("builtins.input", fake_input)
    collector = InputCollector()

    answers = asyncio.run(collector.collect())

    assert collector.reader is terminal_reader
    assert prompts == [question.prompt for question in QUESTIONS]
    assert answers["authorName"] == "Ada Lovelace"
    assert list(answers) == [question.field for question in QUESTIONS]
