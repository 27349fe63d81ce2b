"""Tests for prompt rendering and the fixed document catalogue."""

from __future__ import annotations

from collections import Counter
from pathlib import Path

from repohealth.models import AnswerSet
from repohealth.prompting import DOCUMENT_KINDS, TARGET_DIRECTORIES, PromptBuilder


def test_prompt_lists_every_answer_before_instruction() -> None:
    answers = AnswerSet.from_pairs(
        [("authorName", "Ada"), ("projectLicense", "MIT"), ("customFunding", "")]
    )

    prompt = PromptBuilder().build(answers, "Generate a YAML template for bug reports")

    assert prompt == (
        "Based on the following user inputs:\n"
        "authorName: Ada\n"
        "projectLicense: MIT\n"
        "customFunding: \n"
        "\n"
        "Generate a YAML template for bug reports"
    )


def test_prompt_does_not_escape_answer_text() -> None:
    answers = AnswerSet.from_pairs([("socialMedia", "https://x.example/?a=1&b=<2>")])

    prompt = PromptBuilder().build(answers, "Go")

    assert "socialMedia: https://x.example/?a=1&b=<2>" in prompt


def test_custom_templates_dir_overrides_default(tmp_path: Path) -> None:
    (tmp_path / "document.j2").write_text(
        "{{ instruction }} for {{ answers | length }} answers", encoding="utf-8"
    )
    answers = AnswerSet.from_pairs([("authorName", "Ada"), ("orgName", "AE")])

    prompt = PromptBuilder(templates_dir=tmp_path).build(answers, "Write docs")

    assert prompt == "Write docs for 2 answers"


def test_build_requests_follow_document_order() -> None:
    requests = PromptBuilder.build_requests()

    assert len(requests) == 14
    assert [request.instruction for request in requests] == [
        kind.instruction for kind in DOCUMENT_KINDS
    ]
    assert requests[0].kind == "announcements discussion template"


def test_document_destinations_are_stable() -> None:
    paths = [kind.path for kind in DOCUMENT_KINDS]

    assert paths == [
        ".github/DISCUSSION_TEMPLATE/ANNOUNCEMENTS.yml",
        ".github/DISCUSSION_TEMPLATE/IDEAS.yml",
        ".github/ISSUE_TEMPLATE/BUG_REPORT.yml",
        ".github/ISSUE_TEMPLATE/FEATURE_REQUEST.md",
        ".github/ISSUE_TEMPLATE/ENHANCEMENT_REQUEST.yml",
        ".github/ISSUE_TEMPLATE/QUESTION.md",
        ".github/ISSUE_TEMPLATE/config.yml",
        ".github/PULL_REQUEST_TEMPLATE.md",
        ".github/FUNDING.yml",
        ".github/SECURITY.md",
        "docs/CONTRIBUTING.md",
        "docs/GOVERNANCE.md",
        "docs/SUPPORT.md",
        "docs/CODE_OF_CONDUCT.md",
    ]
    folders = Counter(str(Path(path).parent) for path in paths)
    assert folders == {
        ".github/DISCUSSION_TEMPLATE": 2,
        ".github/ISSUE_TEMPLATE": 5,
        ".github": 3,
        "docs": 4,
    }
    assert set(folders) <= set(TARGET_DIRECTORIES)
    assert len({kind.key for kind in DOCUMENT_KINDS}) == 14
