"""Tests for post-processing of generated documents."""

from __future__ import annotations

from repohealth.failsafe import FALLBACK_CONTENT, is_fallback
from repohealth.postproc import ContentCleaner


def test_cleaner_unwraps_fenced_yaml() -> None:
    raw = "```yaml\nname: Bug report\nbody:\n  - type: textarea\n```\n"

    cleaned = ContentCleaner().clean(raw)

    assert cleaned == "name: Bug report\nbody:\n  - type: textarea\n"


def test_cleaner_keeps_unfenced_content_and_adds_trailing_newline() -> None:
    cleaned = ContentCleaner().clean("github: [ada]\r\npatreon: ada")

    assert cleaned == "github: [ada]\npatreon: ada\n"


def test_cleaner_leaves_inner_code_blocks_alone() -> None:
    raw = "# Contributing\n\nRun:\n\n```bash\nmake test\n```\n"

    cleaned = ContentCleaner().clean(raw)

    assert cleaned == raw


def test_cleaner_keeps_markdown_body_verbatim() -> None:
    raw = "Line one  \nline two\n#123 was fixed\n\n\n## Channels  \n- Email\n"

    cleaned = ContentCleaner().clean(raw)

    assert cleaned == raw
    assert "Line one  \nline two\n#123 was fixed" in cleaned


def test_cleaner_unwraps_markdown_fence_without_touching_hard_breaks() -> None:
    raw = "```markdown\n# Support\nAsk questions here.  \nOr email us.\n```"

    cleaned = ContentCleaner().clean(raw)

    assert cleaned == "# Support\nAsk questions here.  \nOr email us.\n"


def test_cleaner_preserves_fallback_placeholder() -> None:
    cleaned = ContentCleaner().clean(FALLBACK_CONTENT)

    assert is_fallback(cleaned)


def test_cleaner_never_empties_an_empty_fence() -> None:
    cleaned = ContentCleaner().clean("```\n```")

    assert cleaned.strip()
