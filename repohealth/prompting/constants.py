"""Fixed document kinds and their destinations inside the target repository."""

from __future__ import annotations

from .. import models

GITHUB_DIR = ".github"
DISCUSSION_TEMPLATE_DIR = f"{GITHUB_DIR}/DISCUSSION_TEMPLATE"
ISSUE_TEMPLATE_DIR = f"{GITHUB_DIR}/ISSUE_TEMPLATE"
DOCS_DIR = "docs"

TARGET_DIRECTORIES: tuple[str, ...] = (
    GITHUB_DIR,
    DISCUSSION_TEMPLATE_DIR,
    ISSUE_TEMPLATE_DIR,
    DOCS_DIR,
)

# Destination paths follow the hosting platform's community-health conventions.
DOCUMENT_KINDS: tuple[models.DocumentKind, ...] = (
    models.DocumentKind(
        "announcements",
        "announcements discussion template",
        "Generate a YAML template for project announcements",
        f"{DISCUSSION_TEMPLATE_DIR}/ANNOUNCEMENTS.yml",
    ),
    models.DocumentKind(
        "ideas",
        "ideas discussion template",
        "Generate a YAML template for project ideas",
        f"{DISCUSSION_TEMPLATE_DIR}/IDEAS.yml",
    ),
    models.DocumentKind(
        "bug_report",
        "bug report template",
        "Generate a YAML template for bug reports",
        f"{ISSUE_TEMPLATE_DIR}/BUG_REPORT.yml",
    ),
    models.DocumentKind(
        "feature_request",
        "feature request template",
        "Generate a markdown template for feature requests",
        f"{ISSUE_TEMPLATE_DIR}/FEATURE_REQUEST.md",
    ),
    models.DocumentKind(
        "enhancement_request",
        "enhancement request template",
        "Generate a YAML template for enhancement requests",
        f"{ISSUE_TEMPLATE_DIR}/ENHANCEMENT_REQUEST.yml",
    ),
    models.DocumentKind(
        "question",
        "question template",
        "Generate a markdown template for project questions",
        f"{ISSUE_TEMPLATE_DIR}/QUESTION.md",
    ),
    models.DocumentKind(
        "issue_config",
        "issue template config",
        "Generate a YAML config file for GitHub issues",
        f"{ISSUE_TEMPLATE_DIR}/config.yml",
    ),
    models.DocumentKind(
        "pull_request",
        "pull request template",
        "Generate a markdown template for pull requests",
        f"{GITHUB_DIR}/PULL_REQUEST_TEMPLATE.md",
    ),
    models.DocumentKind(
        "funding",
        "funding configuration",
        "Generate a YAML template for project funding",
        f"{GITHUB_DIR}/FUNDING.yml",
    ),
    models.DocumentKind(
        "security",
        "security policy",
        "Generate a markdown template for security policy",
        f"{GITHUB_DIR}/SECURITY.md",
    ),
    models.DocumentKind(
        "contributing",
        "contribution guidelines",
        "Generate a markdown template for contribution guidelines",
        f"{DOCS_DIR}/CONTRIBUTING.md",
    ),
    models.DocumentKind(
        "governance",
        "governance document",
        "Generate a markdown template for project governance",
        f"{DOCS_DIR}/GOVERNANCE.md",
    ),
    models.DocumentKind(
        "support",
        "support document",
        "Generate a markdown template for project support",
        f"{DOCS_DIR}/SUPPORT.md",
    ),
    models.DocumentKind(
        "code_of_conduct",
        "code of conduct",
        "Generate a markdown template for code of conduct",
        f"{DOCS_DIR}/CODE_OF_CONDUCT.md",
    ),
)


__all__ = [
    "DISCUSSION_TEMPLATE_DIR",
    "DOCS_DIR",
    "DOCUMENT_KINDS",
    "GITHUB_DIR",
    "ISSUE_TEMPLATE_DIR",
    "TARGET_DIRECTORIES",
]
