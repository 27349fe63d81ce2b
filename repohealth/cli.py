"""CLI entrypoint for the repohealth scaffolder."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .collector import MissingAnswerError
from .config import ConfigError
from .logging import configure_logging
from .models import RunResult
from .orchestrator import Orchestrator, RunSettings
from .selection import MissingCredentialError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repohealth",
        description="Generate community-health files (issue templates, guides, policies) with an LLM.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the repository root (defaults to current directory).",
    )
    parser.add_argument(
        "-p",
        "--provider",
        help="LLM provider to use (openai, gemini, claude). Prompted when omitted.",
    )
    parser.add_argument(
        "-k",
        "--api-key",
        "--apikey",
        dest="api_key",
        help="API key for the selected provider. Falls back to the provider's environment variable.",
    )
    parser.add_argument(
        "-n",
        "--non-interactive",
        "--noninteractive",
        dest="non_interactive",
        action="store_true",
        help="Never prompt; read answers from .repohealth.yml and fail if any are missing.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to a configuration file (defaults to <path>/.repohealth.yml).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write logs to this file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for repohealth."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    settings = RunSettings(
        provider=args.provider,
        api_key=args.api_key,
        interactive=not args.non_interactive,
        config_path=args.config,
    )
    orchestrator = Orchestrator()

    try:
        result = orchestrator.run_sync(args.path, settings)
    except KeyboardInterrupt:
        parser.exit(130, "\nAborted.\n")
    except EOFError:
        parser.exit(1, "\nInput closed before every question was answered.\n")
    except (ConfigError, MissingCredentialError, MissingAnswerError) as exc:
        parser.exit(1, f"{exc}\n")
    except Exception as exc:  # pragma: no cover - defensive guard
        parser.exit(1, f"repohealth failed: {exc}\nRun with --verbose for more details.\n")

    _print_summary(result)


def _print_summary(result: RunResult) -> None:
    for outcome in result.outcomes:
        marker = "created" if outcome.success else f"FAILED ({outcome.error})"
        print(f"{_relativize(outcome.path)}: {marker}")
    print(
        f"Community health files: {result.written} written, {result.failed} failed, "
        f"{result.fallbacks} with placeholder content."
    )


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
