"""Configuration loading for repohealth (.repohealth.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

import yaml

CONFIG_FILENAME = ".repohealth.yml"

PROVIDER_ENV_KEYS: Dict[str, tuple[str, ...]] = {
    "openai": ("OPENAI_API_KEY",),
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    "claude": ("ANTHROPIC_API_KEY", "CLAUDE_API_KEY"),
}
PROVIDER_ENV_SELECTOR = "REPOHEALTH_PROVIDER"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class GenerationConfig:
    """Model overrides applied to whichever provider is selected."""

    models: Dict[str, str] = field(default_factory=dict)
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None

    def adapter_options(self, provider: str) -> Dict[str, object]:
        options: Dict[str, object] = {}
        model = self.models.get(provider)
        if model:
            options["model"] = model
        if self.temperature is not None:
            options["temperature"] = self.temperature
        if self.max_tokens is not None:
            options["max_tokens"] = self.max_tokens
        return options


@dataclass
class RepoHealthConfig:
    """Represents the settings defined in .repohealth.yml."""

    root: Path
    provider: Optional[str] = None
    api_key: Optional[str] = None
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    answers: Dict[str, str] = field(default_factory=dict)


def load_config(config_path: Path) -> RepoHealthConfig:
    """Load configuration from disk, returning defaults when no file exists."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return RepoHealthConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    models = {
        str(name).lower(): str(value)
        for name, value in _as_dict(data.get("models")).items()
        if _as_str(value)
    }
    generation = GenerationConfig(
        models=models,
        temperature=_as_float(data.get("temperature")),
        max_tokens=_as_int(data.get("max_tokens")),
    )

    answers = {
        str(name): _as_answer(value)
        for name, value in _as_dict(data.get("answers")).items()
        if value is not None
    }

    provider = _as_str(data.get("provider"))
    return RepoHealthConfig(
        root=root,
        provider=provider.strip().lower() if provider else None,
        api_key=_as_str(data.get("api_key")),
        generation=generation,
        answers=answers,
    )


def credential_from_env(provider: str, environ: Mapping[str, str] | None = None) -> Optional[str]:
    """Return the first non-empty credential exported for ``provider``."""
    env = os.environ if environ is None else environ
    for key in PROVIDER_ENV_KEYS.get(provider.lower(), ()):
        value = env.get(key)
        if value and value.strip():
            return value.strip()
    return None


def provider_from_env(environ: Mapping[str, str] | None = None) -> Optional[str]:
    env = os.environ if environ is None else environ
    value = env.get(PROVIDER_ENV_SELECTOR)
    if value and value.strip():
        return value.strip().lower()
    return None


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_answer(value: Any) -> str:
    # Lists are flattened so `githubUsername: [a, b]` matches the comma-separated prompt form.
    if isinstance(value, Sequence) and not isinstance(value, str):
        return ",".join(str(item) for item in value)
    return str(value)


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None
