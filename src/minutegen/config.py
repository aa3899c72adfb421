"""Configuration loading and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import find_dotenv, load_dotenv

from .completion import DEFAULT_MAX_TOKENS, DEFAULT_MODEL, DEFAULT_TEMPERATURE
from .models import SENTINEL_SPEAKER
from .prompt_builder import SYSTEM_PROMPT
from .renderer import DEFAULT_TEMPLATES_DIR

_DEFAULT_CONFIG_DIR = Path.home() / ".config" / "minutegen"
_DEFAULT_CONFIG_PATH = _DEFAULT_CONFIG_DIR / "config.yaml"

API_KEY_ENV = "OPENAI_API_KEY"


@dataclass
class Config:
    templates_dir: Path = field(default_factory=lambda: DEFAULT_TEMPLATES_DIR)
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    system_prompt: str = SYSTEM_PROMPT
    sentinel_speaker: str = SENTINEL_SPEAKER
    replace_all_placeholders: bool = False
    api_key: str | None = field(default=None, repr=False)


def load_api_key() -> str | None:
    """Read the API key from the environment, after loading .env from the working directory."""
    load_dotenv(find_dotenv(usecwd=True))
    return os.getenv(API_KEY_ENV) or None


def load_config(config_path: Path | None = None) -> Config:
    """Load config from YAML, falling back to defaults when the default file is absent."""
    if config_path is None:
        path = _DEFAULT_CONFIG_PATH
        if not path.exists():
            return Config(api_key=load_api_key())
    else:
        path = Path(config_path).expanduser()
        if not path.exists():
            raise FileNotFoundError(
                f"Config file not found: {path}\n"
                f"Create one at {_DEFAULT_CONFIG_PATH} or omit --config."
            )

    raw = yaml.safe_load(path.read_text())
    if not raw or not isinstance(raw, dict):
        raise ValueError(f"Invalid config file: {path}")

    kwargs: dict = {"api_key": load_api_key()}
    if "templates_dir" in raw:
        kwargs["templates_dir"] = Path(raw["templates_dir"]).expanduser()
    for key in (
        "model",
        "max_tokens",
        "temperature",
        "system_prompt",
        "sentinel_speaker",
        "replace_all_placeholders",
    ):
        if key in raw:
            kwargs[key] = raw[key]

    return Config(**kwargs)
