# src/tripleg/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/tripleg/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `TRIPLEG_CONFIG_PATH` (replaces the packaged defaults)
- a small whitelist of environment variables (e.g., `TRIPLEG_LOG_LEVEL`)

Design rule:
- The parsers and the resolver never read settings themselves; callers pass the
  default timezone explicitly. Settings only feed entrypoints (CLI, logging, display).
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from tripleg.core.env import load_dotenv_if_present


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `tripleg.config`."""
    text = resources.files("tripleg.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "tripleg"
    default_timezone: str = "America/New_York"
    log_level: str = "INFO"


class FormattingSettings(BaseModel):
    timezone_abbreviations: dict[str, str] = Field(default_factory=dict)


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    formatting: FormattingSettings = Field(default_factory=FormattingSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("TRIPLEG_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    timezone = os.getenv("TRIPLEG_DEFAULT_TIMEZONE")
    if timezone:
        data.setdefault("app", {})["default_timezone"] = timezone

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("TRIPLEG_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
