"""Configuration loading helpers."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Mapping

import yaml
from pydantic import ValidationError

from ..errors import ConfigurationError
from .models import AppConfig, FastladderSettings

CONFIG_ENV_VAR = "FASTLADDER_BOOKWALKER_CONFIG"
FASTLADDER_URL_ENV = "FASTLADDER_URL"
FASTLADDER_API_KEY_ENV = "FASTLADDER_API_KEY"


def _read_file(path: Path) -> dict:
    text = path.read_text(encoding="utf-8")
    if path.suffix in (".yaml", ".yml"):
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file must contain a mapping: {path}")
    return data


def load_app_config(path: Path | None = None) -> AppConfig:
    """Load ``AppConfig`` from a YAML/JSON file, or return defaults without one."""

    if path is None:
        return AppConfig()
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")
    try:
        payload = _read_file(path)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Unable to parse configuration file {path}: {exc}") from exc
    try:
        return AppConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration in {path}: {exc}") from exc


def load_fastladder_settings(environ: Mapping[str, str] | None = None) -> FastladderSettings:
    """Read the aggregator URL and API key from the environment."""

    env = os.environ if environ is None else environ
    api_key = env.get(FASTLADDER_API_KEY_ENV, "").strip()
    if not api_key:
        raise ConfigurationError(f"{FASTLADDER_API_KEY_ENV} is required to post feeds")
    base_url = env.get(FASTLADDER_URL_ENV, "").strip()
    if not base_url:
        raise ConfigurationError(f"{FASTLADDER_URL_ENV} is required to post feeds")
    try:
        return FastladderSettings(base_url=base_url, api_key=api_key)
    except ValidationError as exc:
        raise ConfigurationError(f"Unparsable {FASTLADDER_URL_ENV}: {base_url}") from exc


__all__ = [
    "CONFIG_ENV_VAR",
    "FASTLADDER_API_KEY_ENV",
    "FASTLADDER_URL_ENV",
    "load_app_config",
    "load_fastladder_settings",
]
