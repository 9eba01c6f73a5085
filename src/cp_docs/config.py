"""Collector configuration loading."""

from __future__ import annotations

from typing import TYPE_CHECKING

import yaml
from pydantic import ValidationError

from .errors import ConfigError
from .types import CollectorConfig

if TYPE_CHECKING:
    from pathlib import Path


def load_config(config_path: Path | None = None) -> CollectorConfig:
    """Read a YAML config file, falling back to the defaults.

    Keys mirror ``CollectorConfig``; omitted keys keep their defaults and
    unknown keys are rejected.
    """
    if config_path is None:
        return CollectorConfig()

    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}", config_path)

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as err:
        raise ConfigError(f"Could not read config {config_path}: {err}", config_path) from err

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config must be a mapping, got {type(raw).__name__}: {config_path}", config_path)

    try:
        return CollectorConfig.model_validate(raw)
    except ValidationError as err:
        raise ConfigError(f"Invalid config {config_path}: {err}", config_path) from err
