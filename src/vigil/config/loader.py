# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/vigil/config/loader.py

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import ConfigError
from .models import VigilConfig

log = logging.getLogger("vigil")


def _load_yaml(path: Path) -> dict:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: str | Path | None = None) -> VigilConfig:
    """
    Load and validate a vigil YAML config.

    ``None`` (or an empty file) yields the defaults, which reproduce the
    fixed demonstration run.
    """
    if path is None:
        log.debug("No config file given, using defaults")
        return VigilConfig()

    path = Path(path)
    data = _load_yaml(path)
    log.debug("Loaded config from %s", path)

    try:
        return VigilConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"{path}: {e}") from e
