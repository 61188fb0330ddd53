"""YAML configuration file loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from pkgvisibility.models.config import CheckConfig


class ConfigFileError(Exception):
    """Raised when a configuration file cannot be read or is not a valid check config."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"{path}: {reason}")


def _read_mapping(path: Path) -> dict[str, Any]:
    yaml = YAML(typ="safe")
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.load(handle)
    except OSError as exc:
        raise ConfigFileError(path, exc.strerror or str(exc)) from exc
    except YAMLError as exc:
        raise ConfigFileError(path, f"invalid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigFileError(path, "top level must be a mapping of check options")
    return {str(key): value for key, value in data.items()}


def load_check_config(path: Path, base: CheckConfig | None = None) -> CheckConfig:
    """Load check options from ``path`` and overlay them onto ``base``.

    Example file::

        format: '/\\* package \\*/'
        requireTrailingWhitespace: false
        startFallback: file-start
    """
    try:
        file_config = CheckConfig.model_validate(_read_mapping(path))
    except ValidationError as exc:
        raise ConfigFileError(path, str(exc)) from exc
    return (base or CheckConfig()).overlay(file_config)
