"""Configuration loading and validation."""

from __future__ import annotations

import pathlib
from typing import Any

import yaml

from commerce_ext.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config"]

_DEFAULTS: dict[str, Any] = {
    "gateway": {
        "executable": "sfdx",
        "timeout": 120,
    },
    "messages": {
        "path": None,
    },
}


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_yaml(cls, path: str) -> Config:
        """Load configuration from a YAML file.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the file is not valid YAML or not a mapping.
        """
        config_path = pathlib.Path(path)
        if not config_path.is_file():
            raise ConfigNotFoundError(str(path))

        try:
            data = yaml.safe_load(config_path.read_text())
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}", cause=exc) from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        timeout = _lookup(data, "gateway.timeout")
        if timeout is not None and (not isinstance(timeout, (int, float)) or timeout <= 0):
            raise ConfigError(f"gateway.timeout must be a positive number, got {timeout!r}")

        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key.

        Falls back to the built-in default for the key, then to ``default``.
        """
        value = _lookup(self._data, key)
        if value is None:
            value = _lookup(_DEFAULTS, key)
        return default if value is None else value


def _lookup(data: dict[str, Any], key: str) -> Any:
    current: Any = data
    for part in key.split("."):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return None
    return current
