"""Message catalogue loaded from YAML and injected into components."""

from __future__ import annotations

import copy
import pathlib
from typing import Any

import yaml

from commerce_ext.errors import ConfigError, ConfigNotFoundError, MessageNotFoundError

__all__ = ["Messages", "DEFAULT_MESSAGES_PATH"]

DEFAULT_MESSAGES_PATH = pathlib.Path(__file__).parent / "resources" / "messages.yaml"

_MISSING = object()


class Messages:
    """Resolves dotted message keys to formatted, human-readable text.

    Instances are passed to the components that need them rather than
    loaded into module state, so tests and hosts can supply their own.
    """

    def __init__(self, catalogue: dict[str, Any]) -> None:
        self._catalogue = catalogue

    @classmethod
    def load(cls, path: str | pathlib.Path | None = None) -> Messages:
        """Load the bundled catalogue, overlaid with the one at ``path`` if given.

        Keys missing from ``path`` keep their bundled text.
        """
        catalogue = _read_catalogue(DEFAULT_MESSAGES_PATH)
        if path is not None:
            catalogue = _deep_merge(catalogue, _read_catalogue(pathlib.Path(path)))
        return cls(catalogue)

    def get(self, key: str, *args: Any, default: Any = _MISSING) -> Any:
        """Return the message for ``key`` with positional ``args`` substituted.

        When ``key`` is unknown, returns ``default`` if one was given and
        raises MessageNotFoundError otherwise.
        """
        current: Any = self._catalogue
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                current = None
                break
            current = current[part]
        if not isinstance(current, str):
            if default is _MISSING:
                raise MessageNotFoundError(key)
            return default
        return current.format(*args) if args else current

    def has(self, key: str) -> bool:
        return self.get(key, default=None) is not None


def _read_catalogue(file_path: pathlib.Path) -> dict[str, Any]:
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigNotFoundError(str(file_path), cause=exc) from exc

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid message file {file_path}: {exc}", cause=exc) from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Message file must contain a mapping: {file_path}")
    return data


def _deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged
