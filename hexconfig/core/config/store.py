"""YAML-backed persistent config store.

The store lives at ``$HEX_HOME/hex.config`` (``~/.hex/hex.config`` when
``HEX_HOME`` is unset). Entries keep their insertion order on disk and in
every snapshot.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Protocol

import yaml

from hexconfig.core.exceptions import ConfigStoreError
from hexconfig.core.logging import get_logger

logger = get_logger(__name__)

HOME_ENV_VAR = "HEX_HOME"
DEFAULT_HOME = Path("~/.hex")
CONFIG_FILENAME = "hex.config"

ConfigPairs = list[tuple[str, Any]]


def hex_home() -> Path:
    """Resolve the Hex home directory honoring ``HEX_HOME``."""
    env_path = os.getenv(HOME_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_HOME.expanduser()


class ConfigStore(Protocol):
    """Persisted key-value layer the config command operates on."""

    def read(self) -> ConfigPairs:
        """Return every entry, internal ones included, in store order."""
        ...

    def update(self, pairs: Iterable[tuple[str, Any]]) -> None:
        """Insert or overwrite the given entries and persist immediately."""
        ...

    def remove(self, keys: Iterable[str]) -> None:
        """Delete the given keys if present and persist immediately."""
        ...


class FileConfigStore:
    """ConfigStore persisted as a YAML mapping."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path if path is not None else hex_home() / CONFIG_FILENAME

    def read(self) -> ConfigPairs:
        return list(self._load().items())

    def update(self, pairs: Iterable[tuple[str, Any]]) -> None:
        data = self._load()
        updated = []
        for key, value in pairs:
            data[key] = value
            updated.append(key)
        self._save(data)
        logger.debug("Updated {keys} in {path}", keys=updated, path=self.path)

    def remove(self, keys: Iterable[str]) -> None:
        data = self._load()
        removed = []
        for key in keys:
            if key in data:
                del data[key]
                removed.append(key)
        if not removed:
            logger.debug("Nothing to remove from {path}", path=self.path)
            return
        self._save(data)
        logger.debug("Removed {keys} from {path}", keys=removed, path=self.path)

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            logger.debug("No config file at {path}", path=self.path)
            return {}

        try:
            with self.path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise ConfigStoreError(self.path, str(e)) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigStoreError(self.path, f"expected a mapping, got {type(data).__name__}")
        for key in data:
            if not isinstance(key, str):
                raise ConfigStoreError(
                    self.path, f"keys must be strings, got {type(key).__name__} {key!r}"
                )

        logger.debug("Loaded {count} entries from {path}", count=len(data), path=self.path)
        return data

    def _save(self, data: dict[str, Any]) -> None:
        temp_path: Path | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as temp_file:
                temp_path = Path(temp_file.name)
                yaml.safe_dump(data, temp_file, sort_keys=False, allow_unicode=True)
            os.replace(temp_path, self.path)
        except OSError as e:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise ConfigStoreError(self.path, str(e)) from e
