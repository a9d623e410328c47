"""Config command handler: list, read, set and delete persisted entries.

The handler only touches the persisted layer. Environment overrides such as
``HEX_API_URL`` are resolved elsewhere at use time and never consulted here.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from hexconfig.core.config.keys import RESERVED_PREFIX, VALID_KEYS, is_reserved
from hexconfig.core.config.render import pretty_value
from hexconfig.core.config.store import ConfigPairs, ConfigStore
from hexconfig.core.exceptions import (
    InvalidKeyNameError,
    InvalidWriteKeyError,
    KeyNotFoundError,
    UsageError,
)
from hexconfig.core.logging import get_logger

logger = get_logger(__name__)

USAGE = "hexconfig config [--delete] KEY [VALUE]"


def visible_entries(snapshot: ConfigPairs) -> ConfigPairs:
    """Drop internal entries (``$``-prefixed keys and ``encrypted_key``)."""
    return [(key, value) for key, value in snapshot if not is_reserved(key)]


class ConfigCommand:
    """Dispatches one config invocation against a store.

    Every method returns the lines to print; failures raise a
    HexConfigError subclass before any store mutation happens.
    """

    def __init__(self, store: ConfigStore) -> None:
        self.store = store

    def run(self, args: Sequence[str], *, delete: bool = False) -> list[str]:
        """Run the mode selected by the positional ``args`` and ``delete`` flag.

        Parameters
        ----------
        args : Sequence[str]
            Positional arguments, ``[]``, ``[key]`` or ``[key, value]``
        delete : bool, default=False
            Remove ``key`` instead of reading it

        Returns
        -------
        list[str]
            Output lines, empty for set and delete

        Raises
        ------
        InvalidKeyNameError
            If the key starts with ``$``
        UsageError
            On any other argument shape
        """
        if not args:
            return self.list_entries()

        if args[0].startswith(RESERVED_PREFIX):
            logger.info("Rejected reserved key name {key!r}", key=args[0])
            raise InvalidKeyNameError(args[0])

        match list(args):
            case [key] if delete:
                self.delete(key)
                return []
            case [key]:
                return [self.read(key)]
            case [key, value] if not delete:
                self.set(key, value)
                return []
            case _:
                raise UsageError(USAGE)

    def list_entries(self) -> list[str]:
        return [f"{key}: {pretty_value(value)}" for key, value in self._config()]

    def read(self, key: str) -> str:
        for name, value in self._config():
            if name == key:
                return pretty_value(value)
        raise KeyNotFoundError(key)

    def delete(self, key: str) -> None:
        logger.debug("Removing config key {key}", key=key)
        self.store.remove([key])

    def set(self, key: str, value: Any) -> None:
        if key not in VALID_KEYS:
            logger.info("Rejected write to unknown key {key!r}", key=key)
            raise InvalidWriteKeyError(key)
        logger.debug("Setting config key {key}", key=key)
        self.store.update([(key, value)])

    def _config(self) -> ConfigPairs:
        snapshot = self.store.read()
        logger.debug("Read config snapshot with {count} entries", count=len(snapshot))
        return visible_entries(snapshot)
