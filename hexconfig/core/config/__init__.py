"""Access and mutation of the persisted Hex configuration."""

from hexconfig.core.config.handler import ConfigCommand, visible_entries
from hexconfig.core.config.keys import CONFIG_KEYS, ENCRYPTED_KEY, VALID_KEYS, ConfigKey
from hexconfig.core.config.render import pretty_value
from hexconfig.core.config.store import ConfigStore, FileConfigStore, hex_home

__all__ = [
    "CONFIG_KEYS",
    "ENCRYPTED_KEY",
    "VALID_KEYS",
    "ConfigCommand",
    "ConfigKey",
    "ConfigStore",
    "FileConfigStore",
    "hex_home",
    "pretty_value",
    "visible_entries",
]
