"""Exception hierarchy for hexconfig.

All errors raised by the config command and its store inherit from
HexConfigError, so the CLI can turn any of them into a one-line diagnostic.
"""

from __future__ import annotations

from pathlib import Path

# ============================================================================
# Base Exception
# ============================================================================


class HexConfigError(Exception):
    """Base exception for all hexconfig errors.

    Catch this to handle every failure of the config command.
    """

    pass


# ============================================================================
# Key Errors
# ============================================================================


class InvalidKeyNameError(HexConfigError):
    """Raised when a key argument starts with the reserved ``$`` sentinel.

    Examples
    --------
    Example usage::

        raise InvalidKeyNameError("$repos")
    """

    def __init__(self, key: str) -> None:
        super().__init__("Invalid key name")
        self.key = key


class KeyNotFoundError(HexConfigError):
    """Raised when a read targets a key missing from the visible config."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Config does not contain key {key}")
        self.key = key


class InvalidWriteKeyError(HexConfigError):
    """Raised when a set targets a key outside the writable key set.

    Examples
    --------
    Example usage::

        raise InvalidWriteKeyError("not_a_real_key")
    """

    def __init__(self, key: str) -> None:
        super().__init__(f"Invalid key {key}")
        self.key = key


# ============================================================================
# Usage & Store Errors
# ============================================================================


class UsageError(HexConfigError):
    """Raised when the command receives an unsupported argument shape."""

    def __init__(self, usage: str) -> None:
        super().__init__(f"Invalid arguments, expected: {usage}")
        self.usage = usage


class ConfigStoreError(HexConfigError):
    """Raised when the persisted config file cannot be interpreted.

    Examples
    --------
    Example usage::

        raise ConfigStoreError(Path("~/.hex/hex.config"), "expected a mapping")
    """

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize store error.

        Args
        ----
            path: Location of the offending config file
            reason: Explanation of what's wrong
        """
        super().__init__(f"Config file '{path}' is unusable: {reason}")
        self.path = path
        self.reason = reason


__all__ = [
    "HexConfigError",
    "InvalidKeyNameError",
    "KeyNotFoundError",
    "InvalidWriteKeyError",
    "UsageError",
    "ConfigStoreError",
]
