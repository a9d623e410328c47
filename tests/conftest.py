"""Configuration file for pytest containing fixtures and configuration.

This module provides fixtures that can be used across multiple test files:
- memory_store: An in-memory config store that records every call
- hex_home: A temporary HEX_HOME directory for file-backed tests
"""

from pathlib import Path
from typing import Any

import pytest


class RecordingConfigStore:
    """In-memory ConfigStore that counts collaborator calls."""

    def __init__(self, entries: list[tuple[str, Any]] | None = None) -> None:
        self.data: dict[str, Any] = dict(entries or [])
        self.calls: list[str] = []

    def read(self) -> list[tuple[str, Any]]:
        self.calls.append("read")
        return list(self.data.items())

    def update(self, pairs) -> None:
        self.calls.append("update")
        for key, value in pairs:
            self.data[key] = value

    def remove(self, keys) -> None:
        self.calls.append("remove")
        for key in keys:
            self.data.pop(key, None)


@pytest.fixture
def memory_store() -> RecordingConfigStore:
    """Fixture providing a store seeded like a typical user config."""
    return RecordingConfigStore([
        ("api_url", "https://hex.pm/api"),
        ("encrypted_key", "abc"),
    ])


@pytest.fixture
def hex_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Fixture pointing HEX_HOME at a fresh temporary directory."""
    home = tmp_path / "hex_home"
    monkeypatch.setenv("HEX_HOME", str(home))
    return home


@pytest.fixture
def make_store():
    """Fixture returning a factory for stores seeded with custom entries."""
    return RecordingConfigStore
