"""Human-readable rendering of stored config values."""

from __future__ import annotations

import json
from typing import Any

INDENT = "  "


def pretty_value(value: Any, width: int = 80) -> str:
    """Render a config value for display.

    Scalars render on one line (strings double-quoted, booleans as
    ``true``/``false``, ``None`` as ``nil``). Lists and mappings stay on one
    line while they fit in ``width`` and otherwise break one element per line.

    Examples
    --------
    >>> pretty_value("https://hex.pm/api")
    '"https://hex.pm/api"'
    >>> pretty_value(True)
    'true'
    >>> pretty_value({"a": [1, 2]})
    '{"a": [1, 2]}'
    """
    return _render(value, width, 0)


def _render(value: Any, width: int, depth: int) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case None:
            return "nil"
        case int() | float():
            return str(value)
        case str():
            return json.dumps(value, ensure_ascii=False)
        case list() | tuple():
            items = [_render(item, width, depth + 1) for item in value]
            return _join(items, "[", "]", width, depth)
        case dict():
            items = [
                f"{_render(k, width, depth + 1)}: {_render(v, width, depth + 1)}"
                for k, v in value.items()
            ]
            return _join(items, "{", "}", width, depth)
        case _:
            return repr(value)


def _join(items: list[str], open_: str, close: str, width: int, depth: int) -> str:
    flat = f"{open_}{', '.join(items)}{close}"
    if not items or "\n" not in flat and len(INDENT * depth) + len(flat) <= width:
        return flat

    inner = INDENT * (depth + 1)
    lines = [f"{inner}{item}," for item in items]
    lines[-1] = lines[-1].rstrip(",")
    return "\n".join([open_, *lines, f"{INDENT * depth}{close}"])
