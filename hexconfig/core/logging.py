"""Centralized logging configuration for hexconfig using Loguru.

Examples
--------
Basic usage:

>>> from hexconfig.core.logging import get_logger
>>> logger = get_logger(__name__)
>>> logger.debug("Loaded {count} entries", count=3)

Configure logging globally::

    from hexconfig.core.logging import configure_logging
    configure_logging(level="DEBUG", format="rich")
"""

import os
import sys
from contextlib import suppress
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from loguru import Logger

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["console", "json", "structured", "rich"]

DEFAULT_LEVEL = "WARNING"
DEFAULT_FORMAT = "structured"

_CURRENT_CONFIG: dict | None = None
_HANDLER_IDS: list[int] = []
_DEFAULT_HANDLER_REMOVED = False


def configure_logging(
    level: LogLevel = DEFAULT_LEVEL,
    format: LogFormat = DEFAULT_FORMAT,
    use_color: bool = True,
    force_reconfigure: bool = False,
) -> None:
    """Configure global logging for hexconfig.

    Idempotent: calling it again with the same settings leaves the handlers
    untouched. All formats write to stderr so command output on stdout stays
    clean.

    Parameters
    ----------
    level : LogLevel, default="WARNING"
        Minimum log level to output
    format : LogFormat, default="structured"
        Output format:
        - "console": plain single-line records
        - "json": serialized records for log aggregation
        - "structured": colored records with module and line
        - "rich": Rich console handler
    use_color : bool, default=True
        Use ANSI color codes in structured format (auto-disabled for non-TTY)
    force_reconfigure : bool, default=False
        Reconfigure even if the settings did not change
    """
    global _CURRENT_CONFIG, _DEFAULT_HANDLER_REMOVED

    current_config = {"level": level, "format": format, "use_color": use_color}
    if not force_reconfigure and current_config == _CURRENT_CONFIG:
        return

    # Loguru ships a DEBUG handler on stderr; drop it once so a CLI run stays quiet
    if not _DEFAULT_HANDLER_REMOVED:
        with suppress(ValueError):
            logger.remove(0)
        _DEFAULT_HANDLER_REMOVED = True

    for handler_id in _HANDLER_IDS:
        with suppress(ValueError):
            logger.remove(handler_id)
    _HANDLER_IDS.clear()

    if format == "rich":
        rich_handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            markup=False,
            show_path=True,
        )
        handler_id = logger.add(sink=rich_handler, level=level, format="{message}")
    elif format == "json":
        handler_id = logger.add(sink=sys.stderr, level=level, serialize=True)
    elif format == "structured":
        colorize = use_color and sys.stderr.isatty()
        color_level = "<level>{level: <8}</level>" if colorize else "{level: <8}"
        structured_format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> "
            f"[{color_level}]"
            "<cyan>{name}:{function}:{line}</cyan> | <level>{message}</level>"
        )
        handler_id = logger.add(
            sink=sys.stderr, level=level, format=structured_format, colorize=colorize
        )
    else:  # console
        handler_id = logger.add(
            sink=sys.stderr,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} {level: <8} | {name} | {message}",
            colorize=False,
        )
    _HANDLER_IDS.append(handler_id)

    _CURRENT_CONFIG = current_config


@lru_cache(maxsize=64)
def get_logger(name: str) -> "Logger":
    """Get a logger bound to ``name`` (cached).

    If configure_logging() has not run yet, logging is initialized from the
    ``HEX_LOG_LEVEL`` and ``HEX_LOG_FORMAT`` environment variables.
    """
    _ensure_configured()
    return logger.bind(module=name)


def _ensure_configured() -> None:
    if _CURRENT_CONFIG is None:
        level = os.getenv("HEX_LOG_LEVEL", DEFAULT_LEVEL).upper()
        format_type = os.getenv("HEX_LOG_FORMAT", DEFAULT_FORMAT).lower()
        configure_logging(level=level, format=format_type)  # type: ignore[arg-type]
