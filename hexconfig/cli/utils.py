"""CLI helper utilities for hexconfig commands."""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from hexconfig.core.exceptions import HexConfigError
from hexconfig.core.logging import get_logger

logger = get_logger(__name__)

err_console = Console(stderr=True)


def exit_with_error(error: HexConfigError) -> NoReturn:
    """Print ``error`` as a single red line on stderr and exit with status 1."""
    logger.debug("Command failed: {error_type}", error_type=type(error).__name__)
    err_console.print(f"[red]{escape(str(error))}[/red]", soft_wrap=True)
    raise typer.Exit(1) from None


def echo_lines(lines: list[str]) -> None:
    """Write command output to stdout, one entry per line."""
    for line in lines:
        typer.echo(line)
