"""hexconfig CLI - Main entrypoint."""

import typer
from rich.console import Console

from hexconfig import __version__
from hexconfig.cli.commands import config_cmd
from hexconfig.core.logging import configure_logging

LOG_LEVELS = {
    "trace": "TRACE",
    "debug": "DEBUG",
    "info": "INFO",
    "warn": "WARNING",
    "warning": "WARNING",
    "error": "ERROR",
    "critical": "CRITICAL",
}
LOG_FORMATS = ("console", "structured", "json", "rich")

# Create the main Typer app
app = typer.Typer(
    name="hexconfig",
    help="hexconfig - Manage local Hex package manager configuration.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
)

console = Console()

app.command("config", help=config_cmd.CONFIG_HELP)(config_cmd.config)


def _show_version(value: bool) -> None:
    if value:
        console.print(f"[bold blue]hexconfig[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    *,
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only log errors"),
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Enable debug logging"),
    log_level: str = typer.Option(
        "warning", "--log-level", help="Log level: debug|info|warning|error"
    ),
    log_format: str = typer.Option(
        "structured", "--log-format", help="Log format: console|structured|json|rich"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """hexconfig CLI - local Hex configuration management.

    Global flags are parsed here and stored on `ctx.obj` for subcommands.
    """
    if ctx.obj is None:
        ctx.obj = {}

    if log_level.lower() not in LOG_LEVELS:
        raise typer.BadParameter(f"unknown log level {log_level!r}", param_hint="--log-level")
    if log_format.lower() not in LOG_FORMATS:
        raise typer.BadParameter(f"unknown log format {log_format!r}", param_hint="--log-format")

    # Compute effective log level
    effective_level = LOG_LEVELS[log_level.lower()]
    if quiet:
        effective_level = "ERROR"
    elif verbose:
        effective_level = "DEBUG"

    ctx.obj.update({
        "log_level": effective_level,
        "log_format": log_format.lower(),
        "version": __version__,
    })

    configure_logging(level=effective_level, format=log_format.lower())  # type: ignore[arg-type]


def main() -> None:
    """Main CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()
