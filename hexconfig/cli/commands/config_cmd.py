"""Config command: reads, updates or deletes local Hex configuration."""

import typer

from hexconfig.cli.utils import echo_lines, exit_with_error
from hexconfig.core.config import CONFIG_KEYS, ConfigCommand, FileConfigStore
from hexconfig.core.exceptions import HexConfigError

CONFIG_HELP = "\n\n".join([
    "Reads, updates or deletes local Hex configuration.",
    "With no KEY, lists every entry. With KEY, prints its value. "
    "With KEY and VALUE, stores VALUE under KEY.",
    "Put -- before a VALUE that starts with a dash:",
    "[bold]hexconfig config http_timeout -- -1[/bold]",
    "[bold]Config keys[/bold]",
    *(f"• {key.help_line()}" for key in CONFIG_KEYS),
    "HEX_HOME can be set to the directory where Hex stores its configuration "
    "(Default: ~/.hex)",
])


def config(
    args: list[str] | None = typer.Argument(
        None, metavar="[KEY] [VALUE]", help="Key to read, or key and value to set"
    ),
    delete: bool = typer.Option(False, "--delete", help="Remove a specific config key"),
) -> None:
    command = ConfigCommand(FileConfigStore())
    try:
        lines = command.run(args or [], delete=delete)
    except HexConfigError as e:
        exit_with_error(e)
    echo_lines(lines)
