"""Entry point for running hexconfig as a module: python -m hexconfig."""

from __future__ import annotations


def main() -> None:
    """Main entry point for module execution."""
    from hexconfig.cli.main import main as cli_main

    cli_main()


if __name__ == "__main__":
    main()
