"""CLI command modules."""

from . import config_cmd

__all__ = ["config_cmd"]
