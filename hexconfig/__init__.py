"""hexconfig - read, set and delete local Hex configuration."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("hexconfig")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"  # Fallback for source checkouts

from hexconfig.core.config import ConfigCommand, FileConfigStore

__all__ = ["ConfigCommand", "FileConfigStore", "__version__"]
