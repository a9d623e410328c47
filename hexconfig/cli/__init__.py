"""Command-line interface for hexconfig."""
