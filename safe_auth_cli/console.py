"""Shared Rich console instances for CLI output."""

from rich.console import Console

console = Console()

# Diagnostics and warnings go to stderr so stdout stays machine-readable
err_console = Console(stderr=True)

__all__ = ["console", "err_console"]
