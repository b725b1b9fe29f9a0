"""Console factory.

This module provides a singleton Console instance for CLI output.
"""

from typing import Optional

from rich.console import Console

_console_instance: Optional[Console] = None


def get_console() -> Console:
    """Get the singleton Console instance."""
    global _console_instance
    if _console_instance is None:
        _console_instance = Console()
    return _console_instance


def reset_console() -> None:
    """Reset the console instance."""
    global _console_instance
    _console_instance = None
