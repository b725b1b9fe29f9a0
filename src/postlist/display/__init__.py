"""Display module for postlist.

This module provides console output for loaded posts and configuration.
"""

from postlist.display.console import get_console, reset_console
from postlist.display.listing import display_config, display_posts, posts_to_json

__all__ = [
    "get_console",
    "reset_console",
    "display_config",
    "display_posts",
    "posts_to_json",
]
