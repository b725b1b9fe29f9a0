"""
Display functions for the postlist CLI.

Each function supports Rich formatting (interactive) and plain text
output (piping).
"""

import json
import re
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Optional, Sequence

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console
    from postlist.config import Settings
    from postlist.content import PostRecord


def _strip_rich_markup(text: str) -> str:
    """Strip only Rich markup tags used by this module."""
    return re.sub(r"\[/?(?:bold|cyan|red|green|dim)\]", "", text)


def _json_default(value: Any) -> str:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def posts_to_json(posts: Sequence["PostRecord"], indent: Optional[int] = 2) -> str:
    """Serialize records exactly as the renderer receives them."""
    return json.dumps(
        [post.to_dict() for post in posts],
        default=_json_default,
        ensure_ascii=False,
        indent=indent,
    )


def display_posts(
    posts: Sequence["PostRecord"],
    console: Optional["Console"] = None,
    use_rich: bool = True,
) -> None:
    """
    Display loaded posts.

    Args:
        posts: Records returned by the loader, in load order
        console: Rich console for formatted output (optional)
        use_rich: Whether to use Rich formatting (False for plain text)
    """
    if not use_rich:
        for post in posts:
            print(f"{post.slug} - {post.title}")
        return

    if console is None:
        from postlist.display.console import get_console

        console = get_console()

    if not posts:
        console.print("[dim]No posts found[/dim]")
        return

    table = Table(title=f"Posts ({len(posts)})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("slug", style="cyan")
    table.add_column("title")
    table.add_column("date")
    table.add_column("id", style="dim")

    for index, post in enumerate(posts):
        post_date = _json_default(post.date) if post.date is not None else ""
        table.add_row(
            str(index),
            escape(str(post.slug)),
            escape(str(post.title)),
            escape(post_date),
            post.id,
        )

    console.print(table)


def display_config(
    settings: "Settings",
    console: Optional["Console"] = None,
    use_rich: bool = True,
) -> None:
    """Display configuration locations and loader settings."""
    if use_rich and console is None:
        from postlist.display.console import get_console

        console = get_console()

    def _print(text: str = "") -> None:
        if use_rich and console:
            console.print(text)
        else:
            print(_strip_rich_markup(text))

    def _value(value: Any) -> str:
        return escape(str(value)) if use_rich else str(value)

    paths = settings.config_paths

    _print("\n[bold]Configuration:[/bold]")
    _print("-" * 60)
    if paths is None:
        _print("  No configuration discovered")
    else:
        _print(f"  Local dir:   [cyan]{_value(paths.local_dir or '(none)')}[/cyan]")
        _print(f"  User dir:    [cyan]{_value(paths.user_dir or '(none)')}[/cyan]")
        _print(f"  .env file:   [cyan]{_value(paths.env_file or '(none)')}[/cyan]")
        _print(f"  Config file: [cyan]{_value(paths.config_file or '(none)')}[/cyan]")

    _print("\n[bold]Loader:[/bold]")
    _print(f"  Contents dir:    [cyan]{_value(settings.contents_path)}[/cyan]")
    _print(f"  Extension:       {_value(settings.extension)}")
    _print(f"  On invalid:      {settings.on_invalid}")
    _print(f"  Required fields: {_value(', '.join(settings.required_fields) or '(none)')}")
    _print()
