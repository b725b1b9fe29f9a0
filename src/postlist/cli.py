#!/usr/bin/env python3
"""
postlist CLI entry point.

Usage:
    postlist                  # List posts in the configured contents directory
    postlist --json           # Print records as the renderer receives them
    postlist --contents DIR   # Load posts from DIR
    postlist --skip-invalid   # Skip files with malformed front-matter
    postlist --init           # Initialize local config
    postlist --config         # Show configuration and settings
"""

import argparse
import logging
import sys
from pathlib import Path

from postlist.config import Settings, init_local_config, load_settings
from postlist.content import FrontMatterError, PostLoader
from postlist.content.loader import ON_INVALID_SKIP

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="postlist",
        description="postlist - load blog post metadata from markdown front-matter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--init",
        action="store_true",
        help="Initialize local configuration in .postlist/",
    )

    parser.add_argument(
        "-p",
        "--path",
        type=str,
        help="Project root the contents directory is resolved against (default: current directory)",
    )

    parser.add_argument(
        "-c",
        "--contents",
        type=str,
        metavar="DIR",
        help="Directory holding the markdown posts (default: contents)",
    )

    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Skip files with malformed front-matter instead of failing",
    )

    # Output
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print records as JSON",
    )

    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print plain 'slug - title' lines instead of a table",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    # Info commands
    parser.add_argument(
        "--config",
        action="store_true",
        help="Show configuration locations and exit",
    )

    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version and exit",
    )

    return parser.parse_args(argv)


def apply_args_to_settings(args: argparse.Namespace, settings: Settings) -> Settings:
    """Apply command line arguments to settings."""
    if getattr(args, "verbose", False):
        settings.verbose = True

    path_arg = getattr(args, "path", None)
    if path_arg is not None:
        settings.base_dir = Path(path_arg).resolve()

    contents_arg = getattr(args, "contents", None)
    if contents_arg is not None:
        settings.contents_dir = contents_arg

    if getattr(args, "skip_invalid", False):
        settings.on_invalid = ON_INVALID_SKIP

    return settings


def configure_logging(verbose: bool) -> None:
    """Configure logging for the command line run."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO if verbose else logging.WARNING,
    )


def show_version() -> None:
    """Show version information."""
    from postlist import __version__

    print(f"postlist version {__version__}")


def run_list(settings: Settings, as_json: bool = False, plain: bool = False) -> int:
    """Load posts and print them. Returns the process exit code."""
    from postlist.display import display_posts, posts_to_json

    loader = PostLoader(
        settings.contents_path,
        extension=settings.extension,
        on_invalid=settings.on_invalid,
        required_fields=settings.required_fields,
    )

    try:
        posts = loader.load()
    except FrontMatterError as e:
        logger.info("Load aborted by front-matter error", exc_info=True)
        print(f"Error: malformed front-matter in {e.path}: {e.reason}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        logger.info("Load aborted by I/O error", exc_info=True)
        print(f"Error: cannot read posts from {settings.contents_path}: {e}", file=sys.stderr)
        return 1

    if as_json:
        print(posts_to_json(posts))
    else:
        display_posts(posts, use_rich=not plain)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    if args.version:
        show_version()
        return 0

    if args.init:
        target = Path(args.path).resolve() if args.path else None
        return 0 if init_local_config(target) else 1

    settings = load_settings()
    settings = apply_args_to_settings(args, settings)
    configure_logging(settings.verbose)

    if args.config:
        from postlist.display import display_config

        display_config(settings, use_rich=not args.plain)
        return 0

    return run_list(settings, as_json=args.json, plain=args.plain)


if __name__ == "__main__":
    sys.exit(main())
