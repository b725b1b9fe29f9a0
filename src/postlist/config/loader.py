"""Configuration file discovery and initialization."""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

LOCAL_DIR_NAME = ".postlist"
CONFIG_FILENAME = "postlist.yaml"


@dataclass
class ConfigPaths:
    """Discovered configuration paths."""

    # Directories
    local_dir: Optional[Path] = None  # .postlist/ in current directory
    user_dir: Optional[Path] = None  # ~/.config/postlist/

    # Specific files (resolved from directories)
    env_file: Optional[Path] = None
    config_file: Optional[Path] = None

    def __post_init__(self):
        """Resolve file paths from directories."""
        # Priority: local > user
        self.env_file = self._find_file(".env")
        self.config_file = self._find_file(CONFIG_FILENAME)

    def _find_file(self, filename: str) -> Optional[Path]:
        """Find a config file in priority order."""
        for directory in (self.local_dir, self.user_dir):
            if directory:
                candidate = directory / filename
                if candidate.exists():
                    return candidate
        return None


def get_config_paths() -> ConfigPaths:
    """
    Discover configuration paths.

    Priority order (highest to lowest):
    1. .postlist/ in current directory
    2. ~/.config/postlist/
    """
    local_dir = Path.cwd() / LOCAL_DIR_NAME
    local_dir = local_dir if local_dir.exists() else None

    user_dir = Path.home() / ".config" / "postlist"
    user_dir = user_dir if user_dir.exists() else None

    return ConfigPaths(local_dir=local_dir, user_dir=user_dir)


def init_local_config(target_dir: Optional[Path] = None) -> bool:
    """
    Create a .postlist/ directory with template configuration files.

    Args:
        target_dir: Directory to initialize (default: current directory)

    Returns:
        True if successful
    """
    if target_dir is None:
        target_dir = Path.cwd()

    config_dir = target_dir / LOCAL_DIR_NAME

    if config_dir.exists():
        print(f"Configuration already exists at {config_dir}")
        print("Delete it first if you want to reinitialize.")
        return False

    print(f"Initializing postlist configuration in {config_dir}")

    try:
        config_dir.mkdir(parents=True)

        env_content = """\
# postlist local overrides
# POSTLIST_CONTENTS_DIR=contents
# POSTLIST_ON_INVALID=fail
# POSTLIST_REQUIRED_FIELDS=title,slug
"""
        (config_dir / ".env").write_text(env_content)

        config_content = """\
# Directory holding the markdown posts (relative to the project root)
contents_dir: contents

# File name suffix that marks a post
extension: .md

# Malformed front-matter: "fail" aborts the whole load, "skip" logs and excludes the file
on_invalid: fail

# Front-matter fields every post must define
required_fields:
  - title
  - slug
"""
        (config_dir / CONFIG_FILENAME).write_text(config_content)

        print("\nCreated configuration files:")
        print(f"  {config_dir}/.env            - Environment overrides")
        print(f"  {config_dir}/{CONFIG_FILENAME}   - Loader settings")
        return True

    except OSError as e:
        print(f"Error creating configuration: {e}")
        if config_dir.exists():
            shutil.rmtree(config_dir)
        return False
