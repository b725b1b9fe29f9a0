"""Settings management for postlist."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from postlist.content.loader import MARKDOWN_EXTENSION, ON_INVALID_FAIL, ON_INVALID_POLICIES
from postlist.content.post import DEFAULT_REQUIRED_FIELDS

from .loader import ConfigPaths, get_config_paths

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Loader settings read from environment and config files."""

    # Paths
    base_dir: Path = field(default_factory=Path.cwd)
    config_paths: Optional[ConfigPaths] = None
    contents_dir: str = "contents"

    # Loader behavior
    extension: str = MARKDOWN_EXTENSION
    on_invalid: str = ON_INVALID_FAIL
    required_fields: list[str] = field(default_factory=lambda: list(DEFAULT_REQUIRED_FIELDS))

    # Runtime
    verbose: bool = False

    @property
    def contents_path(self) -> Path:
        """Contents directory, resolved against base_dir when relative."""
        path = Path(self.contents_dir).expanduser()
        if not path.is_absolute():
            path = self.base_dir / path
        return path


def load_config_file(config_file: Optional[Path]) -> dict[str, Any]:
    """Load postlist.yaml, returning an empty dict when absent or unreadable."""
    if not config_file or not config_file.exists():
        return {}

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Ignoring unreadable config file {config_file}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file {config_file}: expected a mapping")
        return {}
    return data


def load_settings() -> Settings:
    """
    Load settings from all configuration sources.

    Priority (highest to lowest):
    1. Environment variables (including from .env files)
    2. Local .postlist/ directory
    3. User ~/.config/postlist/ directory
    4. Built-in defaults
    """
    paths = get_config_paths()

    if paths.env_file:
        load_dotenv(paths.env_file, override=True)

    file_config = load_config_file(paths.config_file)
    defaults = Settings()

    contents_dir = os.getenv("POSTLIST_CONTENTS_DIR", "").strip() or str(
        file_config.get("contents_dir") or defaults.contents_dir
    )

    extension = str(file_config.get("extension") or "").strip() or defaults.extension

    on_invalid = (
        os.getenv("POSTLIST_ON_INVALID", "").strip().lower()
        or str(file_config.get("on_invalid") or defaults.on_invalid).strip().lower()
    )
    if on_invalid not in ON_INVALID_POLICIES:
        logger.warning(f"Unknown on_invalid policy {on_invalid!r}, using {defaults.on_invalid!r}")
        on_invalid = defaults.on_invalid

    return Settings(
        base_dir=Path.cwd(),
        config_paths=paths,
        contents_dir=contents_dir,
        extension=extension,
        on_invalid=on_invalid,
        required_fields=_load_required_fields(file_config, defaults.required_fields),
    )


def _load_required_fields(file_config: dict[str, Any], default: list[str]) -> list[str]:
    """Read required fields from ``POSTLIST_REQUIRED_FIELDS`` or the config file."""
    raw = os.getenv("POSTLIST_REQUIRED_FIELDS", "").strip()
    if raw:
        return [name.strip() for name in raw.split(",") if name.strip()]

    configured = file_config.get("required_fields")
    if configured is None:
        return default
    if not isinstance(configured, list):
        logger.warning("required_fields must be a list, using defaults")
        return default
    return [str(name).strip() for name in configured if str(name).strip()]


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Reset global settings (useful for testing or directory change)."""
    global _settings
    _settings = None
