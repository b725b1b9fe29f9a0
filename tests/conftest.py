"""Shared fixtures for postlist tests."""

import pytest

from postlist.config import reset_settings
from postlist.display import reset_console

POSTLIST_ENV_VARS = (
    "POSTLIST_CONTENTS_DIR",
    "POSTLIST_ON_INVALID",
    "POSTLIST_REQUIRED_FIELDS",
)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep developer config and env vars out of every test."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for name in POSTLIST_ENV_VARS:
        # setenv first so that values written by load_dotenv are undone too
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    reset_settings()
    reset_console()
    yield
    reset_settings()
    reset_console()


@pytest.fixture
def write_post():
    """Return a helper that writes a markdown post with a front-matter block."""

    def _write(directory, name, title="Hello", slug="hello", extra=""):
        path = directory / name
        path.write_text(
            f'---\ntitle: "{title}"\nslug: "{slug}"\n{extra}---\n\n# {title}\n\nBody text.\n',
            encoding="utf-8",
        )
        return path

    return _write
