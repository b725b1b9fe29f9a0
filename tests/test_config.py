"""Tests for configuration loading behavior."""

from pathlib import Path

from postlist.config import get_settings, reset_settings
from postlist.config.loader import CONFIG_FILENAME, get_config_paths, init_local_config
from postlist.config.settings import load_settings


def _write_config(directory: Path, content: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / CONFIG_FILENAME
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults_without_any_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    settings = load_settings()

    assert settings.contents_dir == "contents"
    assert settings.contents_path == Path.cwd() / "contents"
    assert settings.extension == ".md"
    assert settings.on_invalid == "fail"
    assert settings.required_fields == ["title", "slug"]
    assert settings.config_paths.config_file is None


def test_local_config_file_overrides_user_config(tmp_path, monkeypatch):
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    monkeypatch.chdir(project_dir)

    local = _write_config(project_dir / ".postlist", "contents_dir: posts\n")
    _write_config(tmp_path / "home" / ".config" / "postlist", "contents_dir: user-posts\n")

    paths = get_config_paths()
    assert paths.config_file == local

    settings = load_settings()
    assert settings.contents_dir == "posts"
    assert settings.contents_path == Path.cwd() / "posts"


def test_user_config_used_when_no_local_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_config(
        tmp_path / "home" / ".config" / "postlist",
        "on_invalid: skip\nrequired_fields: [slug]\n",
    )

    settings = load_settings()

    assert settings.on_invalid == "skip"
    assert settings.required_fields == ["slug"]


def test_env_file_is_loaded_and_overrides_config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    local_dir = tmp_path / ".postlist"
    _write_config(local_dir, "contents_dir: from-yaml\non_invalid: fail\n")
    (local_dir / ".env").write_text(
        "POSTLIST_CONTENTS_DIR=from-env\nPOSTLIST_ON_INVALID=skip\n", encoding="utf-8"
    )

    settings = load_settings()

    assert settings.contents_dir == "from-env"
    assert settings.on_invalid == "skip"


def test_required_fields_from_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("POSTLIST_REQUIRED_FIELDS", "title, slug ,, date")

    settings = load_settings()

    assert settings.required_fields == ["title", "slug", "date"]


def test_unknown_policy_falls_back_to_fail(tmp_path, monkeypatch, caplog):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("POSTLIST_ON_INVALID", "ignore")

    settings = load_settings()

    assert settings.on_invalid == "fail"
    assert "Unknown on_invalid policy" in caplog.text


def test_malformed_config_file_is_ignored(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_config(tmp_path / ".postlist", "- just\n- a list\n")

    settings = load_settings()

    assert settings.contents_dir == "contents"


def test_absolute_contents_dir_is_not_rebased(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "elsewhere"
    monkeypatch.setenv("POSTLIST_CONTENTS_DIR", str(target))

    settings = load_settings()

    assert settings.contents_path == target


def test_get_settings_is_cached_until_reset(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    first = get_settings()
    assert get_settings() is first

    reset_settings()
    assert get_settings() is not first


def test_init_local_config_creates_templates(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert init_local_config(tmp_path) is True

    config_dir = tmp_path / ".postlist"
    assert (config_dir / ".env").exists()
    assert (config_dir / CONFIG_FILENAME).exists()

    settings = load_settings()
    assert settings.contents_dir == "contents"
    assert settings.on_invalid == "fail"
    assert settings.required_fields == ["title", "slug"]


def test_init_local_config_refuses_to_overwrite(tmp_path, capsys):
    (tmp_path / ".postlist").mkdir()

    assert init_local_config(tmp_path) is False
    assert "already exists" in capsys.readouterr().out


def test_blank_required_fields_env_falls_back_like_contents_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("POSTLIST_REQUIRED_FIELDS", "   ")
    monkeypatch.setenv("POSTLIST_CONTENTS_DIR", "  ")

    settings = load_settings()

    assert settings.required_fields == ["title", "slug"]
    assert settings.contents_dir == "contents"


def test_blank_required_fields_env_does_not_hide_config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_config(tmp_path / ".postlist", "required_fields: [slug]\n")
    monkeypatch.setenv("POSTLIST_REQUIRED_FIELDS", "")

    settings = load_settings()

    assert settings.required_fields == ["slug"]
