from pathlib import Path

import pytest
from pydantic import ValidationError

from mdblog.settings import Settings, choose_env_file


def test_paths_derive_from_directories():
    s = Settings(POSTS_DIR="content/posts", PUBLIC_DIR="static", UPLOADS_SUBDIR="img")
    assert s.posts_path == Path("content/posts")
    assert s.public_path == Path("static")
    assert s.uploads_path == Path("static/img")
    assert s.uploads_url == "/public/img"


def test_defaults_match_original_layout():
    s = Settings()
    assert s.POSTS_DIR == "posts"
    assert s.uploads_path == Path("public/pictures")
    assert s.CODE_HIGHLIGHT_STYLE == "dracula"


def test_slug_collision_rejects_unknown_policy():
    with pytest.raises(ValidationError):
        Settings(SLUG_COLLISION="rename")


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("POSTS_DIR", "/srv/blog/posts")
    monkeypatch.setenv("SLUG_COLLISION", "reject")
    s = Settings()
    assert s.posts_path == Path("/srv/blog/posts")
    assert s.SLUG_COLLISION == "reject"


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
