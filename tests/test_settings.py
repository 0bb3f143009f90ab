from pathlib import Path

from somedave.settings import Settings, choose_env_file


def test_settings_defaults():
    s = Settings()
    assert s.POSTS_DIR == Path("posts")
    assert s.RECENT_POSTS_LIMIT == 5


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("POSTS_DIR", "/srv/blog/Posts")
    monkeypatch.setenv("RECENT_POSTS_LIMIT", "10")

    s = Settings()

    assert s.POSTS_DIR == Path("/srv/blog/Posts")
    assert s.RECENT_POSTS_LIMIT == 10


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
