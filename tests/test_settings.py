from pathlib import Path

import pytest
from pydantic import ValidationError

from app.settings import Settings, choose_env_file, default_feeds


def test_site_url_trailing_slash_is_stripped():
    s = Settings(SITE_URL="https://example.dev/")
    assert s.SITE_URL == "https://example.dev"


def test_page_size_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(PAGE_SIZE=0)


def test_feed_limit_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(FEED_LIMIT=0)


def test_site_url_defaults_to_public_site_not_api(monkeypatch):
    monkeypatch.delenv("SITE_URL", raising=False)
    s = Settings(_env_file=None)
    assert s.SITE_URL == "http://localhost:3000"


def test_default_feeds_match_published_rss_paths():
    feeds = default_feeds()
    assert [(f.name, f.output) for f in feeds] == [
        ("all", "/rss/all.xml"),
        ("jvm", "/rss/jvm.xml"),
        ("corda", "/rss/corda.xml"),
    ]
    assert feeds[0].tag_filter == []
    assert feeds[1].tag_filter == ["java", "spring", "kotlin"]


def test_feeds_can_be_configured_from_json_env(monkeypatch):
    monkeypatch.setenv(
        "FEEDS", '[{"name": "python", "output": "/rss/python.xml", "tag_filter": ["python"]}]'
    )
    s = Settings()
    assert len(s.FEEDS) == 1
    assert s.FEEDS[0].name == "python"
    assert s.FEEDS[0].tag_filter == ["python"]


def test_paths_are_exposed_as_path_objects():
    s = Settings(CONTENT_DIR="content/blog", OUTPUT_DIR="public")
    assert s.content_path == Path("content/blog")
    assert s.output_path == Path("public")


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
