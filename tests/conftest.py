import datetime
import textwrap

from app.models.post import Post
from app.settings import Settings


def make_post(id: str = "post.md", **fields) -> Post:
    """
    Post factory with sensible defaults: published, dated and titled.
    """
    defaults = {
        "title": f"Post {id}",
        "date": datetime.date(2021, 1, 1),
        "published": True,
    }
    defaults.update(fields)
    return Post(id=id, **defaults)


def make_routed_post(id: str = "post.md", **fields) -> Post:
    """
    Like make_post but with a path already assigned.
    """
    fields.setdefault("path", "/" + id.removesuffix(".md"))
    return make_post(id, **fields)


def make_settings(**overrides) -> Settings:
    defaults = {
        "SITE_URL": "https://example.dev",
        "SITE_TITLE": "Example Blog",
        "SITE_DESCRIPTION": "Example description",
        "CONTENT_DIR": "content/blog",
        "PAGE_SIZE": 10,
    }
    defaults.update(overrides)
    return Settings(**defaults)


class FakeRepo:
    """
    Minimal in-memory repo stand-in used in service tests.
    """

    def __init__(self, docs: dict[str, str]):
        self.docs = docs
        self.reads = []

    def list_post_files(self):
        return sorted(self.docs)

    def read(self, path):
        self.reads.append(path)
        return path, textwrap.dedent(self.docs[path]).lstrip()


class FakeParser:
    """
    Parser stand-in returning preset posts by doc id.
    """

    def __init__(self, posts_by_id: dict[str, Post]):
        self.posts_by_id = posts_by_id

    def parse(self, doc_id: str, text: str) -> Post:
        return self.posts_by_id[doc_id]
