import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app import dependencies as deps
from app.errors import SlugCollisionError
from app.routers import admin
from app.services.blog_service import build_site
from tests.conftest import make_post, make_settings


class FakeBlogService:
    def __init__(self, site=None, error=None):
        self.site = site
        self.error = error
        self.builds = 0

    def build(self):
        self.builds += 1
        if self.error:
            raise self.error
        return self.site


@pytest.fixture(autouse=True)
def clean_site():
    deps.reset_site()
    yield
    deps.reset_site()


def make_app(service):
    app = FastAPI()
    app.dependency_overrides[deps.get_blog_service] = lambda: service
    app.include_router(admin.router)
    return app


def test_rebuild_replaces_current_site():
    site = build_site([make_post("a.md", title="Alpha")], make_settings())
    service = FakeBlogService(site=site)
    client = TestClient(make_app(service))

    res = client.post("/rebuild")

    assert res.status_code == 200
    body = res.json()
    assert body["posts"] == 1
    assert body["pages"] == 1
    assert body["feeds"] == 3
    assert body["builtAt"] == site.built_at.isoformat()
    assert deps.get_site(service=FakeBlogService()) is site


def test_rebuild_failure_keeps_previous_site():
    previous = build_site([], make_settings())
    deps.rebuild_site(FakeBlogService(site=previous))
    error = SlugCollisionError("/dup", ["a.md", "b.md"])
    client = TestClient(make_app(FakeBlogService(error=error)))

    res = client.post("/rebuild")

    assert res.status_code == 500
    assert "/dup" in res.json()["detail"]
    assert deps.get_site(service=FakeBlogService()) is previous


def test_rebuild_unexpected_error_is_500():
    client = TestClient(make_app(FakeBlogService(error=RuntimeError("disk on fire"))))

    res = client.post("/rebuild")

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to rebuild site"
