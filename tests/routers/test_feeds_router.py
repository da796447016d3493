import datetime
import xml.etree.ElementTree as ET

from fastapi import FastAPI
from fastapi.testclient import TestClient

from app import dependencies as deps
from app.routers import feeds
from app.services.blog_service import build_site
from tests.conftest import make_post, make_settings


def _site():
    return build_site(
        [
            make_post(
                "kotlin.md",
                title="Kotlin Coroutines",
                date=datetime.date(2021, 2, 1),
                tags=["kotlin"],
            ),
            make_post(
                "corda.md",
                title="Corda States",
                date=datetime.date(2021, 3, 1),
                tags=["corda"],
            ),
        ],
        make_settings(),
    )


def make_app(site):
    app = FastAPI()
    app.dependency_overrides[deps.get_site] = lambda: site
    app.include_router(feeds.router)
    return app


def test_list_feeds_reports_entry_counts():
    client = TestClient(make_app(_site()))

    res = client.get("/feeds")

    assert res.status_code == 200
    assert [(f["name"], f["output"], f["entries"]) for f in res.json()] == [
        ("all", "/rss/all.xml", 2),
        ("jvm", "/rss/jvm.xml", 1),
        ("corda", "/rss/corda.xml", 1),
    ]


def test_get_feed_serves_rss():
    client = TestClient(make_app(_site()))

    res = client.get("/rss/jvm.xml")

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/rss+xml")
    channel = ET.fromstring(res.content).find("channel")
    assert channel.findtext("title") == "JVM posts RSS Feed"
    assert [i.findtext("title") for i in channel.findall("item")] == ["Kotlin Coroutines"]


def test_get_unknown_feed_is_404():
    client = TestClient(make_app(_site()))
    res = client.get("/rss/python.xml")
    assert res.status_code == 404
    assert res.json()["detail"] == "Feed not found"


def test_get_sitemap():
    client = TestClient(make_app(_site()))

    res = client.get("/sitemap.xml")

    assert res.status_code == 200
    assert "https://example.dev/kotlin-coroutines" in res.text
    assert "https://example.dev/blog" in res.text
