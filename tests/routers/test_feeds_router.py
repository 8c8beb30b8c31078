import json

from fastapi import FastAPI
from fastapi.testclient import TestClient

from folio import dependencies as deps
from folio.routers import feeds
from folio.settings import get_settings
from tests.conftest import (
    FailingPostsService,
    FakeContentStore,
    FakePostsService,
    make_doc,
    make_meta,
)


def make_app(fake_service, site_settings):
    app = FastAPI()
    app.dependency_overrides[deps.get_posts_service] = lambda: fake_service
    app.dependency_overrides[get_settings] = lambda: site_settings
    app.include_router(feeds.router)
    return app


def make_client(site_settings):
    service = FakePostsService(
        posts=[make_meta("hello", title="Hello", date="2024-01-15")]
    )
    return TestClient(make_app(service, site_settings))


def test_rss_feed(site_settings):
    res = make_client(site_settings).get("/feed.xml")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/rss+xml")
    assert b"<title>Hello</title>" in res.content


def test_atom_feed(site_settings):
    res = make_client(site_settings).get("/atom.xml")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/atom+xml")
    assert b"https://example.com/posts/hello" in res.content


def test_json_feed(site_settings):
    res = make_client(site_settings).get("/feed.json")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/feed+json")
    data = json.loads(res.content)
    assert data["items"][0]["url"] == "https://example.com/posts/hello"


def test_feed_failure_returns_500(site_settings):
    client = TestClient(make_app(FailingPostsService(), site_settings))
    for path in ["/feed.xml", "/atom.xml", "/feed.json"]:
        res = client.get(path)
        assert res.status_code == 500
        assert res.json()["detail"] == "Failed to build feed"


def test_feeds_survive_oddly_typed_frontmatter(site_settings):
    store = FakeContentStore(
        posts=[make_doc("null-draft", title="Null Draft", draft=None)]
    )
    app = FastAPI()
    app.dependency_overrides[deps.get_content_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: site_settings
    app.include_router(feeds.router)

    res = TestClient(app).get("/feed.xml")
    assert res.status_code == 200
    assert b"<title>Null Draft</title>" in res.content
