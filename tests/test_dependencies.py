from pathlib import Path

from folio.dependencies import get_content_store, get_pages_service, get_posts_service
from folio.repos.content_repo import FileContentStore
from folio.services.pages_service import PagesService
from folio.services.posts_service import PostsService
from folio.settings import Settings


def test_get_content_store_uses_settings():
    store = get_content_store(
        current_settings=Settings(CONTENT_DIR="/srv/content", CONTENT_EXTENSION=".md")
    )

    assert isinstance(store, FileContentStore)
    assert store.content_root == Path("/srv/content")
    assert store.posts_dir == Path("/srv/content/posts")
    assert store.extension == ".md"


def test_get_posts_service_constructs_service():
    class FakeStore:
        pass

    store = FakeStore()
    svc = get_posts_service(store=store)

    assert isinstance(svc, PostsService)
    assert svc.store is store


def test_get_pages_service_builds_fresh_instance_each_call():
    store = object()
    first = get_pages_service(store=store)
    second = get_pages_service(store=store)

    assert isinstance(first, PagesService)
    assert first is not second
    assert first.store is store
