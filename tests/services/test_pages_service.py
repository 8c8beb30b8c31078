from folio.services.pages_service import PagesService
from tests.conftest import FakeContentStore, make_doc


def test_get_page_by_slug_returns_page():
    store = FakeContentStore(pages=[make_doc("about", body="About me", title="About")])
    page = PagesService(store).get_page_by_slug("about")

    assert page.slug == "about"
    assert page.frontmatter.title == "About"
    assert page.content == "About me"


def test_missing_page_returns_none():
    assert PagesService(FakeContentStore()).get_page_by_slug("about") is None


def test_lookups_are_memoized_per_instance():
    store = FakeContentStore(pages=[make_doc("about")], track_calls=True)
    service = PagesService(store)

    service.get_page_by_slug("about")
    service.get_page_by_slug("about")
    service.get_page_by_slug("missing")
    service.get_page_by_slug("missing")

    assert len(store.calls) == 2

    PagesService(store).get_page_by_slug("about")
    assert len(store.calls) == 3
