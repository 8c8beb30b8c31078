import textwrap

import pytest

from folio.schemas.content import ContentDocument, ContentKind, PostFrontmatter, PostMeta
from folio.settings import Settings


class FakeContentStore:
    """
    Minimal in-memory content store stand-in.
    Set track_calls=True to record every lookup.
    """

    def __init__(self, posts=None, pages=None, track_calls: bool = False):
        self.docs = {
            ContentKind.POSTS: list(posts or []),
            ContentKind.PAGES: list(pages or []),
        }
        self.track_calls = track_calls
        self.calls = []

    def list_all(self, kind):
        if self.track_calls:
            self.calls.append(("list_all", kind))
        return list(self.docs[kind])

    def get_by_slug(self, kind, slug):
        if self.track_calls:
            self.calls.append(("get_by_slug", kind, slug))
        for doc in self.docs[kind]:
            if doc.slug == slug:
                return doc
        return None

    def list_slugs(self, kind):
        return [doc.slug for doc in self.docs[kind]]


def make_doc(slug: str, body: str = "", **frontmatter) -> ContentDocument:
    return ContentDocument(slug=slug, frontmatter=frontmatter, body=body)


def make_meta(slug: str, **frontmatter) -> PostMeta:
    return PostMeta(slug=slug, frontmatter=PostFrontmatter(**frontmatter))


class FakePostsService:
    """
    Minimal posts service stand-in for feed, sitemap and router tests.
    """

    def __init__(self, posts=None, post=None, categories=None, category_slugs=None):
        self._posts = posts or []
        self._post = post
        self._categories = categories or []
        self._category_slugs = category_slugs or []

    def get_all_posts(self):
        return self._posts

    def get_post_by_slug(self, slug: str):
        return self._post

    def get_all_categories(self):
        return self._categories

    def get_all_category_slugs(self):
        return self._category_slugs

    def get_all_slugs(self):
        return [post.slug for post in self._posts]


class FailingPostsService:
    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise RuntimeError("storage unavailable")

        return fail


def write_file(path, text: str):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def site_settings(tmp_path):
    return Settings(
        SITE_URL="https://example.com/",
        SITE_NAME="example.com",
        SITE_TITLE="Example Blog",
        SITE_DESCRIPTION="Notes on software.",
        AUTHOR_NAME="Jane Doe",
        AUTHOR_URL="https://example.com/about",
        CONTENT_DIR=str(tmp_path / "content"),
    )
