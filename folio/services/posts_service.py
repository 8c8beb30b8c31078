import datetime
import logging
from typing import Dict, List, Optional

from folio.schemas.content import (
    CategoryCount,
    ContentDocument,
    ContentKind,
    Post,
    PostFrontmatter,
    PostMeta,
)
from folio.services.categories import category_to_slug
from folio.utils import parse_post_date

logger = logging.getLogger(__name__)

_UNDATED = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)


class PostsService:
    """
    Listings and lookups over the post corpus.

    Drafts are left out of every listing and category aggregate but stay
    reachable through ``get_post_by_slug`` and ``get_all_slugs``.
    """

    def __init__(self, store):
        self.store = store

    def get_all_posts(self) -> List[PostMeta]:
        posts = [
            _to_post_meta(doc)
            for doc in self.store.list_all(ContentKind.POSTS)
        ]
        posts = [post for post in posts if not post.frontmatter.draft]
        # list.sort is stable, also with reverse=True: equal dates keep
        # enumeration order. Undated posts go last.
        posts.sort(key=_date_sort_key, reverse=True)
        return posts

    def get_post_by_slug(self, slug: str) -> Optional[Post]:
        doc = self.store.get_by_slug(ContentKind.POSTS, slug)
        if not doc:
            logger.debug(f"No post found for slug {slug}")
            return None
        meta = _to_post_meta(doc)
        return Post(slug=meta.slug, frontmatter=meta.frontmatter, content=doc.body)

    def get_all_categories(self) -> List[CategoryCount]:
        counts: Dict[str, int] = {}
        for post in self.get_all_posts():
            for category in post.frontmatter.categories:
                counts[category] = counts.get(category, 0) + 1

        categories = [
            CategoryCount(name=name, count=count) for name, count in counts.items()
        ]
        categories.sort(key=lambda c: c.count, reverse=True)
        return categories

    def get_posts_by_category(self, category: str) -> List[PostMeta]:
        wanted = category.lower()
        return [
            post
            for post in self.get_all_posts()
            if wanted in (c.lower() for c in post.frontmatter.categories)
        ]

    def get_all_slugs(self) -> List[str]:
        return self.store.list_slugs(ContentKind.POSTS)

    def get_all_category_slugs(self) -> List[str]:
        return [category_to_slug(c.name) for c in self.get_all_categories()]

    def slug_to_category(self, slug: str) -> Optional[str]:
        for category in self.get_all_categories():
            if category_to_slug(category.name) == slug:
                return category.name
        return None


def _to_post_meta(doc: ContentDocument) -> PostMeta:
    return PostMeta(
        slug=doc.slug, frontmatter=PostFrontmatter.model_validate(doc.frontmatter)
    )


def _date_sort_key(post: PostMeta):
    parsed = parse_post_date(post.frontmatter.date)
    if parsed is None:
        return (False, _UNDATED)
    return (True, parsed)
