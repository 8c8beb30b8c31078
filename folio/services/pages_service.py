import logging
from typing import Dict, Optional

from folio.schemas.content import ContentKind, Page, PageFrontmatter

logger = logging.getLogger(__name__)


class PagesService:
    """
    Resolves standalone pages (e.g. ``about``) by slug.

    Lookups are memoized for the lifetime of the instance. The FastAPI
    dependency builds one instance per request, so a content change is
    picked up on the next request.
    """

    def __init__(self, store):
        self.store = store
        self._cache: Dict[str, Optional[Page]] = {}

    def get_page_by_slug(self, slug: str) -> Optional[Page]:
        if slug not in self._cache:
            self._cache[slug] = self._load(slug)
        return self._cache[slug]

    def _load(self, slug: str) -> Optional[Page]:
        doc = self.store.get_by_slug(ContentKind.PAGES, slug)
        if not doc:
            logger.debug(f"No page found for slug {slug}")
            return None
        return Page(
            slug=doc.slug,
            frontmatter=PageFrontmatter.model_validate(doc.frontmatter),
            content=doc.body,
        )
