import logging
from pathlib import Path
from typing import List, Optional

import frontmatter

from folio.schemas.content import ContentDocument, ContentKind

logger = logging.getLogger(__name__)


class FileContentStore:
    """
    Read-only access to content documents on disk.

    Posts live as ``<posts_dir>/<slug><ext>``; pages live one per directory as
    ``<content_root>/<slug>/<index_name><ext>``. Nothing is cached: every call
    goes back to the filesystem.
    """

    def __init__(
        self,
        content_root: Path,
        posts_dir: Path,
        extension: str = ".mdx",
        index_name: str = "index",
    ):
        self.content_root = Path(content_root)
        self.posts_dir = Path(posts_dir)
        self.extension = extension
        self.index_name = index_name

    def list_all(self, kind: ContentKind) -> List[ContentDocument]:
        paths = (
            self._list_post_paths()
            if kind == ContentKind.POSTS
            else self._list_page_paths()
        )
        docs = []
        for slug, path in paths:
            doc = self._read(slug, path)
            if doc is not None:
                docs.append(doc)
        logger.debug(f"Loaded {len(docs)} {kind.value} from storage")
        return docs

    def get_by_slug(self, kind: ContentKind, slug: str) -> Optional[ContentDocument]:
        path = self._path_for(kind, slug)
        if path is None:
            return None
        return self._read(slug, path)

    def list_slugs(self, kind: ContentKind) -> List[str]:
        """Slugs of every document of ``kind`` without parsing any of them."""
        if kind == ContentKind.POSTS:
            return [slug for slug, _ in self._list_post_paths()]
        return [slug for slug, _ in self._list_page_paths()]

    def _list_post_paths(self):
        if not self.posts_dir.is_dir():
            return []
        return [
            (path.name[: -len(self.extension)], path)
            for path in sorted(self.posts_dir.iterdir(), key=lambda p: p.name)
            if path.is_file() and path.name.endswith(self.extension)
        ]

    def _list_page_paths(self):
        if not self.content_root.is_dir():
            return []
        index_file = f"{self.index_name}{self.extension}"
        return [
            (path.name, path / index_file)
            for path in sorted(self.content_root.iterdir(), key=lambda p: p.name)
            if path.is_dir() and (path / index_file).is_file()
        ]

    def _path_for(self, kind: ContentKind, slug: str) -> Optional[Path]:
        if not slug:
            return None
        if kind == ContentKind.POSTS:
            root = self.posts_dir
            candidate = root / f"{slug}{self.extension}"
        else:
            root = self.content_root
            candidate = root / slug / f"{self.index_name}{self.extension}"

        # Reject slugs that escape the storage root (e.g. "../secrets")
        try:
            candidate.resolve().relative_to(root.resolve())
        except ValueError:
            logger.warning(f"Rejected {kind.value} slug outside content root: {slug}")
            return None
        return candidate

    @staticmethod
    def _read(slug: str, path: Path) -> Optional[ContentDocument]:
        if not path.is_file():
            return None
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        parsed = frontmatter.loads(text)
        return ContentDocument(
            slug=slug, frontmatter=dict(parsed.metadata or {}), body=parsed.content
        )
