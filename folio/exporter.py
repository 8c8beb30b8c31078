"""
Static export: render every public route of the app into plain files.

Each route is requested through an in-process ``TestClient`` so the exported
bytes are exactly what the live server would answer.
"""

import logging
import shutil
from pathlib import Path
from typing import List, Optional, Tuple

from fastapi.testclient import TestClient

from folio.constants import ROUTES, category_url, post_url
from folio.dependencies import get_content_store, get_posts_service
from folio.routers.assets import SYNTAX_CSS_ROUTE
from folio.settings import Settings, get_settings
from folio.templating import STATIC_DIR

logger = logging.getLogger(__name__)

NOT_FOUND_PROBE = "/__not-found__"
NOT_FOUND_FILE = "404.html"

FILE_ROUTES = [
    ROUTES.feed_rss,
    ROUTES.feed_atom,
    ROUTES.feed_json,
    ROUTES.sitemap,
    ROUTES.robots,
    SYNTAX_CSS_ROUTE,
]


class ExportError(Exception):
    pass


def output_path_for(route: str, is_page: bool = True) -> str:
    """Relative file path a route is written to."""
    stripped = route.strip("/")
    if not is_page:
        return stripped
    if not stripped:
        return "index.html"
    return f"{stripped}/index.html"


def collect_routes(current_settings: Settings) -> Tuple[List[str], List[str]]:
    """Page routes and file routes to export, in a stable order."""
    service = get_posts_service(get_content_store(current_settings))
    pages = [ROUTES.home, ROUTES.categories, ROUTES.about]
    pages += [post_url(slug) for slug in service.get_all_slugs()]
    pages += [category_url(slug) for slug in service.get_all_category_slugs()]
    return pages, list(FILE_ROUTES)


def export_site(app, output_dir, current_settings: Optional[Settings] = None):
    if current_settings is None:
        current_settings = app.dependency_overrides.get(get_settings, get_settings)()

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []

    pages, files = collect_routes(current_settings)
    client = TestClient(app)

    for route in pages:
        response = client.get(
            route, headers={"accept": "text/html"}, follow_redirects=False
        )
        if response.status_code == 404:
            logger.warning(f"Skipping {route}: not found")
            continue
        if response.status_code != 200:
            raise ExportError(f"{route} answered {response.status_code}")
        written.append(_write(output_dir, output_path_for(route), response.content))

    for route in files:
        response = client.get(route)
        if response.status_code != 200:
            raise ExportError(f"{route} answered {response.status_code}")
        path = output_path_for(route, is_page=False)
        written.append(_write(output_dir, path, response.content))

    response = client.get(NOT_FOUND_PROBE, headers={"accept": "text/html"})
    written.append(_write(output_dir, NOT_FOUND_FILE, response.content))

    shutil.copytree(STATIC_DIR, output_dir / "static", dirs_exist_ok=True)

    logger.info(f"Exported {len(written)} files to {output_dir}")
    return written


def _write(output_dir: Path, relative: str, content: bytes) -> Path:
    target = output_dir / relative
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(content)
    logger.debug(f"Wrote {target}")
    return target
