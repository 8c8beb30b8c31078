from typing import Dict, Optional

from folio.settings import Settings, settings


class ROUTES:
    home = "/"
    posts = "/posts"
    categories = "/categories"
    about = "/about"
    sitemap = "/sitemap.xml"
    robots = "/robots.txt"
    feed_rss = "/feed.xml"
    feed_atom = "/atom.xml"
    feed_json = "/feed.json"


CONTENT_TYPES: Dict[str, str] = {
    "rss": "application/rss+xml; charset=utf-8",
    "atom": "application/atom+xml; charset=utf-8",
    "json": "application/feed+json; charset=utf-8",
    "sitemap": "application/xml; charset=utf-8",
    "robots": "text/plain; charset=utf-8",
}

# changefreq / priority per sitemap section
SITEMAP_CONFIG: Dict[str, Dict[str, str]] = {
    "home": {"changefreq": "weekly", "priority": "1.0"},
    "categories": {"changefreq": "weekly", "priority": "0.6"},
    "about": {"changefreq": "monthly", "priority": "0.5"},
    "post": {"changefreq": "monthly", "priority": "0.8"},
    "category": {"changefreq": "weekly", "priority": "0.5"},
}


def post_url(slug: str) -> str:
    return f"{ROUTES.posts}/{slug}"


def category_url(slug: str) -> str:
    return f"{ROUTES.categories}/{slug}"


def site_url(path: str = "/", current_settings: Optional[Settings] = None) -> str:
    """Absolute URL for a site-relative path."""
    base = (current_settings or settings).site_url
    if not path or path == "/":
        return f"{base}/"
    return f"{base}/{path.lstrip('/')}"
