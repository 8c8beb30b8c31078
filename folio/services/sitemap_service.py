import datetime
import logging
from typing import List, Optional

from pydantic import BaseModel

from folio.constants import ROUTES, SITEMAP_CONFIG, category_url, post_url, site_url
from folio.settings import Settings
from folio.templating import templates
from folio.utils import parse_post_date

logger = logging.getLogger(__name__)


class SitemapEntry(BaseModel):
    loc: str
    lastmod: Optional[str] = None
    changefreq: str
    priority: str


def build_sitemap_entries(
    posts_service, current_settings: Settings, now: Optional[datetime.datetime] = None
) -> List[SitemapEntry]:
    """Static pages first, then every listed post, then every category."""
    now = now or datetime.datetime.now(datetime.timezone.utc)
    today = now.date().isoformat()

    def entry(path: str, section: str, lastmod: Optional[str] = today):
        return SitemapEntry(
            loc=site_url(path, current_settings),
            lastmod=lastmod,
            **SITEMAP_CONFIG[section],
        )

    entries = [
        entry(ROUTES.home, "home"),
        entry(ROUTES.categories, "categories"),
        entry(ROUTES.about, "about"),
    ]

    for post in posts_service.get_all_posts():
        published = parse_post_date(post.frontmatter.date)
        entries.append(
            entry(
                post_url(post.slug),
                "post",
                lastmod=published.date().isoformat() if published else None,
            )
        )

    for slug in posts_service.get_all_category_slugs():
        entries.append(entry(category_url(slug), "category"))

    logger.debug(f"Built sitemap with {len(entries)} entries")
    return entries


def render_sitemap(entries: List[SitemapEntry]) -> str:
    template = templates.env.get_template("sitemap.xml")
    return template.render(entries=entries)


def render_robots(current_settings: Settings) -> str:
    lines = ["User-Agent: *", "Allow: /"]
    lines += [f"Disallow: {path}" for path in current_settings.ROBOTS_DISALLOW]
    lines.append("")
    lines.append(f"Host: {current_settings.site_url}")
    lines.append(f"Sitemap: {site_url(ROUTES.sitemap, current_settings)}")
    return "\n".join(lines) + "\n"
