"""
Feed Assembler

Maps the post index into a format-neutral ``FeedSource`` and serializes it.
RSS 2.0 and Atom 1.0 are delegated to feedgen; JSON Feed 1.1 is a plain
pydantic document.
"""

import datetime
import logging
from typing import List, Optional

from feedgen.feed import FeedGenerator
from pydantic import BaseModel, Field

from folio.constants import ROUTES, post_url, site_url
from folio.settings import Settings
from folio.utils import parse_post_date

logger = logging.getLogger(__name__)

JSON_FEED_VERSION = "https://jsonfeed.org/version/1.1"


class FeedAuthor(BaseModel):
    name: str
    link: Optional[str] = None


class FeedLinks(BaseModel):
    rss2: str
    atom: str
    json_feed: str


class FeedItem(BaseModel):
    title: str
    id: str
    link: str
    description: Optional[str] = None
    date: Optional[datetime.datetime] = None
    categories: List[str] = Field(default_factory=list)


class FeedSource(BaseModel):
    title: str
    description: str
    id: str
    link: str
    language: str
    favicon: str
    copyright: str
    author: FeedAuthor
    feed_links: FeedLinks
    updated: datetime.datetime
    items: List[FeedItem] = Field(default_factory=list)


def build_feed_source(posts_service, current_settings: Settings) -> FeedSource:
    """One item per listed post, in ``get_all_posts()`` order."""
    now = datetime.datetime.now(datetime.timezone.utc)

    items = []
    for post in posts_service.get_all_posts():
        url = site_url(post_url(post.slug), current_settings)
        items.append(
            FeedItem(
                title=post.frontmatter.title or _derive_title(post.slug),
                id=url,
                link=url,
                description=post.frontmatter.description,
                date=parse_post_date(post.frontmatter.date),
                categories=list(post.frontmatter.categories),
            )
        )

    dated = [item.date for item in items if item.date is not None]
    return FeedSource(
        title=current_settings.SITE_TITLE,
        description=current_settings.SITE_DESCRIPTION,
        id=site_url("/", current_settings),
        link=current_settings.site_url,
        language=current_settings.SITE_LANGUAGE,
        favicon=site_url("/favicon.ico", current_settings),
        copyright=f"© {now.year} {current_settings.AUTHOR_NAME}",
        author=FeedAuthor(
            name=current_settings.AUTHOR_NAME, link=current_settings.AUTHOR_URL
        ),
        feed_links=FeedLinks(
            rss2=site_url(ROUTES.feed_rss, current_settings),
            atom=site_url(ROUTES.feed_atom, current_settings),
            json_feed=site_url(ROUTES.feed_json, current_settings),
        ),
        updated=max(dated) if dated else now,
        items=items,
    )


def render_rss(source: FeedSource) -> bytes:
    fg = _feed_generator(source, self_href=source.feed_links.rss2)
    return fg.rss_str(pretty=True)


def render_atom(source: FeedSource) -> bytes:
    fg = _feed_generator(source, self_href=source.feed_links.atom)
    return fg.atom_str(pretty=True)


class JsonFeedAuthor(BaseModel):
    name: str
    url: Optional[str] = None


class JsonFeedItem(BaseModel):
    id: str
    url: str
    title: str
    summary: Optional[str] = None
    content_text: str = ""
    date_published: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


class JsonFeed(BaseModel):
    version: str = JSON_FEED_VERSION
    title: str
    home_page_url: str
    feed_url: str
    description: str
    favicon: str
    language: str
    authors: List[JsonFeedAuthor]
    items: List[JsonFeedItem]


def render_json(source: FeedSource) -> str:
    feed = JsonFeed(
        title=source.title,
        home_page_url=source.link,
        feed_url=source.feed_links.json_feed,
        description=source.description,
        favicon=source.favicon,
        language=source.language,
        authors=[JsonFeedAuthor(name=source.author.name, url=source.author.link)],
        items=[
            JsonFeedItem(
                id=item.id,
                url=item.link,
                title=item.title,
                summary=item.description,
                content_text=item.description or "",
                date_published=item.date.isoformat() if item.date else None,
                tags=item.categories,
            )
            for item in source.items
        ],
    )
    return feed.model_dump_json(exclude_none=True, indent=2)


def _feed_generator(source: FeedSource, self_href: str) -> FeedGenerator:
    fg = FeedGenerator()
    fg.id(source.id)
    fg.title(source.title)
    fg.description(source.description)
    fg.language(source.language)
    fg.icon(source.favicon)
    fg.rights(source.copyright)
    author = {"name": source.author.name}
    if source.author.link:
        author["uri"] = source.author.link
    fg.author(author)
    fg.updated(source.updated)
    # RSS keeps the last link as <link>, so the site link goes last
    fg.link(href=self_href, rel="self")
    fg.link(href=source.link, rel="alternate")

    for item in source.items:
        # append keeps the index order; feedgen prepends by default
        entry = fg.add_entry(order="append")
        entry.id(item.id)
        entry.title(item.title)
        entry.link(href=item.link)
        if item.description:
            entry.summary(item.description)
        stamp = item.date or source.updated
        entry.published(stamp)
        entry.updated(stamp)
        for category in item.categories:
            entry.category(term=category, label=category)

    logger.debug(f"Assembled feed with {len(source.items)} items")
    return fg


def _derive_title(slug: str) -> str:
    return slug.replace("-", " ").replace("_", " ").title()
