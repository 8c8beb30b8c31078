"""
SEO metadata: per-page head tags and schema.org JSON-LD documents.
"""

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from folio.constants import ROUTES, post_url, site_url
from folio.schemas.content import Post
from folio.settings import Settings


class PageMeta(BaseModel):
    """Values rendered into <head> by base.html."""

    title: Optional[str] = None
    description: Optional[str] = None
    canonical: Optional[str] = None
    og_type: str = "website"
    published_time: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    twitter_card: str = "summary"
    json_ld: List[str] = Field(default_factory=list)

    def full_title(self, current_settings: Settings) -> str:
        if not self.title:
            return current_settings.SITE_TITLE
        return f"{self.title} | {current_settings.SITE_TITLE}"


def to_json_ld(data: Dict[str, Any]) -> str:
    """Serialize for a <script type="application/ld+json"> block."""
    return json.dumps(data, ensure_ascii=False).replace("<", "\\u003c")


def _person(current_settings: Settings, url: Optional[str] = None) -> Dict[str, Any]:
    return {
        "@type": "Person",
        "name": current_settings.AUTHOR_NAME,
        "url": url or current_settings.AUTHOR_URL,
    }


def build_website_schema(current_settings: Settings) -> Dict[str, Any]:
    return {
        "@context": "https://schema.org",
        "@type": "WebSite",
        "name": current_settings.SITE_NAME,
        "url": current_settings.site_url,
        "description": current_settings.SITE_DESCRIPTION,
        "author": _person(current_settings),
    }


def build_article_schema(post: Post, current_settings: Settings) -> Dict[str, Any]:
    fm = post.frontmatter
    schema = {
        "@context": "https://schema.org",
        "@type": "Article",
        "headline": fm.title,
        "description": fm.description,
        "datePublished": fm.date,
        "dateModified": fm.date,
        "author": _person(current_settings),
        "publisher": _person(current_settings, url=current_settings.site_url),
        "mainEntityOfPage": {
            "@type": "WebPage",
            "@id": site_url(post_url(post.slug), current_settings),
        },
    }
    if fm.categories:
        schema["keywords"] = ", ".join(fm.categories)
    return schema


def build_breadcrumb_schema(items: List[Dict[str, str]]) -> Dict[str, Any]:
    """
    ``items`` is an ordered list of ``{"name": ..., "item": url}``; the last
    crumb (the current page) usually has no ``item``.
    """
    elements = []
    for position, crumb in enumerate(items, start=1):
        element = {"@type": "ListItem", "position": position, "name": crumb["name"]}
        if crumb.get("item"):
            element["item"] = crumb["item"]
        elements.append(element)
    return {
        "@context": "https://schema.org",
        "@type": "BreadcrumbList",
        "itemListElement": elements,
    }


def home_crumbs(current_settings: Settings) -> List[Dict[str, str]]:
    return [{"name": "Home", "item": current_settings.site_url}]


def categories_crumb(current_settings: Settings) -> Dict[str, str]:
    return {"name": "Categories", "item": site_url(ROUTES.categories, current_settings)}
