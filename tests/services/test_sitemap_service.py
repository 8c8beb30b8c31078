import datetime
import xml.etree.ElementTree as ET

from folio.services.sitemap_service import (
    build_sitemap_entries,
    render_robots,
    render_sitemap,
)
from tests.conftest import FakePostsService, make_meta

SM = "{http://www.sitemaps.org/schemas/sitemap/0.9}"
NOW = datetime.datetime(2024, 7, 1, 12, 0, tzinfo=datetime.timezone.utc)


def make_entries(site_settings):
    service = FakePostsService(
        posts=[
            make_meta("newer", date="2024-06-01"),
            make_meta("undated"),
        ],
        category_slugs=["python", "web-development"],
    )
    return build_sitemap_entries(service, site_settings, now=NOW)


def test_build_sitemap_entries_order_and_values(site_settings):
    entries = make_entries(site_settings)

    assert [e.loc for e in entries] == [
        "https://example.com/",
        "https://example.com/categories",
        "https://example.com/about",
        "https://example.com/posts/newer",
        "https://example.com/posts/undated",
        "https://example.com/categories/python",
        "https://example.com/categories/web-development",
    ]
    home, categories, about, newer, undated, python, _ = entries
    assert (home.priority, home.changefreq) == ("1.0", "weekly")
    assert home.lastmod == "2024-07-01"
    assert (categories.priority, categories.changefreq) == ("0.6", "weekly")
    assert (about.priority, about.changefreq) == ("0.5", "monthly")
    assert (newer.priority, newer.changefreq) == ("0.8", "monthly")
    assert newer.lastmod == "2024-06-01"
    assert undated.lastmod is None
    assert (python.priority, python.changefreq) == ("0.5", "weekly")


def test_render_sitemap_is_valid_xml(site_settings):
    root = ET.fromstring(render_sitemap(make_entries(site_settings)).encode())
    urls = root.findall(f"{SM}url")

    assert root.tag == f"{SM}urlset"
    assert len(urls) == 7
    assert urls[3].find(f"{SM}lastmod").text == "2024-06-01"
    assert urls[4].find(f"{SM}lastmod") is None


def test_render_robots(site_settings):
    body = render_robots(site_settings)

    assert body.splitlines() == [
        "User-Agent: *",
        "Allow: /",
        "Disallow: /api/",
        "",
        "Host: https://example.com",
        "Sitemap: https://example.com/sitemap.xml",
    ]
