import re

WHITESPACE_RE = re.compile(r"\s+")


def category_to_slug(name: str) -> str:
    """
    Map a display category name to its URL slug.

    Lowercases, drops every period and collapses whitespace runs into a
    single hyphen: ``"Next.js"`` -> ``"nextjs"``, ``"Web  Development"`` ->
    ``"web-development"``. The mapping is lossy, so there is no pure inverse;
    use ``PostsService.slug_to_category`` to resolve a slug against the corpus.
    """
    slug = name.lower().replace(".", "")
    return WHITESPACE_RE.sub("-", slug)


def normalize_legacy_category_slug(slug: str) -> str:
    """Period-stripped form of a requested category slug (old URLs kept the dots)."""
    return slug.replace(".", "")


def is_legacy_category_slug(slug: str) -> bool:
    return "." in slug
