import pytest

from folio.services.categories import (
    category_to_slug,
    is_legacy_category_slug,
    normalize_legacy_category_slug,
)


@pytest.mark.parametrize(
    "name, slug",
    [
        ("Python", "python"),
        ("Web Development", "web-development"),
        ("Web   Development", "web-development"),
        ("Next.js", "nextjs"),
        ("Node.js Tips", "nodejs-tips"),
    ],
)
def test_category_to_slug(name, slug):
    assert category_to_slug(name) == slug


def test_category_to_slug_is_idempotent():
    for name in ["Next.js", "AI  Tools", "Web Development"]:
        slug = category_to_slug(name)
        assert category_to_slug(slug) == slug


def test_legacy_slugs_are_detected_and_normalized():
    assert is_legacy_category_slug("next.js")
    assert not is_legacy_category_slug("nextjs")
    assert normalize_legacy_category_slug("node.js") == "nodejs"
    assert normalize_legacy_category_slug("python") == "python"
