import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from folio import dependencies as deps
from folio.constants import ROUTES, category_url, post_url, site_url
from folio.services.categories import (
    is_legacy_category_slug,
    normalize_legacy_category_slug,
)
from folio.services.markdown_renderer import render_markdown
from folio.services.pages_service import PagesService
from folio.services.posts_service import PostsService
from folio.services.seo import (
    PageMeta,
    build_article_schema,
    build_breadcrumb_schema,
    build_website_schema,
    categories_crumb,
    home_crumbs,
    to_json_ld,
)
from folio.settings import Settings, get_settings
from folio.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter()


def render_page(
    request: Request,
    template: str,
    meta: PageMeta,
    current_settings: Settings,
    status_code: int = 200,
    **context,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        template,
        {"meta": meta, "site": current_settings, **context},
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
def home(
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    """Every listed post, newest first."""
    try:
        posts = service.get_all_posts()
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")

    meta = PageMeta(
        description=current_settings.SITE_DESCRIPTION,
        canonical=site_url(ROUTES.home, current_settings),
        json_ld=[to_json_ld(build_website_schema(current_settings))],
    )
    return render_page(request, "home.html", meta, current_settings, posts=posts)


@router.get(ROUTES.posts)
def posts_index():
    """Legacy index route; the listing lives on the home page."""
    return RedirectResponse(ROUTES.home, status_code=301)


@router.get("/posts/{slug}", response_class=HTMLResponse)
def get_post(
    slug: str,
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    try:
        post = service.get_post_by_slug(slug)
        if not post:
            logger.warning(f"Post not found: {slug}")
            raise HTTPException(status_code=404, detail="Post not found")
        content_html = render_markdown(post.content)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")

    fm = post.frontmatter
    breadcrumbs = build_breadcrumb_schema(
        home_crumbs(current_settings)
        + [
            {"name": "Posts", "item": site_url(ROUTES.posts, current_settings)},
            {"name": fm.title or slug},
        ]
    )
    meta = PageMeta(
        title=fm.title,
        description=fm.description,
        canonical=site_url(post_url(slug), current_settings),
        og_type="article",
        published_time=fm.date,
        tags=fm.categories,
        twitter_card="summary_large_image",
        json_ld=[
            to_json_ld(build_article_schema(post, current_settings)),
            to_json_ld(breadcrumbs),
        ],
    )
    return render_page(
        request,
        "post.html",
        meta,
        current_settings,
        post=post,
        content_html=content_html,
    )


@router.get(ROUTES.categories, response_class=HTMLResponse)
def list_categories(
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    try:
        categories = service.get_all_categories()
    except Exception as e:
        logger.error(f"Unexpected error listing categories: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve categories")

    meta = PageMeta(
        title="Categories",
        description="Browse all blog post categories",
        canonical=site_url(ROUTES.categories, current_settings),
    )
    return render_page(
        request, "categories.html", meta, current_settings, categories=categories
    )


@router.get("/categories/{slug}", response_class=HTMLResponse)
def get_category(
    slug: str,
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    if is_legacy_category_slug(slug):
        target = category_url(normalize_legacy_category_slug(slug))
        logger.info(f"Legacy category redirect: {slug} -> {target}")
        return RedirectResponse(target, status_code=301)

    try:
        category = service.slug_to_category(slug)
        if not category:
            logger.warning(f"Category not found: {slug}")
            raise HTTPException(status_code=404, detail="Category not found")
        posts = service.get_posts_by_category(category)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving category {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve category")

    breadcrumbs = build_breadcrumb_schema(
        home_crumbs(current_settings)
        + [categories_crumb(current_settings), {"name": category}]
    )
    meta = PageMeta(
        title=f"{category} Posts",
        description=f"All blog posts in the {category} category",
        canonical=site_url(category_url(slug), current_settings),
        json_ld=[to_json_ld(breadcrumbs)],
    )
    return render_page(
        request,
        "category.html",
        meta,
        current_settings,
        category=category,
        posts=posts,
    )


@router.get(ROUTES.about, response_class=HTMLResponse)
def about(
    request: Request,
    service: PagesService = Depends(deps.get_pages_service),
    current_settings: Settings = Depends(get_settings),
):
    try:
        page = service.get_page_by_slug("about")
        if not page:
            logger.warning("About page not found")
            raise HTTPException(status_code=404, detail="Page not found")
        content_html = render_markdown(page.content)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving about page: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve page")

    meta = PageMeta(
        title=page.frontmatter.title or "About",
        description=page.frontmatter.description,
        canonical=site_url(ROUTES.about, current_settings),
    )
    return render_page(
        request,
        "page.html",
        meta,
        current_settings,
        page=page,
        content_html=content_html,
    )
