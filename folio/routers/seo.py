import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from folio import dependencies as deps
from folio.constants import CONTENT_TYPES, ROUTES
from folio.services.posts_service import PostsService
from folio.services.sitemap_service import (
    build_sitemap_entries,
    render_robots,
    render_sitemap,
)
from folio.settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(ROUTES.sitemap)
def sitemap(
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    try:
        entries = build_sitemap_entries(service, current_settings)
        body = render_sitemap(entries)
    except Exception as e:
        logger.error(f"Failed to build sitemap: {e}")
        raise HTTPException(status_code=500, detail="Failed to build sitemap")
    return Response(content=body, media_type=CONTENT_TYPES["sitemap"])


@router.get(ROUTES.robots)
def robots(current_settings: Settings = Depends(get_settings)):
    return Response(
        content=render_robots(current_settings), media_type=CONTENT_TYPES["robots"]
    )
