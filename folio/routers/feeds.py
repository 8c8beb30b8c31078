import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from folio import dependencies as deps
from folio.constants import CONTENT_TYPES, ROUTES
from folio.services import feed_service
from folio.services.posts_service import PostsService
from folio.settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()

RENDERERS = {
    "rss": feed_service.render_rss,
    "atom": feed_service.render_atom,
    "json": feed_service.render_json,
}


def feed_response(fmt: str, service: PostsService, current_settings: Settings):
    try:
        source = feed_service.build_feed_source(service, current_settings)
        body = RENDERERS[fmt](source)
    except Exception as e:
        logger.error(f"Failed to build {fmt} feed: {e}")
        raise HTTPException(status_code=500, detail="Failed to build feed")
    return Response(content=body, media_type=CONTENT_TYPES[fmt])


@router.get(ROUTES.feed_rss)
def rss_feed(
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    return feed_response("rss", service, current_settings)


@router.get(ROUTES.feed_atom)
def atom_feed(
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    return feed_response("atom", service, current_settings)


@router.get(ROUTES.feed_json)
def json_feed(
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    return feed_response("json", service, current_settings)
