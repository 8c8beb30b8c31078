import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from folio.routers import assets, feeds, pages, seo
from folio.services.seo import PageMeta
from folio.settings import get_settings, settings
from folio.templating import STATIC_DIR, templates

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.SITE_TITLE, description=settings.SITE_DESCRIPTION)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.include_router(pages.router)
app.include_router(feeds.router)
app.include_router(seo.router)
app.include_router(assets.router)


def wants_html(request: Request) -> bool:
    accept = request.headers.get("accept", "")
    return not accept or "text/html" in accept or "*/*" in accept


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code != 404 or not wants_html(request):
        return await http_exception_handler(request, exc)
    current_settings = request.app.dependency_overrides.get(get_settings, get_settings)()
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"meta": PageMeta(title="Not Found"), "site": current_settings},
        status_code=404,
    )
