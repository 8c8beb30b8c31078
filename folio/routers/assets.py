from fastapi import APIRouter
from fastapi.responses import Response

from folio.services.highlighter import get_highlighter

router = APIRouter()

SYNTAX_CSS_ROUTE = "/syntax.css"


@router.get(SYNTAX_CSS_ROUTE)
def syntax_css():
    """Pygments styles for both code themes, scoped by theme class."""
    return Response(
        content=get_highlighter().stylesheet(), media_type="text/css; charset=utf-8"
    )
