import datetime
from pathlib import Path

from fastapi.templating import Jinja2Templates

from folio.constants import ROUTES, category_url, post_url
from folio.services.categories import category_to_slug
from folio.utils import calculate_reading_time, format_post_date

PACKAGE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

templates.env.filters["format_post_date"] = format_post_date
templates.env.filters["reading_time"] = calculate_reading_time
templates.env.filters["category_slug"] = category_to_slug
templates.env.globals["routes"] = ROUTES
templates.env.globals["post_url"] = post_url
templates.env.globals["category_url"] = category_url


def now_year() -> int:
    return datetime.datetime.now().year


templates.env.globals["now_year"] = now_year
