import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContentKind(str, Enum):
    POSTS = "posts"
    PAGES = "pages"


class ContentDocument(BaseModel):
    """One physical content file: slug, raw frontmatter and unparsed body."""

    slug: str
    frontmatter: Dict[str, Any] = Field(default_factory=dict)
    body: str = ""


def _convert_date(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return value


def _to_text(value):
    """Scalar frontmatter value as a string; anything else reads as absent."""
    value = _convert_date(value)
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _to_flag(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "on", "1")
    return bool(value)


class PostFrontmatter(BaseModel):
    # Frontmatter is trusted, not validated: a missing or oddly typed field
    # reads as absent instead of failing the whole listing.
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    title: Optional[str] = None
    date: Optional[str] = None
    description: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    draft: bool = False

    @field_validator("title", "date", "description", mode="before")
    @classmethod
    def _scalar_to_string(cls, value):
        return _to_text(value)

    @field_validator("draft", mode="before")
    @classmethod
    def _draft_to_bool(cls, value):
        return _to_flag(value)

    @field_validator("categories", mode="before")
    @classmethod
    def _categories_to_list(cls, value):
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            items = [_to_text(item) for item in value]
            return [item for item in items if item]
        text = _to_text(value)
        return [text] if text else []


class PostMeta(BaseModel):
    slug: str
    frontmatter: PostFrontmatter


class Post(PostMeta):
    content: str


class PageFrontmatter(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    title: Optional[str] = None
    description: Optional[str] = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def _scalar_to_string(cls, value):
        return _to_text(value)


class Page(BaseModel):
    slug: str
    frontmatter: PageFrontmatter
    content: str


class CategoryCount(BaseModel):
    name: str
    count: int
