"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

import math
from typing import Literal

from pydantic import BaseModel, Field, field_validator

SortBy = Literal["publishedAt", "relevancy", "popularity"]


def parse_tags(raw: str | list[str] | None) -> list[str]:
    """Split a comma-separated tag string, dropping blanks: ``"a, b,,c"`` → ``["a", "b", "c"]``."""
    if raw is None:
        return []
    items = raw.split(",") if isinstance(raw, str) else raw
    return [tag.strip() for tag in items if tag and tag.strip()]


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Getting Started"])
    description: str = ""
    content: str | None = Field(None, examples=["Introduction paragraph."])
    author: str = "Admin"
    category: str = Field(..., min_length=1, examples=["Technology"])
    tags: list[str] = Field(default_factory=list)
    published_at: str | None = None
    image_url: str | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: str | list[str] | None) -> list[str]:
        return parse_tags(value)


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article: all fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    content: str | None = None
    author: str | None = None
    category: str | None = None
    tags: list[str] | None = None
    published_at: str | None = None
    image_url: str | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: str | list[str] | None) -> list[str] | None:
        if value is None:
            return None
        return parse_tags(value)


class ArticleResponse(BaseModel):
    """Public article shape. ``content`` carries the introduction only."""

    id: int
    title: str
    description: str
    content: str | None = None
    author: str
    category: str
    tags: list[str] = Field(default_factory=list)
    published_at: str
    image_url: str | None = None
    slug: str | None = None


class ArticleQuery(BaseModel):
    """List parameters for ``GET /articles``."""

    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)
    category: str | None = None
    search: str | None = None
    from_: str | None = Field(None, alias="from")
    sort_by: SortBy | None = Field(None, alias="sortBy")

    model_config = {"populate_by_name": True}

    def to_params(self) -> dict[str, str]:
        """Query-string parameters, skipping empty values."""
        params = self.model_dump(by_alias=True, exclude_none=True)
        return {key: str(value) for key, value in params.items() if value != ""}


class ArticlePage(BaseModel):
    articles: list[ArticleResponse]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total / self.limit))
