"""Mapping between the stored Article entity and the public article shape.

The public shape is lossy: ``content`` carries the introduction only, so
sections and conclusion do not survive a round trip. ``slug`` is derived
from the current title on every read and is never stored.
"""

import re

from cms.application.schemas import ArticleResponse
from cms.domain.entities import Article, ArticleContent

_SLUG_STRIP = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")


def slugify(title: str) -> str:
    """``"Hello, World!"`` → ``"hello-world"``."""
    cleaned = _SLUG_STRIP.sub("", title.lower()).strip()
    return _WHITESPACE.sub("-", cleaned)


def to_response(article: Article) -> ArticleResponse:
    """Map domain entity → public article."""
    return ArticleResponse(
        id=article.id,
        title=article.title,
        description=article.description,
        content=article.content.introduction if article.content else None,
        author=article.author,
        category=article.category,
        tags=list(article.tags),
        published_at=article.date,
        image_url=article.hero_image,
        slug=slugify(article.title),
    )


def from_response(response: ArticleResponse) -> Article:
    """Map public article → domain entity (sections and conclusion start empty)."""
    return Article(
        id=response.id,
        title=response.title,
        description=response.description,
        author=response.author,
        category=response.category,
        date=response.published_at,
        tags=list(response.tags),
        hero_image=response.image_url,
        content=ArticleContent(introduction=response.content) if response.content is not None else None,
    )
