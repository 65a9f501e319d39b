"""Mock article backend over the key/value store.

New articles are prepended (newest first). Reads always go through
``article_mapper.to_response``, so slugs track the current title.
"""

import logging
from datetime import datetime, timezone

from cms.application.interfaces import ArticleBackend, KeyValueStore
from cms.application.schemas import (
    ArticleCreate,
    ArticlePage,
    ArticleQuery,
    ArticleResponse,
    ArticleUpdate,
)
from cms.application.services.article_mapper import slugify, to_response
from cms.domain.entities import Article, ArticleContent, ArticleSection
from cms.domain.exceptions import EntityNotFoundError
from cms.infrastructure.mock.records import contains, paginate
from cms.infrastructure.mock.seed_data import seed_articles
from cms.infrastructure.storage.collection import Record, SeededCollection

logger = logging.getLogger(__name__)

ARTICLES_KEY = "mock_articles"


class MockArticleBackend(ArticleBackend):
    """Implements the ArticleBackend port against the ``mock_articles`` collection.

    Tokens are accepted and ignored; role checks belong to the caller.
    """

    def __init__(self, store: KeyValueStore):
        self._articles = SeededCollection(store, ARTICLES_KEY, seed_articles)

    @staticmethod
    def _to_entity(record: Record) -> Article:
        """Map stored record → domain entity."""
        content = record.get("content")
        return Article(
            id=record["id"],
            title=record["title"],
            description=record.get("description", ""),
            author=record.get("author", ""),
            category=record.get("category", ""),
            date=record.get("date", ""),
            tags=list(record.get("tags") or []),
            hero_image=record.get("heroImage"),
            content=ArticleContent(
                introduction=content.get("introduction", ""),
                sections=[
                    ArticleSection(title=s.get("title", ""), content=s.get("content", ""))
                    for s in content.get("sections") or []
                ],
                conclusion=content.get("conclusion", ""),
            ) if content else None,
        )

    @staticmethod
    def _to_record(article: Article) -> Record:
        """Map domain entity → stored record."""
        record: Record = {
            "id": article.id,
            "title": article.title,
            "description": article.description,
            "date": article.date,
            "author": article.author,
            "category": article.category,
            "tags": list(article.tags),
        }
        if article.hero_image is not None:
            record["heroImage"] = article.hero_image
        if article.content is not None:
            record["content"] = {
                "introduction": article.content.introduction,
                "sections": [
                    {"title": s.title, "content": s.content} for s in article.content.sections
                ],
                "conclusion": article.content.conclusion,
            }
        return record

    async def ensure_seeded(self) -> int:
        """Load the collection (seeding it if absent) and return its size."""
        return len(await self._articles.load())

    async def _load(self) -> list[Article]:
        return [self._to_entity(r) for r in await self._articles.load()]

    async def list_articles(self, query: ArticleQuery) -> ArticlePage:
        articles = await self._load()

        search = (query.search or "").lower()
        if search:
            articles = [
                a for a in articles
                if contains(a.title, search) or contains(a.description, search)
            ]
        if query.category:
            wanted = query.category.lower()
            articles = [a for a in articles if a.category.lower() == wanted]

        items = paginate(articles, query.page, query.limit)
        return ArticlePage(
            articles=[to_response(a) for a in items],
            total=len(articles),
            page=query.page,
            limit=query.limit,
        )

    async def get_article(self, article_id: int) -> ArticleResponse:
        for article in await self._load():
            if article.id == article_id:
                return to_response(article)
        raise EntityNotFoundError("Article", article_id)

    async def get_article_by_slug(self, slug: str) -> ArticleResponse:
        for article in await self._load():
            if slugify(article.title) == slug:
                return to_response(article)
        raise EntityNotFoundError("Article", slug, field="slug")

    async def create_article(self, data: ArticleCreate, token: str | None) -> ArticleResponse:
        records = await self._articles.load()
        article = Article(
            id=SeededCollection.next_id(records),
            title=data.title,
            description=data.description,
            author=data.author,
            category=data.category,
            date=data.published_at or datetime.now(timezone.utc).date().isoformat(),
            tags=list(data.tags),
            hero_image=data.image_url,
            content=ArticleContent(introduction=data.content) if data.content else None,
        )
        await self._articles.save([self._to_record(article), *records])
        logger.info("Created article %d: %s", article.id, article.title)
        return to_response(article)

    async def update_article(
        self, article_id: int, data: ArticleUpdate, token: str | None
    ) -> ArticleResponse:
        articles = await self._load()
        article = next((a for a in articles if a.id == article_id), None)
        if article is None:
            raise EntityNotFoundError("Article", article_id)

        article.update(
            title=data.title,
            description=data.description,
            date=data.published_at,
            author=data.author,
            category=data.category,
            tags=data.tags,
            hero_image=data.image_url,
            introduction=data.content,
        )
        await self._articles.save([self._to_record(a) for a in articles])
        logger.info("Updated article %d", article_id)
        return to_response(article)

    async def delete_article(self, article_id: int, token: str | None) -> None:
        records = await self._articles.load()
        remaining = [r for r in records if r["id"] != article_id]
        if len(remaining) == len(records):
            raise EntityNotFoundError("Article", article_id)
        await self._articles.save(remaining)
        logger.info("Deleted article %d", article_id)
