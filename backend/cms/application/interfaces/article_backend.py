"""Port for article operations."""

from abc import ABC, abstractmethod

from cms.application.schemas import (
    ArticleCreate,
    ArticlePage,
    ArticleQuery,
    ArticleResponse,
    ArticleUpdate,
)


class ArticleBackend(ABC):
    """Article CRUD. Reads return the public article shape."""

    @abstractmethod
    async def list_articles(self, query: ArticleQuery) -> ArticlePage:
        """Filtered, paginated list; ``total`` counts the filtered set."""
        ...

    @abstractmethod
    async def get_article(self, article_id: int) -> ArticleResponse:
        """Raises EntityNotFoundError when the id is unknown."""
        ...

    @abstractmethod
    async def get_article_by_slug(self, slug: str) -> ArticleResponse:
        """Raises EntityNotFoundError when no title slugifies to ``slug``."""
        ...

    @abstractmethod
    async def create_article(self, data: ArticleCreate, token: str | None) -> ArticleResponse:
        ...

    @abstractmethod
    async def update_article(
        self, article_id: int, data: ArticleUpdate, token: str | None
    ) -> ArticleResponse:
        ...

    @abstractmethod
    async def delete_article(self, article_id: int, token: str | None) -> None:
        ...
