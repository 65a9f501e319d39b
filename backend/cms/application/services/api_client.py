"""API facade: the single entry point callers use for every CMS operation.

Backends are chosen once, at construction (see
``cms.infrastructure.dependencies.build_api_client``), so nothing here
branches on mock vs. remote. Every method returns an ``ApiResponse``
envelope; domain errors become ``success=False``. The one exception is
``AuthenticationRequiredError``, raised by the remote backend before a
protected write is sent without a token, which propagates to the caller.
"""

import logging
from collections.abc import Awaitable
from typing import Any, TypeVar

from cms.application.interfaces import (
    ArticleBackend,
    AuthBackend,
    CategoryBackend,
    KeyValueStore,
)
from cms.application.schemas import (
    ApiResponse,
    ArticleCreate,
    ArticlePage,
    ArticleQuery,
    ArticleResponse,
    ArticleUpdate,
    AuthResult,
    CategoryCreate,
    CategoryPage,
    CategoryQuery,
    CategoryResponse,
    CategoryUpdate,
    LoginRequest,
    ProfileUpdate,
    RegisterRequest,
    UserProfile,
)
from cms.domain.exceptions import AuthenticationRequiredError, CmsError

logger = logging.getLogger(__name__)

T = TypeVar("T")

TOKEN_KEY = "auth_token"


class ApiClient:
    """Orchestrates auth, article and category calls and owns the session token."""

    def __init__(
        self,
        auth: AuthBackend,
        articles: ArticleBackend,
        categories: CategoryBackend,
        store: KeyValueStore,
    ):
        self._auth = auth
        self._articles = articles
        self._categories = categories
        self._store = store
        self._token: str | None = None

    # ── Token management ────────────────────────────────────────────

    @property
    def token(self) -> str | None:
        return self._token

    def is_authenticated(self) -> bool:
        return bool(self._token)

    async def restore_token(self) -> str | None:
        """Load a previously persisted token into memory."""
        self._token = await self._store.get_item(TOKEN_KEY)
        return self._token

    async def set_token(self, token: str) -> None:
        self._token = token
        await self._store.set_item(TOKEN_KEY, token)

    async def clear_token(self) -> None:
        self._token = None
        await self._store.remove_item(TOKEN_KEY)

    async def _call(self, operation: Awaitable[T]) -> ApiResponse[Any]:
        """Await a backend call and wrap its outcome in the envelope."""
        try:
            data = await operation
        except AuthenticationRequiredError:
            raise
        except CmsError as exc:
            logger.info("API call failed: %s", exc.message)
            return ApiResponse.fail(exc)
        return ApiResponse.ok(data)

    # ── Auth ────────────────────────────────────────────────────────

    async def login(self, credentials: LoginRequest) -> ApiResponse[AuthResult]:
        response = await self._call(self._auth.login(credentials))
        if response.success and response.data.token:
            await self.set_token(response.data.token)
        return response

    async def register(self, data: RegisterRequest) -> ApiResponse[AuthResult]:
        response = await self._call(self._auth.register(data))
        if response.success and response.data.token:
            await self.set_token(response.data.token)
        return response

    async def logout(self) -> None:
        """End the session. The local token is cleared even if the backend call fails."""
        try:
            await self._auth.logout(self._token)
        except CmsError as exc:
            logger.warning("Logout failed: %s", exc.message)
        finally:
            await self.clear_token()

    async def get_user_profile(self) -> ApiResponse[UserProfile]:
        return await self._call(self._auth.get_profile(self._token))

    async def update_user_profile(self, data: ProfileUpdate) -> ApiResponse[UserProfile]:
        return await self._call(self._auth.update_profile(self._token, data))

    # ── Articles ────────────────────────────────────────────────────

    async def get_articles(self, query: ArticleQuery | None = None) -> ApiResponse[ArticlePage]:
        return await self._call(self._articles.list_articles(query or ArticleQuery()))

    async def get_article(self, article_id: int) -> ApiResponse[ArticleResponse]:
        return await self._call(self._articles.get_article(article_id))

    async def get_article_by_slug(self, slug: str) -> ApiResponse[ArticleResponse]:
        return await self._call(self._articles.get_article_by_slug(slug))

    async def get_related_articles(
        self, article_id: int, limit: int = 3
    ) -> ApiResponse[list[ArticleResponse]]:
        """Other articles in listing order, excluding ``article_id``."""
        response = await self.get_articles(ArticleQuery(limit=limit + 1))
        if not response.success:
            return response
        related = [a for a in response.data.articles if a.id != article_id][:limit]
        return ApiResponse.ok(related)

    async def create_article(self, data: ArticleCreate) -> ApiResponse[ArticleResponse]:
        return await self._call(self._articles.create_article(data, self._token))

    async def update_article(
        self, article_id: int, data: ArticleUpdate
    ) -> ApiResponse[ArticleResponse]:
        return await self._call(self._articles.update_article(article_id, data, self._token))

    async def delete_article(self, article_id: int) -> ApiResponse[None]:
        return await self._call(self._articles.delete_article(article_id, self._token))

    # ── Categories ──────────────────────────────────────────────────

    async def get_categories(self, query: CategoryQuery | None = None) -> ApiResponse[CategoryPage]:
        return await self._call(self._categories.list_categories(query or CategoryQuery()))

    async def get_category(self, category_id: int) -> ApiResponse[CategoryResponse]:
        return await self._call(self._categories.get_category(category_id))

    async def create_category(self, data: CategoryCreate) -> ApiResponse[CategoryResponse]:
        return await self._call(self._categories.create_category(data, self._token))

    async def update_category(
        self, category_id: int, data: CategoryUpdate
    ) -> ApiResponse[CategoryResponse]:
        return await self._call(self._categories.update_category(category_id, data, self._token))

    async def delete_category(self, category_id: int) -> ApiResponse[None]:
        return await self._call(self._categories.delete_category(category_id, self._token))
