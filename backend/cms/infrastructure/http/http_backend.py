"""HTTP backend: implements the auth, article and category ports over REST.

Communicates with the remote CMS API using httpx. Every response is
unwrapped from the ``{success, data, message?, error?}`` envelope; failures
become domain exceptions for ``ApiClient`` to normalize.
"""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from cms.application.interfaces import ArticleBackend, AuthBackend, CategoryBackend
from cms.application.schemas import (
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
from cms.domain.exceptions import (
    AuthenticationRequiredError,
    CmsError,
    HttpError,
    NetworkError,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class HttpBackend(AuthBackend, ArticleBackend, CategoryBackend):
    """Infrastructure adapter: connects to the remote CMS REST API.

    An injected ``httpx.AsyncClient`` is reused across calls; otherwise a
    short-lived client is created per request.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    def _get_headers(self, token: str | None) -> dict[str, str]:
        """JSON headers, plus the bearer token when one is present."""
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    @staticmethod
    def _require_token(token: str | None, operation: str) -> None:
        """Fail fast before a protected call goes out without credentials."""
        if not token:
            raise AuthenticationRequiredError(operation)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        token: str | None = None,
        json: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> Any:
        """Send one request and return the envelope's ``data`` (or the bare body)."""
        url = f"{self._base_url}{path}"

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                response = await client.request(
                    method, url, headers=self._get_headers(token), json=json, params=params
                )
            except httpx.HTTPError as exc:
                logger.error("API request failed: %s %s (%s)", method, url, exc)
                raise NetworkError(str(exc) or type(exc).__name__) from exc
        finally:
            if should_close:
                await client.aclose()

        body = self._parse_body(response)

        if not response.is_success:
            self._raise_http_error(response.status_code, body)

        if isinstance(body, dict) and "success" in body:
            if not body["success"]:
                raise HttpError(
                    response.status_code,
                    body.get("message") or "Request failed",
                    detail=body.get("error"),
                )
            return body.get("data")
        return body

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        """Decode JSON bodies; wrap anything else as ``{"message": text}``."""
        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            try:
                return response.json()
            except ValueError:
                pass
        return {"message": response.text}

    @staticmethod
    def _raise_http_error(status_code: int, body: Any) -> None:
        """Raise HttpError from a non-2xx response body."""
        data = body if isinstance(body, dict) else {}
        detail = data.get("detail") if isinstance(data.get("detail"), str) else None
        message = data.get("message") or detail or f"Request failed with status {status_code}"
        error = data.get("message") or data.get("error") or f"HTTP error! status: {status_code}"
        raise HttpError(status_code, message, detail=error)

    @staticmethod
    def _parse(model: type[ModelT], data: Any) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise CmsError("Unexpected response from server", detail=str(exc)) from exc

    # ── Auth ────────────────────────────────────────────────────────

    async def login(self, credentials: LoginRequest) -> AuthResult:
        data = await self._request("POST", "/auth/login", json=credentials.model_dump())
        return self._parse(AuthResult, data)

    async def register(self, data: RegisterRequest) -> AuthResult:
        body = await self._request("POST", "/auth/register", json=data.model_dump(exclude_none=True))
        return self._parse(AuthResult, body)

    async def logout(self, token: str | None) -> None:
        try:
            await self._request("POST", "/auth/logout", token=token)
        except CmsError as exc:
            logger.warning("Logout request failed: %s", exc.message)

    async def get_profile(self, token: str | None) -> UserProfile:
        data = await self._request("GET", "/user/profile", token=token)
        return self._parse(UserProfile, data)

    async def update_profile(self, token: str | None, data: ProfileUpdate) -> UserProfile:
        body = await self._request(
            "PUT", "/user/profile", token=token, json=data.model_dump(exclude_none=True)
        )
        return self._parse(UserProfile, body)

    # ── Articles ────────────────────────────────────────────────────

    async def list_articles(self, query: ArticleQuery) -> ArticlePage:
        data = await self._request("GET", "/articles", params=query.to_params())
        return self._parse(ArticlePage, data)

    async def get_article(self, article_id: int) -> ArticleResponse:
        data = await self._request("GET", f"/articles/{article_id}")
        return self._parse(ArticleResponse, data)

    async def get_article_by_slug(self, slug: str) -> ArticleResponse:
        data = await self._request("GET", f"/articles/slug/{slug}")
        return self._parse(ArticleResponse, data)

    async def create_article(self, data: ArticleCreate, token: str | None) -> ArticleResponse:
        self._require_token(token, "create article")
        body = await self._request(
            "POST", "/articles", token=token, json=data.model_dump(exclude_none=True)
        )
        return self._parse(ArticleResponse, body)

    async def update_article(
        self, article_id: int, data: ArticleUpdate, token: str | None
    ) -> ArticleResponse:
        self._require_token(token, "update article")
        body = await self._request(
            "PUT", f"/articles/{article_id}", token=token, json=data.model_dump(exclude_none=True)
        )
        return self._parse(ArticleResponse, body)

    async def delete_article(self, article_id: int, token: str | None) -> None:
        self._require_token(token, "delete article")
        await self._request("DELETE", f"/articles/{article_id}", token=token)

    # ── Categories ──────────────────────────────────────────────────

    async def list_categories(self, query: CategoryQuery) -> CategoryPage:
        data = await self._request("GET", "/categories", params=query.to_params())
        return self._parse(CategoryPage, data)

    async def get_category(self, category_id: int) -> CategoryResponse:
        data = await self._request("GET", f"/categories/{category_id}")
        return self._parse(CategoryResponse, data)

    async def create_category(self, data: CategoryCreate, token: str | None) -> CategoryResponse:
        self._require_token(token, "create category")
        body = await self._request(
            "POST", "/categories", token=token, json=data.model_dump(exclude_none=True)
        )
        return self._parse(CategoryResponse, body)

    async def update_category(
        self, category_id: int, data: CategoryUpdate, token: str | None
    ) -> CategoryResponse:
        self._require_token(token, "update category")
        body = await self._request(
            "PUT", f"/categories/{category_id}", token=token, json=data.model_dump(exclude_none=True)
        )
        return self._parse(CategoryResponse, body)

    async def delete_category(self, category_id: int, token: str | None) -> None:
        self._require_token(token, "delete category")
        await self._request("DELETE", f"/categories/{category_id}", token=token)
