"""Wiring: builds stores, backends and the ApiClient; FastAPI dependencies for the dev server."""

import logging

import httpx
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from cms.application.interfaces import KeyValueStore
from cms.application.schemas import UserProfile
from cms.application.services import ApiClient
from cms.config import Settings, get_settings
from cms.domain.entities import Role
from cms.domain.exceptions import (
    EntityNotFoundError,
    NotAuthenticatedError,
    PermissionDeniedError,
)
from cms.infrastructure.http import HttpBackend
from cms.infrastructure.mock import MockArticleBackend, MockAuthBackend, MockCategoryBackend
from cms.infrastructure.storage import InMemoryKeyValueStore, JsonFileKeyValueStore

logger = logging.getLogger(__name__)

USE_MOCK_FLAG_KEY = "use_mock_api"

_bearer = HTTPBearer(auto_error=False)


def build_key_value_store(settings: Settings | None = None) -> KeyValueStore:
    """Create the key/value store selected by ``storage_backend``."""
    settings = settings or get_settings()
    backend = settings.storage_backend.lower()
    if backend == "json":
        return JsonFileKeyValueStore(settings.storage_path)
    if backend != "memory":
        logger.warning("Unknown storage_backend '%s', using memory", settings.storage_backend)
    return InMemoryKeyValueStore()


async def use_mock_api(store: KeyValueStore, settings: Settings | None = None) -> bool:
    """Runtime toggle: the setting, or a ``use_mock_api == "true"`` flag in the store."""
    settings = settings or get_settings()
    if settings.use_mock_api:
        return True
    return await store.get_item(USE_MOCK_FLAG_KEY) == "true"


async def build_api_client(
    store: KeyValueStore,
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> ApiClient:
    """Pick mock or HTTP backends once per resource and return a ready ApiClient.

    Articles follow ``mock_articles``; auth and categories follow the runtime
    mock toggle. The persisted token is restored before returning.
    """
    settings = settings or get_settings()
    mock = await use_mock_api(store, settings)

    remote: HttpBackend | None = None
    if not (mock and settings.mock_articles):
        remote = HttpBackend(
            base_url=settings.api_base_url,
            timeout=settings.request_timeout,
            http_client=http_client,
        )

    client = ApiClient(
        auth=MockAuthBackend(store) if mock else remote,
        articles=MockArticleBackend(store) if settings.mock_articles else remote,
        categories=MockCategoryBackend(store) if mock else remote,
        store=store,
    )
    await client.restore_token()
    logger.info(
        "ApiClient ready: auth/categories=%s, articles=%s",
        "mock" if mock else "remote",
        "mock" if settings.mock_articles else "remote",
    )
    return client


# ── FastAPI dependencies (dev server) ───────────────────────────────


def get_store(request: Request) -> KeyValueStore:
    """The key/value store attached to the running app."""
    return request.app.state.store


def get_auth_backend(store: KeyValueStore = Depends(get_store)) -> MockAuthBackend:
    return MockAuthBackend(store)


def get_article_backend(store: KeyValueStore = Depends(get_store)) -> MockArticleBackend:
    return MockArticleBackend(store)


def get_category_backend(store: KeyValueStore = Depends(get_store)) -> MockCategoryBackend:
    return MockCategoryBackend(store)


def get_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> str | None:
    return credentials.credentials if credentials else None


async def get_current_user(
    token: str | None = Depends(get_bearer_token),
    auth: MockAuthBackend = Depends(get_auth_backend),
) -> UserProfile:
    """Resolve the bearer token to a profile; 401 when missing or stale."""
    if not token:
        raise NotAuthenticatedError()
    try:
        return await auth.get_profile(token)
    except EntityNotFoundError as exc:
        raise NotAuthenticatedError("Session user no longer exists") from exc


async def require_admin(user: UserProfile = Depends(get_current_user)) -> UserProfile:
    if user.role != Role.ADMIN.value:
        raise PermissionDeniedError(Role.ADMIN.value)
    return user
