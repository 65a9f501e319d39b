"""Unit tests for ApiClient: envelopes, token handling and the HTTP backend."""

import json

import httpx
import pytest

from cms.application.schemas import (
    ArticleQuery,
    CategoryCreate,
    CategoryQuery,
    LoginRequest,
    RegisterRequest,
)
from cms.application.services import ApiClient
from cms.application.services.api_client import TOKEN_KEY
from cms.config import Settings
from cms.domain.exceptions import AuthenticationRequiredError, NetworkError
from cms.infrastructure.dependencies import USE_MOCK_FLAG_KEY, build_api_client
from cms.infrastructure.http import HttpBackend
from cms.infrastructure.mock import MockArticleBackend, MockAuthBackend, MockCategoryBackend
from cms.infrastructure.storage import InMemoryKeyValueStore

BASE_URL = "https://cms.test/api"

_CATEGORY = {
    "id": 6,
    "name": "Security",
    "description": None,
    "created_at": "2024-01-01T00:00:00Z",
    "updated_at": "2024-01-01T00:00:00Z",
}


# ── Fakes ───────────────────────────────────────────────────────────


class UnreachableLogoutAuth(MockAuthBackend):
    async def logout(self, token):
        raise NetworkError("connection refused")


def _mock_client(store: InMemoryKeyValueStore, auth: MockAuthBackend | None = None) -> ApiClient:
    return ApiClient(
        auth=auth or MockAuthBackend(store),
        articles=MockArticleBackend(store),
        categories=MockCategoryBackend(store),
        store=store,
    )


def _http_client(handler, store: InMemoryKeyValueStore) -> ApiClient:
    backend = HttpBackend(
        BASE_URL,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    return ApiClient(auth=backend, articles=backend, categories=backend, store=store)


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, api_base_url=BASE_URL, **overrides)


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


# ── Mock path ───────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_login_success_stores_token(store):
    client = _mock_client(store)

    response = await client.login(LoginRequest(username="admin", password="password123"))

    assert response.success
    assert response.data.user.username == "admin"
    assert client.token == "mock-token-1"
    assert client.is_authenticated()
    assert await store.get_item(TOKEN_KEY) == "mock-token-1"


@pytest.mark.asyncio
async def test_login_failure_becomes_error_envelope(store):
    client = _mock_client(store)

    response = await client.login(LoginRequest(username="admin", password="wrong-password"))

    assert not response.success
    assert response.data is None
    assert response.message == "Invalid username or password"
    assert client.token is None


@pytest.mark.asyncio
async def test_register_logs_in_implicitly(store):
    client = _mock_client(store)

    response = await client.register(RegisterRequest(username="newbie", password="secret1"))
    profile = await client.get_user_profile()

    assert response.success
    assert client.token == "mock-token-4"
    assert profile.data.username == "newbie"


@pytest.mark.asyncio
async def test_duplicate_register_reports_username_taken(store):
    response = await _mock_client(store).register(RegisterRequest(username="User1", password="secret1"))

    assert not response.success
    assert response.message == "Username already exists"


@pytest.mark.asyncio
async def test_logout_clears_token_even_when_backend_fails(store):
    client = _mock_client(store, auth=UnreachableLogoutAuth(store))
    await client.set_token("mock-token-1")

    await client.logout()

    assert client.token is None
    assert await store.get_item(TOKEN_KEY) is None


@pytest.mark.asyncio
async def test_profile_without_token_is_an_error_envelope(store):
    response = await _mock_client(store).get_user_profile()

    assert not response.success
    assert response.message == "Not authenticated"


@pytest.mark.asyncio
async def test_restore_token_reads_persisted_value(store):
    await store.set_item(TOKEN_KEY, "mock-token-2")
    client = _mock_client(store)

    assert await client.restore_token() == "mock-token-2"
    assert (await client.get_user_profile()).data.username == "user1"


@pytest.mark.asyncio
async def test_missing_article_is_error_envelope(store):
    response = await _mock_client(store).get_article(404)

    assert not response.success
    assert response.message == "Article with id '404' not found"


@pytest.mark.asyncio
async def test_related_articles_exclude_current(store):
    response = await _mock_client(store).get_related_articles(7)

    assert response.success
    assert [a.id for a in response.data] == [1, 2, 3]


# ── HTTP path ───────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_protected_write_without_token_fails_before_sending(store):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={})

    client = _http_client(handler, store)

    with pytest.raises(AuthenticationRequiredError) as exc_info:
        await client.create_category(CategoryCreate(name="Security"))
    with pytest.raises(AuthenticationRequiredError):
        await client.delete_article(1)

    assert exc_info.value.message == "Authentication required to create category"
    assert calls == []


@pytest.mark.asyncio
async def test_bearer_token_and_envelope_unwrapping(store):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        seen["url"] = str(request.url)
        return httpx.Response(201, json={"success": True, "data": _CATEGORY})

    client = _http_client(handler, store)
    await client.set_token("real-token")

    response = await client.create_category(CategoryCreate(name="Security"))

    assert response.success
    assert response.data.id == 6
    assert seen["auth"] == "Bearer real-token"
    assert seen["body"] == {"name": "Security"}
    assert seen["url"] == f"{BASE_URL}/categories"


@pytest.mark.asyncio
async def test_bare_json_body_is_passed_through(store):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_CATEGORY)

    response = await _http_client(handler, store).get_category(6)

    assert response.success
    assert response.data.name == "Security"


@pytest.mark.asyncio
async def test_query_parameters_use_wire_names(store):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"articles": [], "total": 0, "page": 2, "limit": 5})

    client = _http_client(handler, store)
    await client.get_articles(ArticleQuery(page=2, limit=5, search="", sort_by="publishedAt"))

    assert seen["params"] == {"page": "2", "limit": "5", "sortBy": "publishedAt"}


@pytest.mark.asyncio
async def test_error_message_comes_from_body(store):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"message": "Database exploded"})

    response = await _http_client(handler, store).get_categories(CategoryQuery())

    assert not response.success
    assert response.message == "Database exploded"


@pytest.mark.asyncio
async def test_error_without_body_falls_back_to_status(store):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    response = await _http_client(handler, store).get_category(1)

    assert response.message == "Request failed with status 503"
    assert response.error == "HTTP error! status: 503"


@pytest.mark.asyncio
async def test_failed_envelope_on_success_status(store):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"success": False, "message": "Nope", "error": "E1"})

    response = await _http_client(handler, store).get_category(1)

    assert not response.success
    assert response.message == "Nope"
    assert response.error == "E1"


@pytest.mark.asyncio
async def test_transport_failure_is_network_error_envelope(store):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    response = await _http_client(handler, store).login(
        LoginRequest(username="admin", password="password123")
    )

    assert not response.success
    assert response.message == "Failed to connect to server"
    assert response.error == "connection refused"


@pytest.mark.asyncio
async def test_logout_swallows_transport_failure(store):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("down", request=request)

    client = _http_client(handler, store)
    await client.set_token("real-token")

    await client.logout()

    assert client.token is None


# ── Wiring ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_stored_flag_switches_auth_to_mock(store):
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError(f"unexpected request to {request.url}")

    await store.set_item(USE_MOCK_FLAG_KEY, "true")
    client = await build_api_client(
        store,
        _settings(use_mock_api=False),
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    response = await client.login(LoginRequest(username="admin", password="password123"))
    assert response.success
    assert (await client.get_categories()).data.total == 5


@pytest.mark.asyncio
async def test_without_flag_auth_goes_remote_and_articles_stay_mock(store):
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.path)
        return httpx.Response(
            200,
            json={"success": True, "data": {"token": "jwt", "user": {"id": 9, "username": "remote", "role": "user"}}},
        )

    client = await build_api_client(
        store,
        _settings(use_mock_api=False, mock_articles=True),
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    login = await client.login(LoginRequest(username="remote", password="secret1"))
    articles = await client.get_articles(ArticleQuery(limit=2))

    assert login.data.user.id == 9
    assert client.token == "jwt"
    assert articles.data.total == 9
    assert requested == ["/api/auth/login"]


@pytest.mark.asyncio
async def test_build_restores_persisted_token(store):
    await store.set_item(TOKEN_KEY, "mock-token-3")

    client = await build_api_client(store, _settings(use_mock_api=True))

    assert client.token == "mock-token-3"
    assert (await client.get_user_profile()).data.username == "user2"
