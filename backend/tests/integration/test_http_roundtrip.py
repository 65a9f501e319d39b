"""End-to-end tests: ApiClient over HttpBackend against the dev server."""

import httpx
import pytest

from cms.application.schemas import (
    ArticleCreate,
    CategoryCreate,
    CategoryUpdate,
    LoginRequest,
    ProfileUpdate,
    RegisterRequest,
)
from cms.application.services import AuthSession
from cms.config import Settings
from cms.domain.exceptions import AuthenticationRequiredError
from cms.infrastructure.dependencies import build_api_client
from cms.infrastructure.storage import InMemoryKeyValueStore
from cms.main import create_app


def _settings() -> Settings:
    return Settings(
        _env_file=None,
        api_base_url="http://test/api",
        use_mock_api=False,
        mock_articles=False,
    )


@pytest.fixture
def server_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def http_client(server_store):
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=create_app(server_store)))


@pytest.mark.asyncio
async def test_admin_creates_category_over_http(http_client):
    client = await build_api_client(InMemoryKeyValueStore(), _settings(), http_client=http_client)

    login = await client.login(LoginRequest(username="admin", password="password123"))
    created = await client.create_category(CategoryCreate(name="Security"))
    renamed = await client.update_category(created.data.id, CategoryUpdate(name="InfoSec"))
    listing = await client.get_categories()

    assert login.success
    assert client.token == "mock-token-1"
    assert created.data.id == 6
    assert renamed.data.name == "InfoSec"
    assert listing.data.categories[-1].name == "InfoSec"


@pytest.mark.asyncio
async def test_registered_user_cannot_write(http_client):
    client = await build_api_client(InMemoryKeyValueStore(), _settings(), http_client=http_client)

    registered = await client.register(RegisterRequest(username="writer", password="secret1"))
    response = await client.create_article(ArticleCreate(title="Mine", category="AI"))

    assert registered.success
    assert not response.success
    assert response.message == "Role 'admin' required"


@pytest.mark.asyncio
async def test_logout_then_write_fails_fast(http_client):
    client = await build_api_client(InMemoryKeyValueStore(), _settings(), http_client=http_client)
    await client.login(LoginRequest(username="admin", password="password123"))

    await client.logout()

    with pytest.raises(AuthenticationRequiredError):
        await client.create_category(CategoryCreate(name="Security"))


@pytest.mark.asyncio
async def test_errors_arrive_as_envelopes(http_client):
    client = await build_api_client(InMemoryKeyValueStore(), _settings(), http_client=http_client)

    bad_login = await client.login(LoginRequest(username="admin", password="wrong-password"))
    missing = await client.get_category(999)

    assert bad_login.message == "Invalid username or password"
    assert client.token is None
    assert not missing.success
    assert missing.message == "Category with id '999' not found"


@pytest.mark.asyncio
async def test_articles_read_over_http(http_client):
    client = await build_api_client(InMemoryKeyValueStore(), _settings(), http_client=http_client)

    page = await client.get_articles()
    by_slug = await client.get_article_by_slug(page.data.articles[0].slug)

    assert page.data.total == 9
    assert by_slug.data.id == page.data.articles[0].id


@pytest.mark.asyncio
async def test_session_over_http(http_client):
    client_store = InMemoryKeyValueStore()
    client = await build_api_client(client_store, _settings(), http_client=http_client)

    async with AuthSession(client) as session:
        assert not session.is_authenticated
        await session.login(LoginRequest(username="admin", password="password123"))
        result = await session.update_profile(ProfileUpdate(email="root@example.org"))

    assert result.success
    assert session.user.email == "root@example.org"

    # A fresh client over the same local store picks the session back up.
    restored = await build_api_client(client_store, _settings(), http_client=http_client)
    async with AuthSession(restored) as again:
        assert again.is_admin


@pytest.mark.asyncio
async def test_server_validation_message_reaches_client(http_client):
    client = await build_api_client(InMemoryKeyValueStore(), _settings(), http_client=http_client)
    await client.login(LoginRequest(username="user1", password="password123"))

    # Skips client-side validation so the server rejects the payload.
    response = await client.update_user_profile(ProfileUpdate.model_construct(username="ab"))

    assert not response.success
    assert response.message == "String should have at least 3 characters"
