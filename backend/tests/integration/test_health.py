"""Tests for the health check endpoint and app startup."""

import pytest
from httpx import ASGITransport, AsyncClient

from cms.main import create_app, lifespan
from cms.infrastructure.storage import InMemoryKeyValueStore


@pytest.mark.asyncio
async def test_health_check_returns_200():
    """Health endpoint should return 200 with status, version, and environment."""
    transport = ASGITransport(app=create_app(InMemoryKeyValueStore()))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data
    assert "environment" in data


@pytest.mark.asyncio
async def test_lifespan_seeds_empty_store():
    """Startup should write the default collections into an empty store."""
    store = InMemoryKeyValueStore()
    app = create_app(store)

    async with lifespan(app):
        assert sorted(store.keys()) == ["mock_articles", "mock_categories", "mock_users"]
