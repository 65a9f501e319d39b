"""Unit tests for MockArticleBackend: listing, search, CRUD and the lost-update race."""

import asyncio
import json
from datetime import datetime, timezone

import pytest

from cms.application.schemas import ArticleCreate, ArticleQuery, ArticleUpdate
from cms.domain.exceptions import EntityNotFoundError
from cms.infrastructure.mock import ARTICLES_KEY, MockArticleBackend
from cms.infrastructure.storage import InMemoryKeyValueStore


# ── Fakes ───────────────────────────────────────────────────────────


class YieldingStore(InMemoryKeyValueStore):
    """Reads a value, then hands control back to the event loop before returning it."""

    async def get_item(self, key: str) -> str | None:
        value = await super().get_item(key)
        await asyncio.sleep(0)
        return value


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def backend(store):
    return MockArticleBackend(store)


# ── Listing ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_first_list_seeds_the_store(store, backend):
    page = await backend.list_articles(ArticleQuery())

    assert page.total == 9
    assert len(page.articles) == 9
    assert len(json.loads(await store.get_item(ARTICLES_KEY))) == 9


@pytest.mark.asyncio
async def test_second_page_follows_storage_order(backend):
    page = await backend.list_articles(ArticleQuery(page=2, limit=3))

    assert [a.id for a in page.articles] == [3, 4, 5]
    assert page.total == 9
    assert page.total_pages == 3


@pytest.mark.asyncio
async def test_page_past_the_end_is_empty(backend):
    page = await backend.list_articles(ArticleQuery(page=5, limit=3))
    assert page.articles == []
    assert page.total == 9


@pytest.mark.asyncio
async def test_search_matches_title_or_description_case_insensitively(backend):
    page = await backend.list_articles(ArticleQuery(search="DeBuGgInG"))
    assert [a.id for a in page.articles] == [5]

    page = await backend.list_articles(ArticleQuery(search="design"))
    assert [a.id for a in page.articles] == [7, 3, 6, 9]
    assert page.total == 4


@pytest.mark.asyncio
async def test_category_filter_and_ignored_sort(backend):
    page = await backend.list_articles(
        ArticleQuery(category="technology", sort_by="publishedAt", from_="2025-01-01", limit=2)
    )

    assert [a.id for a in page.articles] == [1, 2]
    assert page.total == 5


@pytest.mark.asyncio
async def test_public_shape_carries_introduction_and_slug(backend):
    article = await backend.get_article(7)

    assert article.slug == "figmas-new-dev-mode-a-game-changer-for-designers-developers"
    assert article.content.startswith("Collaboration between designers")
    assert article.published_at == "February 4, 2025"


# ── Create / update / delete ────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_prepends_with_next_id_and_default_date(backend):
    created = await backend.create_article(
        ArticleCreate(title="Hello World", category="Technology", content="Intro", tags="a, b,,c"),
        token=None,
    )
    page = await backend.list_articles(ArticleQuery(limit=1))

    assert created.id == 10
    assert created.tags == ["a", "b", "c"]
    assert created.published_at == datetime.now(timezone.utc).date().isoformat()
    assert page.articles[0].id == 10
    assert page.total == 10


@pytest.mark.asyncio
async def test_partial_update_keeps_sections_and_other_fields(store, backend):
    updated = await backend.update_article(1, ArticleUpdate(content="New intro"), token=None)

    assert updated.content == "New intro"
    assert updated.title == "Cybersecurity Essentials Every Developer Should Know"
    assert updated.tags == ["Technology", "Security"]

    stored = next(r for r in json.loads(await store.get_item(ARTICLES_KEY)) if r["id"] == 1)
    assert stored["content"]["introduction"] == "New intro"
    assert len(stored["content"]["sections"]) == 3
    assert stored["content"]["conclusion"].startswith("Security is an ongoing process")


@pytest.mark.asyncio
async def test_slug_follows_title_edits(backend):
    await backend.update_article(9, ArticleUpdate(title="Eleven UI Trends"), token=None)

    article = await backend.get_article_by_slug("eleven-ui-trends")
    assert article.id == 9
    with pytest.raises(EntityNotFoundError):
        await backend.get_article_by_slug("10-ui-trends-dominating-2025")


@pytest.mark.asyncio
async def test_update_missing_article_raises(backend):
    with pytest.raises(EntityNotFoundError):
        await backend.update_article(404, ArticleUpdate(title="Nope"), token=None)


@pytest.mark.asyncio
async def test_delete_then_not_found_and_total_drops(backend):
    await backend.delete_article(4, token=None)

    with pytest.raises(EntityNotFoundError):
        await backend.get_article(4)
    with pytest.raises(EntityNotFoundError):
        await backend.delete_article(4, token=None)
    assert (await backend.list_articles(ArticleQuery())).total == 8


@pytest.mark.asyncio
async def test_ids_are_not_reused_while_a_higher_id_exists(backend):
    await backend.delete_article(4, token=None)
    created = await backend.create_article(ArticleCreate(title="Fresh", category="AI"), token=None)
    assert created.id == 10


# ── Concurrency ─────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_sequential_creates_get_distinct_ids():
    backend = MockArticleBackend(YieldingStore({ARTICLES_KEY: "[]"}))

    first = await backend.create_article(ArticleCreate(title="One", category="AI"), token=None)
    second = await backend.create_article(ArticleCreate(title="Two", category="AI"), token=None)

    assert (first.id, second.id) == (1, 2)
    assert [a.id for a in (await backend.list_articles(ArticleQuery())).articles] == [2, 1]


@pytest.mark.asyncio
async def test_interleaved_creates_lose_an_update():
    """Mutations are load → transform → save with no lock: the last save wins."""
    store = YieldingStore({ARTICLES_KEY: "[]"})
    backend = MockArticleBackend(store)

    first, second = await asyncio.gather(
        backend.create_article(ArticleCreate(title="One", category="AI"), token=None),
        backend.create_article(ArticleCreate(title="Two", category="AI"), token=None),
    )

    assert first.id == second.id == 1
    stored = json.loads(await store.get_item(ARTICLES_KEY))
    assert len(stored) == 1
