"""Mock category backend over the key/value store.

Unlike articles, new categories are appended (oldest first).
"""

import logging

from cms.application.interfaces import CategoryBackend, KeyValueStore
from cms.application.schemas import (
    CategoryCreate,
    CategoryPage,
    CategoryQuery,
    CategoryResponse,
    CategoryUpdate,
)
from cms.domain.entities import Category
from cms.domain.exceptions import EntityNotFoundError
from cms.infrastructure.mock.records import contains, from_iso, paginate, to_iso
from cms.infrastructure.mock.seed_data import seed_categories
from cms.infrastructure.storage.collection import Record, SeededCollection

logger = logging.getLogger(__name__)

CATEGORIES_KEY = "mock_categories"


class MockCategoryBackend(CategoryBackend):
    """Implements the CategoryBackend port against the ``mock_categories`` collection."""

    def __init__(self, store: KeyValueStore):
        self._categories = SeededCollection(store, CATEGORIES_KEY, seed_categories)

    @staticmethod
    def _to_entity(record: Record) -> Category:
        return Category(
            id=record["id"],
            name=record["name"],
            description=record.get("description"),
            created_at=from_iso(record["created_at"]),
            updated_at=from_iso(record["updated_at"]),
        )

    @staticmethod
    def _to_record(category: Category) -> Record:
        return {
            "id": category.id,
            "name": category.name,
            "description": category.description,
            "created_at": to_iso(category.created_at),
            "updated_at": to_iso(category.updated_at),
        }

    @staticmethod
    def _to_response(category: Category) -> CategoryResponse:
        return CategoryResponse.model_validate(category, from_attributes=True)

    async def ensure_seeded(self) -> int:
        return len(await self._categories.load())

    async def _load(self) -> list[Category]:
        return [self._to_entity(r) for r in await self._categories.load()]

    async def list_categories(self, query: CategoryQuery) -> CategoryPage:
        categories = await self._load()
        search = (query.search or "").lower()
        if search:
            categories = [c for c in categories if contains(c.name, search)]

        items = paginate(categories, query.page, query.limit)
        return CategoryPage(
            categories=[self._to_response(c) for c in items],
            total=len(categories),
            page=query.page,
            limit=query.limit,
        )

    async def get_category(self, category_id: int) -> CategoryResponse:
        for category in await self._load():
            if category.id == category_id:
                return self._to_response(category)
        raise EntityNotFoundError("Category", category_id)

    async def create_category(self, data: CategoryCreate, token: str | None) -> CategoryResponse:
        records = await self._categories.load()
        category = Category(
            id=SeededCollection.next_id(records),
            name=data.name,
            description=data.description,
        )
        await self._categories.save([*records, self._to_record(category)])
        logger.info("Created category %d: %s", category.id, category.name)
        return self._to_response(category)

    async def update_category(
        self, category_id: int, data: CategoryUpdate, token: str | None
    ) -> CategoryResponse:
        categories = await self._load()
        category = next((c for c in categories if c.id == category_id), None)
        if category is None:
            raise EntityNotFoundError("Category", category_id)

        category.update(name=data.name, description=data.description)
        await self._categories.save([self._to_record(c) for c in categories])
        logger.info("Updated category %d", category_id)
        return self._to_response(category)

    async def delete_category(self, category_id: int, token: str | None) -> None:
        records = await self._categories.load()
        remaining = [r for r in records if r["id"] != category_id]
        if len(remaining) == len(records):
            raise EntityNotFoundError("Category", category_id)
        await self._categories.save(remaining)
        logger.info("Deleted category %d", category_id)
