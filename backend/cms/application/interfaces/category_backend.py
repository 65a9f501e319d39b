"""Port for category operations."""

from abc import ABC, abstractmethod

from cms.application.schemas import (
    CategoryCreate,
    CategoryPage,
    CategoryQuery,
    CategoryResponse,
    CategoryUpdate,
)


class CategoryBackend(ABC):
    """Category CRUD."""

    @abstractmethod
    async def list_categories(self, query: CategoryQuery) -> CategoryPage:
        ...

    @abstractmethod
    async def get_category(self, category_id: int) -> CategoryResponse:
        ...

    @abstractmethod
    async def create_category(self, data: CategoryCreate, token: str | None) -> CategoryResponse:
        ...

    @abstractmethod
    async def update_category(
        self, category_id: int, data: CategoryUpdate, token: str | None
    ) -> CategoryResponse:
        ...

    @abstractmethod
    async def delete_category(self, category_id: int, token: str | None) -> None:
        ...
