"""Pydantic DTOs for the Category feature."""

import math
from datetime import datetime

from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    """Schema for creating a new category."""

    name: str = Field(..., min_length=1, max_length=100, examples=["Technology"])
    description: str | None = None


class CategoryUpdate(BaseModel):
    """Schema for updating an existing category: all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None


class CategoryResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    name: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CategoryQuery(BaseModel):
    """List parameters for ``GET /categories``."""

    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)
    search: str | None = None

    def to_params(self) -> dict[str, str]:
        params = self.model_dump(exclude_none=True)
        return {key: str(value) for key, value in params.items() if value != ""}


class CategoryPage(BaseModel):
    categories: list[CategoryResponse]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total / self.limit))
