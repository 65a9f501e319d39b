"""Category CRUD endpoints. Reads are public; writes need an admin token."""

from fastapi import APIRouter, Depends, Query, status

from cms.application.schemas import (
    ApiResponse,
    CategoryCreate,
    CategoryPage,
    CategoryQuery,
    CategoryResponse,
    CategoryUpdate,
)
from cms.infrastructure.dependencies import (
    get_bearer_token,
    get_category_backend,
    require_admin,
)
from cms.infrastructure.mock import MockCategoryBackend

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get(
    "",
    response_model=ApiResponse[CategoryPage],
    response_model_exclude_none=True,
)
async def list_categories(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    search: str | None = None,
    backend: MockCategoryBackend = Depends(get_category_backend),
) -> ApiResponse[CategoryPage]:
    query = CategoryQuery(page=page, limit=limit, search=search)
    return ApiResponse.ok(await backend.list_categories(query))


@router.get(
    "/{category_id}",
    response_model=ApiResponse[CategoryResponse],
    response_model_exclude_none=True,
)
async def get_category(
    category_id: int,
    backend: MockCategoryBackend = Depends(get_category_backend),
) -> ApiResponse[CategoryResponse]:
    return ApiResponse.ok(await backend.get_category(category_id))


@router.post(
    "",
    response_model=ApiResponse[CategoryResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_category(
    data: CategoryCreate,
    token: str | None = Depends(get_bearer_token),
    backend: MockCategoryBackend = Depends(get_category_backend),
) -> ApiResponse[CategoryResponse]:
    """Create a category at the end of the listing."""
    return ApiResponse.ok(await backend.create_category(data, token))


@router.put(
    "/{category_id}",
    response_model=ApiResponse[CategoryResponse],
    response_model_exclude_none=True,
    dependencies=[Depends(require_admin)],
)
async def update_category(
    category_id: int,
    data: CategoryUpdate,
    token: str | None = Depends(get_bearer_token),
    backend: MockCategoryBackend = Depends(get_category_backend),
) -> ApiResponse[CategoryResponse]:
    return ApiResponse.ok(await backend.update_category(category_id, data, token))


@router.delete(
    "/{category_id}",
    response_model=ApiResponse[None],
    response_model_exclude_none=True,
    dependencies=[Depends(require_admin)],
)
async def delete_category(
    category_id: int,
    token: str | None = Depends(get_bearer_token),
    backend: MockCategoryBackend = Depends(get_category_backend),
) -> ApiResponse[None]:
    await backend.delete_category(category_id, token)
    return ApiResponse.ok(None, message="Category deleted")
