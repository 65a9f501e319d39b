"""Article CRUD endpoints. Reads are public; writes need an admin token."""

from fastapi import APIRouter, Depends, Query, status

from cms.application.schemas import (
    ApiResponse,
    ArticleCreate,
    ArticlePage,
    ArticleQuery,
    ArticleResponse,
    ArticleUpdate,
)
from cms.application.schemas.article import SortBy
from cms.infrastructure.dependencies import (
    get_article_backend,
    get_bearer_token,
    require_admin,
)
from cms.infrastructure.mock import MockArticleBackend

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get(
    "",
    response_model=ApiResponse[ArticlePage],
    response_model_exclude_none=True,
)
async def list_articles(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    category: str | None = None,
    search: str | None = None,
    from_: str | None = Query(None, alias="from"),
    sort_by: SortBy | None = Query(None, alias="sortBy"),
    backend: MockArticleBackend = Depends(get_article_backend),
) -> ApiResponse[ArticlePage]:
    """Retrieve a filtered, paginated list of articles."""
    query = ArticleQuery(
        page=page,
        limit=limit,
        category=category,
        search=search,
        from_=from_,
        sort_by=sort_by,
    )
    return ApiResponse.ok(await backend.list_articles(query))


@router.get(
    "/slug/{slug}",
    response_model=ApiResponse[ArticleResponse],
    response_model_exclude_none=True,
)
async def get_article_by_slug(
    slug: str,
    backend: MockArticleBackend = Depends(get_article_backend),
) -> ApiResponse[ArticleResponse]:
    return ApiResponse.ok(await backend.get_article_by_slug(slug))


@router.get(
    "/{article_id}",
    response_model=ApiResponse[ArticleResponse],
    response_model_exclude_none=True,
)
async def get_article(
    article_id: int,
    backend: MockArticleBackend = Depends(get_article_backend),
) -> ApiResponse[ArticleResponse]:
    """Retrieve a single article by ID."""
    return ApiResponse.ok(await backend.get_article(article_id))


@router.post(
    "",
    response_model=ApiResponse[ArticleResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_article(
    data: ArticleCreate,
    token: str | None = Depends(get_bearer_token),
    backend: MockArticleBackend = Depends(get_article_backend),
) -> ApiResponse[ArticleResponse]:
    """Create a new article at the front of the listing."""
    return ApiResponse.ok(await backend.create_article(data, token))


@router.put(
    "/{article_id}",
    response_model=ApiResponse[ArticleResponse],
    response_model_exclude_none=True,
    dependencies=[Depends(require_admin)],
)
async def update_article(
    article_id: int,
    data: ArticleUpdate,
    token: str | None = Depends(get_bearer_token),
    backend: MockArticleBackend = Depends(get_article_backend),
) -> ApiResponse[ArticleResponse]:
    return ApiResponse.ok(await backend.update_article(article_id, data, token))


@router.delete(
    "/{article_id}",
    response_model=ApiResponse[None],
    response_model_exclude_none=True,
    dependencies=[Depends(require_admin)],
)
async def delete_article(
    article_id: int,
    token: str | None = Depends(get_bearer_token),
    backend: MockArticleBackend = Depends(get_article_backend),
) -> ApiResponse[None]:
    await backend.delete_article(article_id, token)
    return ApiResponse.ok(None, message="Article deleted")
