from .article import (
    ArticleCreate,
    ArticlePage,
    ArticleQuery,
    ArticleResponse,
    ArticleUpdate,
    parse_tags,
)
from .auth import (
    AuthActionResult,
    AuthResult,
    AuthUser,
    LoginRequest,
    ProfileUpdate,
    RegisterRequest,
    UserProfile,
)
from .category import (
    CategoryCreate,
    CategoryPage,
    CategoryQuery,
    CategoryResponse,
    CategoryUpdate,
)
from .envelope import (
    ApiResponse,
    format_api_date,
    get_api_error_message,
    handle_api_error,
    is_api_error,
    is_api_success,
)

__all__ = [
    "ArticleCreate",
    "ArticlePage",
    "ArticleQuery",
    "ArticleResponse",
    "ArticleUpdate",
    "parse_tags",
    "AuthActionResult",
    "AuthResult",
    "AuthUser",
    "LoginRequest",
    "ProfileUpdate",
    "RegisterRequest",
    "UserProfile",
    "CategoryCreate",
    "CategoryPage",
    "CategoryQuery",
    "CategoryResponse",
    "CategoryUpdate",
    "ApiResponse",
    "format_api_date",
    "get_api_error_message",
    "handle_api_error",
    "is_api_error",
    "is_api_success",
]
