from .mock_article_backend import ARTICLES_KEY, MockArticleBackend
from .mock_auth_backend import USERS_KEY, MockAuthBackend, build_token, parse_token
from .mock_category_backend import CATEGORIES_KEY, MockCategoryBackend

__all__ = [
    "ARTICLES_KEY",
    "CATEGORIES_KEY",
    "USERS_KEY",
    "MockArticleBackend",
    "MockAuthBackend",
    "MockCategoryBackend",
    "build_token",
    "parse_token",
]
