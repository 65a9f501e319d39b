from .article_backend import ArticleBackend
from .auth_backend import AuthBackend
from .category_backend import CategoryBackend
from .key_value_store import KeyValueStore

__all__ = [
    "ArticleBackend",
    "AuthBackend",
    "CategoryBackend",
    "KeyValueStore",
]
