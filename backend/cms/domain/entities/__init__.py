from .article import Article, ArticleContent, ArticleSection
from .category import Category
from .user import Role, User

__all__ = [
    "Article",
    "ArticleContent",
    "ArticleSection",
    "Category",
    "Role",
    "User",
]
