from .article import ArticleModel
from .admin import AdminModel

__all__ = [
    "ArticleModel",
    "AdminModel",
]
