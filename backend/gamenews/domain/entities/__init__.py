from .article import Article
from .admin import AdminRecord

__all__ = [
    "Article",
    "AdminRecord",
]
