from .article_repository import ArticleRepository
from .admin_gate import AdminGate

__all__ = [
    "ArticleRepository",
    "AdminGate",
]
