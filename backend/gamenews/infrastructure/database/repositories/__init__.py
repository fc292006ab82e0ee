from .article_repository import SQLAlchemyArticleRepository
from .admin_repository import SQLAlchemyAdminRepository

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemyAdminRepository",
]
