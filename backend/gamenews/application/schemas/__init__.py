from .article import (
    ArticleCreate,
    ArticleUpdate,
    ArticleResponse,
    ArticleView,
    ArticlePage,
)

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ArticleView",
    "ArticlePage",
]
