"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from gamenews.config import get_settings
from gamenews.application.services import ArticleService
from gamenews.infrastructure.database.session import get_db_session
from gamenews.infrastructure.database.repositories import (
    SQLAlchemyAdminRepository,
    SQLAlchemyArticleRepository,
)


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService with the article store and admin gate sharing one session."""
    settings = get_settings()
    yield ArticleService(
        repository=SQLAlchemyArticleRepository(session),
        admin_gate=SQLAlchemyAdminRepository(session),
        page_size=settings.page_size,
        publish_date_format=settings.publish_date_format,
    )
