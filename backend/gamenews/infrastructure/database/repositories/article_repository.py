"""Concrete repository implementation backed by SQLAlchemy."""

import logging

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gamenews.application.interfaces import ArticleRepository
from gamenews.domain.entities import Article
from gamenews.infrastructure.database.models import ArticleModel

logger = logging.getLogger(__name__)


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions.

    Every write commits before it reports success, so True means the change
    is durable. ``update`` and ``delete`` look the row up first and then issue a
    statement keyed on the id. The two steps are not atomic: if another
    request removes the row in between, the statement touches nothing and
    the call reports False.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            body=model.body,
            publish_date=model.publish_date,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            id=entity.id,
            title=entity.title,
            body=entity.body,
            publish_date=entity.publish_date,
        )

    async def _exists(self, article_id: str) -> bool:
        stmt = select(ArticleModel.id).where(ArticleModel.id == article_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(ArticleModel))
        return result.scalar_one()

    async def fetch_page(self, page_number: int, page_size: int) -> list[Article]:
        if page_number < 1:
            raise ValueError(f"page_number must be >= 1, got {page_number}")
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")

        offset = (page_number - 1) * page_size
        if offset >= await self.count():
            return []

        stmt = (
            select(ArticleModel)
            .order_by(ArticleModel.publish_date.desc(), ArticleModel.id)
            .offset(offset)
            .limit(page_size)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def fetch_by_id(self, article_id: str) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def _commit(self, operation: str, article_id: str) -> bool:
        try:
            await self._session.commit()
        except SQLAlchemyError:
            logger.exception("Commit of %s for article %s failed", operation, article_id)
            await self._session.rollback()
            return False
        return True

    async def insert(self, article: Article) -> bool:
        self._session.add(self._to_model(article))
        try:
            await self._session.flush()
        except SQLAlchemyError as exc:
            logger.warning("Insert of article %s rejected: %s", article.id, exc)
            await self._session.rollback()
            return False
        return await self._commit("insert", article.id)

    async def update(self, article: Article) -> bool:
        if not await self._exists(article.id):
            return False

        stmt = (
            update(ArticleModel)
            .where(ArticleModel.id == article.id)
            .values(title=article.title, body=article.body)
        )
        result = await self._session.execute(stmt)
        if result.rowcount != 1:
            await self._session.rollback()
            return False
        return await self._commit("update", article.id)

    async def delete(self, article_id: str) -> bool:
        if not await self._exists(article_id):
            return False

        stmt = delete(ArticleModel).where(ArticleModel.id == article_id)
        result = await self._session.execute(stmt)
        if result.rowcount != 1:
            await self._session.rollback()
            return False
        return await self._commit("delete", article_id)
