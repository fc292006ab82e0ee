"""Application service (use case) for Article operations.

Every admin-only use case resolves the admin gate before touching the
article store, so a non-admin caller learns nothing about which ids exist.
"""

import logging
from datetime import datetime

from gamenews.application.interfaces import AdminGate, ArticleRepository
from gamenews.application.schemas import (
    ArticleCreate,
    ArticlePage,
    ArticleResponse,
    ArticleUpdate,
    ArticleView,
)
from gamenews.domain.entities import Article
from gamenews.domain.exceptions import (
    ArticleNotPersistedError,
    ArticleValidationError,
    EntityNotFoundError,
    UnauthorizedAccessError,
)

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 255

# Largest page number accepted from a query string; anything above is treated as unparseable
MAX_PAGE_NUMBER = 2**31 - 1


def parse_page_number(raw: str | int | None) -> int:
    """Turn a ``page`` query value into a 1-based page number.

    Anything missing, non-numeric, below 1 or above ``MAX_PAGE_NUMBER`` falls
    back to the first page.
    """
    if raw is None:
        return 1
    try:
        page_number = int(raw)
    except (TypeError, ValueError):
        return 1
    if page_number < 1 or page_number > MAX_PAGE_NUMBER:
        return 1
    return page_number


def page_count_for(total_count: int, page_size: int) -> int:
    """Number of pages needed for ``total_count`` items (ceiling division)."""
    return (total_count + page_size - 1) // page_size


class ArticleService:
    """Orchestrates article business logic. Depends on the repository and gate ports (DI)."""

    def __init__(
        self,
        repository: ArticleRepository,
        admin_gate: AdminGate,
        page_size: int,
        publish_date_format: str,
    ):
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self._repository = repository
        self._admin_gate = admin_gate
        self._page_size = page_size
        self._publish_date_format = publish_date_format

    @property
    def page_size(self) -> int:
        return self._page_size

    # ── Read use cases ───────────────────────────────────────────────

    async def list_page(self, page_param: str | int | None, origin: str | None) -> ArticlePage:
        """Build one page of the listing. Visible to everyone."""
        page_number = parse_page_number(page_param)
        total_count = await self._repository.count()
        articles = await self._repository.fetch_page(page_number, self._page_size)
        is_admin = await self._admin_gate.is_admin(origin)

        return ArticlePage(
            articles=[ArticleResponse.model_validate(a, from_attributes=True) for a in articles],
            page_size=self._page_size,
            page_number=page_number,
            total_count=total_count,
            page_count=page_count_for(total_count, self._page_size),
            is_admin=is_admin,
        )

    async def show_article(self, article_id: str, origin: str | None) -> ArticleView:
        article = await self._get_article(article_id)
        is_admin = await self._admin_gate.is_admin(origin)
        return ArticleView(
            article=ArticleResponse.model_validate(article, from_attributes=True),
            is_admin=is_admin,
        )

    async def show_create_form(self, origin: str | None) -> None:
        await self._require_admin(origin, "show_create_form")

    async def show_edit_form(self, article_id: str, origin: str | None) -> Article:
        await self._require_admin(origin, "show_edit_form")
        return await self._get_article(article_id)

    # ── Write use cases ──────────────────────────────────────────────

    async def create_article(self, origin: str | None, data: ArticleCreate) -> Article:
        await self._require_admin(origin, "create_article")

        title = self._validated_title(data.title)
        body = data.body.strip()
        publish_date = self._parse_publish_date(data.publish_date)

        article = Article.new_entry(title, body, publish_date)
        if not await self._repository.insert(article):
            logger.warning("Store declined insert of article %s", article.id)
            raise ArticleNotPersistedError("insert", article.id)

        logger.info("Created article %s (%r)", article.id, article.title)
        return article

    async def update_article(
        self, article_id: str, origin: str | None, data: ArticleUpdate
    ) -> Article:
        await self._require_admin(origin, "update_article")

        article = await self._get_article(article_id)
        article.revise(title=self._validated_title(data.title), body=data.body.strip())

        if not await self._repository.update(article):
            logger.warning("Store declined update of article %s", article_id)
            raise ArticleNotPersistedError("update", article_id)

        logger.info("Updated article %s", article_id)
        return article

    async def delete_article(self, article_id: str, origin: str | None) -> None:
        await self._require_admin(origin, "delete_article")

        article = await self._get_article(article_id)
        if not await self._repository.delete(article.id):
            logger.warning("Store declined delete of article %s", article_id)
            raise ArticleNotPersistedError("delete", article_id)

        logger.info("Deleted article %s", article_id)

    # ── Helpers ──────────────────────────────────────────────────────

    async def _require_admin(self, origin: str | None, action: str) -> None:
        if not await self._admin_gate.is_admin(origin):
            raise UnauthorizedAccessError(origin, action)

    async def _get_article(self, article_id: str) -> Article:
        article = await self._repository.fetch_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    def _parse_publish_date(self, raw: str) -> datetime:
        try:
            return datetime.strptime(raw.strip(), self._publish_date_format)
        except ValueError:
            raise ArticleValidationError(
                "publish_date",
                f"'{raw}' does not match the format '{self._publish_date_format}'",
            )

    @staticmethod
    def _validated_title(raw: str) -> str:
        title = raw.strip()
        if not title:
            raise ArticleValidationError("title", "Title must not be empty")
        if len(title) > MAX_TITLE_LENGTH:
            raise ArticleValidationError("title", f"Title must be at most {MAX_TITLE_LENGTH} characters")
        return title
