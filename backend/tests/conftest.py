"""Shared in-memory fakes for the article store and admin gate."""

import dataclasses
from datetime import datetime, timedelta

import pytest

from gamenews.application.interfaces import AdminGate, ArticleRepository
from gamenews.application.services import ArticleService
from gamenews.config import Settings
from gamenews.domain.entities import Article


class FakeArticleRepository(ArticleRepository):
    """In-memory fake store that records every call and every acknowledged write."""

    def __init__(self):
        self._articles: dict[str, Article] = {}
        self.calls: list[str] = []
        self.writes: list[tuple[str, str]] = []
        self.accept_writes = True

    def seed(self, *articles: Article) -> None:
        for article in articles:
            self._articles[article.id] = dataclasses.replace(article)

    async def count(self) -> int:
        self.calls.append("count")
        return len(self._articles)

    async def fetch_page(self, page_number: int, page_size: int) -> list[Article]:
        self.calls.append("fetch_page")
        ordered = sorted(self._articles.values(), key=lambda a: a.publish_date, reverse=True)
        skip = (page_number - 1) * page_size
        return [dataclasses.replace(a) for a in ordered[skip : skip + page_size]]

    async def fetch_by_id(self, article_id: str) -> Article | None:
        self.calls.append("fetch_by_id")
        article = self._articles.get(article_id)
        return dataclasses.replace(article) if article else None

    async def insert(self, article: Article) -> bool:
        self.calls.append("insert")
        if not self.accept_writes or article.id in self._articles:
            return False
        self._articles[article.id] = dataclasses.replace(article)
        self.writes.append(("insert", article.id))
        return True

    async def update(self, article: Article) -> bool:
        self.calls.append("update")
        if not self.accept_writes or article.id not in self._articles:
            return False
        self._articles[article.id] = dataclasses.replace(article)
        self.writes.append(("update", article.id))
        return True

    async def delete(self, article_id: str) -> bool:
        self.calls.append("delete")
        if not self.accept_writes or article_id not in self._articles:
            return False
        del self._articles[article_id]
        self.writes.append(("delete", article_id))
        return True


class FakeAdminGate(AdminGate):
    """Admin gate backed by a fixed set of origins."""

    def __init__(self, admin_ips: set[str]):
        self._admin_ips = admin_ips
        self.lookups: list[str | None] = []

    async def is_admin(self, origin: str | None) -> bool:
        self.lookups.append(origin)
        return origin in self._admin_ips


@pytest.fixture
def article_repository() -> FakeArticleRepository:
    return FakeArticleRepository()


@pytest.fixture
def admin_gate() -> FakeAdminGate:
    return FakeAdminGate({"192.168.1.10"})


@pytest.fixture
def service(article_repository: FakeArticleRepository, admin_gate: FakeAdminGate) -> ArticleService:
    return ArticleService(
        article_repository,
        admin_gate,
        page_size=3,
        publish_date_format=Settings.model_fields["publish_date_format"].default,
    )


@pytest.fixture
def make_articles():
    """Build ``n`` articles published one hour apart, oldest first."""

    def _make(n: int) -> list[Article]:
        start = datetime(2023, 4, 16, 16, 41, 0)
        return [
            Article.new_entry(f"Article {i}", f"Body {i}", start + timedelta(hours=i))
            for i in range(n)
        ]

    return _make
