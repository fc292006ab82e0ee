"""Integration tests for the SQLAlchemy article store and admin gate (in-memory SQLite)."""

from datetime import datetime, timedelta

import pytest
import pytest_asyncio
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from gamenews.domain.entities import Article
from gamenews.infrastructure.database import Base
from gamenews.infrastructure.database.repositories import (
    SQLAlchemyAdminRepository,
    SQLAlchemyArticleRepository,
)
from gamenews.infrastructure.database.session import build_engine, build_session_factory

START = datetime(2023, 4, 16, 16, 41, 0)


def _engine():
    return build_engine("sqlite:///:memory:")


@pytest_asyncio.fixture
async def session() -> AsyncSession:
    engine = _engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = build_session_factory(engine)
    async with factory() as db_session:
        yield db_session

    await engine.dispose()


async def _seed(repo: SQLAlchemyArticleRepository, n: int) -> list[Article]:
    """Insert ``n`` articles published one hour apart, in shuffled order."""
    articles = [
        Article.new_entry(f"Article {i}", f"Body {i}", START + timedelta(hours=i)) for i in range(n)
    ]
    for article in reversed(articles[::2]):
        assert await repo.insert(article)
    for article in articles[1::2]:
        assert await repo.insert(article)
    return articles


# ── Articles ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_count_reflects_inserted_articles(session):
    repo = SQLAlchemyArticleRepository(session)
    assert await repo.count() == 0

    await _seed(repo, 4)

    assert await repo.count() == 4


@pytest.mark.asyncio
async def test_fetch_page_orders_newest_first(session):
    repo = SQLAlchemyArticleRepository(session)
    await _seed(repo, 5)

    first = await repo.fetch_page(1, 3)
    second = await repo.fetch_page(2, 3)

    assert [a.title for a in first] == ["Article 4", "Article 3", "Article 2"]
    assert [a.title for a in second] == ["Article 1", "Article 0"]


@pytest.mark.asyncio
async def test_fetch_page_past_the_end_returns_empty_list(session):
    repo = SQLAlchemyArticleRepository(session)
    await _seed(repo, 3)

    assert len(await repo.fetch_page(1, 3)) == 3
    assert await repo.fetch_page(2, 3) == []
    assert await repo.fetch_page(50, 3) == []


@pytest.mark.asyncio
async def test_fetch_page_with_offset_beyond_sql_integer_range_returns_empty_list(session):
    repo = SQLAlchemyArticleRepository(session)
    await _seed(repo, 3)

    assert await repo.fetch_page(10**20, 3) == []


@pytest.mark.asyncio
@pytest.mark.parametrize("page_number, page_size", [(0, 3), (-1, 3), (1, 0)])
async def test_fetch_page_rejects_invalid_arguments(session, page_number, page_size):
    repo = SQLAlchemyArticleRepository(session)

    with pytest.raises(ValueError):
        await repo.fetch_page(page_number, page_size)


@pytest.mark.asyncio
async def test_insert_then_fetch_by_id_round_trips(session):
    repo = SQLAlchemyArticleRepository(session)
    article = Article.new_entry("Test Title", "I am a body, feed me", START)

    assert await repo.insert(article) is True
    found = await repo.fetch_by_id(article.id)

    assert found == article


@pytest.mark.asyncio
async def test_fetch_by_id_missing_returns_none(session):
    repo = SQLAlchemyArticleRepository(session)

    assert await repo.fetch_by_id("nope") is None


@pytest.mark.asyncio
async def test_insert_never_overwrites_existing_id(session):
    repo = SQLAlchemyArticleRepository(session)
    original = Article.new_entry("Original", "First", START)
    assert await repo.insert(original)
    await session.commit()

    impostor = Article(id=original.id, title="Impostor", body="Second", publish_date=START)

    assert await repo.insert(impostor) is False
    stored = await repo.fetch_by_id(original.id)
    assert stored.title == "Original"


@pytest.mark.asyncio
async def test_update_overwrites_existing_article(session):
    repo = SQLAlchemyArticleRepository(session)
    article = Article.new_entry("Old", "Old body", START)
    await repo.insert(article)

    article.revise(title="New", body="New body")
    assert await repo.update(article) is True

    stored = await repo.fetch_by_id(article.id)
    assert stored.title == "New"
    assert stored.body == "New body"
    assert stored.publish_date == START


@pytest.mark.asyncio
async def test_update_missing_article_fails_closed(session):
    repo = SQLAlchemyArticleRepository(session)
    ghost = Article.new_entry("Ghost", "Boo", START)

    assert await repo.update(ghost) is False
    assert await repo.count() == 0


@pytest.mark.asyncio
async def test_update_after_concurrent_delete_fails_closed(session):
    """An article removed after the caller read it must not be resurrected."""
    repo = SQLAlchemyArticleRepository(session)
    article = Article.new_entry("Contended", "Body", START)
    await repo.insert(article)
    fetched = await repo.fetch_by_id(article.id)

    assert await repo.delete(article.id) is True
    fetched.revise(title="Too late", body="Body")

    assert await repo.update(fetched) is False
    assert await repo.fetch_by_id(article.id) is None


@pytest.mark.asyncio
async def test_delete_removes_article_once(session):
    repo = SQLAlchemyArticleRepository(session)
    article = Article.new_entry("Delete Me", "...", START)
    await repo.insert(article)

    assert await repo.delete(article.id) is True
    assert await repo.fetch_by_id(article.id) is None
    assert await repo.delete(article.id) is False


async def _failing_commit():
    raise OperationalError("COMMIT", {}, Exception("database is locked"))


@pytest.mark.asyncio
async def test_insert_reports_false_when_commit_fails(session, monkeypatch):
    repo = SQLAlchemyArticleRepository(session)
    monkeypatch.setattr(session, "commit", _failing_commit)

    assert await repo.insert(Article.new_entry("Lost", "Body", START)) is False
    assert await repo.count() == 0


@pytest.mark.asyncio
async def test_update_reports_false_when_commit_fails(session, monkeypatch):
    repo = SQLAlchemyArticleRepository(session)
    article = Article.new_entry("Kept", "Body", START)
    assert await repo.insert(article)
    monkeypatch.setattr(session, "commit", _failing_commit)

    article.revise(title="Changed", body="Body")

    assert await repo.update(article) is False
    assert (await repo.fetch_by_id(article.id)).title == "Kept"


@pytest.mark.asyncio
async def test_delete_reports_false_when_commit_fails(session, monkeypatch):
    repo = SQLAlchemyArticleRepository(session)
    article = Article.new_entry("Kept", "Body", START)
    assert await repo.insert(article)
    monkeypatch.setattr(session, "commit", _failing_commit)

    assert await repo.delete(article.id) is False
    assert await repo.fetch_by_id(article.id) is not None


# ── Admin gate ───────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_ensure_admins_is_idempotent(session):
    repo = SQLAlchemyAdminRepository(session)

    assert await repo.ensure_admins(["10.0.0.1", " 10.0.0.1 ", "10.0.0.2", ""]) == 2
    assert await repo.ensure_admins(["10.0.0.1", "10.0.0.2"]) == 0
    assert await repo.is_admin("10.0.0.1") is True
    assert await repo.is_admin("10.0.0.2") is True
    assert await repo.is_admin(" 10.0.0.1 ") is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "origin, expected",
    [
        ("10.0.0.1", True),
        ("10.0.0.10", False),
        ("10.0.0.", False),
        ("10.0.0.0/24", False),
        ("", False),
        (None, False),
    ],
)
async def test_is_admin_requires_exact_match(session, origin, expected):
    repo = SQLAlchemyAdminRepository(session)
    await repo.ensure_admins(["10.0.0.1"])

    assert await repo.is_admin(origin) is expected


@pytest.mark.asyncio
async def test_is_admin_treats_lookup_failure_as_non_admin():
    engine = _engine()  # no tables created
    factory = build_session_factory(engine)
    try:
        async with factory() as db_session:
            assert await SQLAlchemyAdminRepository(db_session).is_admin("10.0.0.1") is False
    finally:
        await engine.dispose()
