"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI

from gamenews.config import get_settings
from gamenews.infrastructure.database import Base, engine
from gamenews.infrastructure.database.session import async_session_factory
from gamenews.infrastructure.database.repositories import SQLAlchemyAdminRepository
from gamenews.infrastructure.logging.log_config import setup_logging
from gamenews.presentation.web.errors import register_exception_handlers
from gamenews.presentation.web.endpoints.articles import router as articles_router

logger = logging.getLogger(__name__)


async def _seed_admins() -> None:
    """Ensure every configured admin IP has a record.

    Idempotent: safe to call on every startup.
    """
    settings = get_settings()
    if not settings.admin_ips:
        logger.debug("No ADMIN_IPS configured, skipping admin seeding")
        return

    async with async_session_factory() as session:
        added = await SQLAlchemyAdminRepository(session).ensure_admins(settings.admin_ips)
        await session.commit()
    logger.info("Admin origins seeded: %d new, %d configured", added, len(settings.admin_ips))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: create tables and seed admin origins."""
    setup_logging()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    await _seed_admins()

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    register_exception_handlers(app)
    app.include_router(articles_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "gamenews.main:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )
