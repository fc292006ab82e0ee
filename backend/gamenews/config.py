import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_PACKAGE_DIR = Path(__file__).resolve().parent
_BACKEND_DIR = _PACKAGE_DIR.parent
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "GameNews"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./gamenews.db"

    # Article listing
    page_size: int = 3
    publish_date_format: str = "%Y-%m-%d %H:%M:%S"

    # Origins (remote host addresses) seeded into the admins table at startup
    admin_ips: list[str] = []

    # Jinja2 templates
    templates_dir: str = str(_PACKAGE_DIR / "presentation" / "web" / "templates")

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine: SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_articles: str = "INFO"         # ArticleService use cases
    log_level_admin: str = "INFO"            # Admin gate lookups

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        if self.page_size < 1:
            fallback = type(self).model_fields["page_size"].default
            _config_logger.warning("PAGE_SIZE=%s is not positive, using %s", self.page_size, fallback)
            object.__setattr__(self, "page_size", fallback)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
