
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "User Query API"
    app_env: str = "development"
    port: int = Field(default=5001, alias="PORT")
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")

    # Database (SQLite for local dev, any async SQLAlchemy URL in production)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./users_dev.db",
        alias="DATABASE_URL",
    )
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")

    # Collation for name/email ordering, e.g. "und-x-icu" on PostgreSQL.
    # Unset on SQLite a registered case- and accent-insensitive sort key is used,
    # on other engines the database default collation applies.
    sort_collation: str | None = Field(default=None, alias="SORT_COLLATION")

    default_page_limit: int = Field(default=10, alias="DEFAULT_PAGE_LIMIT")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process; pass the result around explicitly."""
    return Settings()
