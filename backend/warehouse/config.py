"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting is environment-overridable (PORT, DB_FILE, CORS_ORIGIN, ...)
    - get_settings() is cached (lru_cache) — single instance per process
    - sqlalchemy_url always names an async driver

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box for local development
    - DATABASE_URL overrides DB_FILE when both are set
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from warehouse.core.domain_types import DEFAULT_LOW_STOCK_THRESHOLD


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # Database
    db_file: str = "database.sqlite"
    database_url: str | None = None

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_sqlite_url(cls, v: str | None) -> str | None:
        """Plain sqlite:// URLs need the aiosqlite driver for the async engine."""
        if isinstance(v, str) and v.startswith("sqlite://"):
            return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v or None

    # API
    cors_origin: str = "http://localhost:3000"

    # Inventory
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        return f"sqlite+aiosqlite:///{self.db_file}"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origin.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
