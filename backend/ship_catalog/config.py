"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All settings overridable from environment variables or a .env file
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings reads environment variables and .env with type coercion
    - Defaults work out of the box against a local SQLite file
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ship_catalog.core.domain_types import SpeedCheck


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./ships.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_echo: bool = False
    create_tables_on_startup: bool = True

    # Catalog
    default_page_size: int = Field(3, ge=1)
    update_speed_check: SpeedCheck = SpeedCheck.STRICT

    # API
    cors_origins: list[str] = ["http://localhost:8080"]

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
