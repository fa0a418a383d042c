"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All connection strings come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Backend selection is decided here once and passed to the gateway explicitly

Design Decisions:
    - No DATABASE_URL means no remote store: the local key-value fallback is used
    - Empty local_storage_path keeps the fallback store in memory (demo mode)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from showcase.core.domain_types import DEFAULT_IMAGE_URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Remote store
    database_url: str = ""

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Local fallback store
    use_local_storage: bool = False
    local_storage_path: str = ""
    local_storage_key: str = "usecases"

    # Content defaults
    default_image_url: str = DEFAULT_IMAGE_URL

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def local_fallback_enabled(self) -> bool:
        """True when use cases should be served from the local key-value store."""
        return self.use_local_storage or not self.database_url


@lru_cache
def get_settings() -> Settings:
    return Settings()
