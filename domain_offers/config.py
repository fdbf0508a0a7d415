"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - The auth token comes from the environment (never hardcoded)
    - Settings are frozen: one immutable instance handed to the app factory
    - get_settings() is cached (lru_cache), one instance per process
    - DatabaseSettings loads without AUTH_TOKEN, so migrations run without the secret

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - SecretStr for the auth token: never rendered in reprs or logs
    - Defaults provided for all non-secret settings: SQLite works out-of-the-box
"""

from functools import lru_cache

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Storage settings shared by the app and alembic."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, frozen=True, extra="ignore",
    )

    database_url: str = "sqlite+aiosqlite:///./domain_offers.db"
    database_pool_size: int = 20
    database_max_overflow: int = 10
    # Off when alembic owns the schema
    database_create_tables: bool = True

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v


class Settings(DatabaseSettings):
    """Application settings from environment variables."""

    # Shared secret compared against the bearer credential
    auth_token: SecretStr

    # Single fixed origin, echoed on every response
    cors_allowed_origin: str = "https://agi-2025.com"
    cors_max_age: int = 86400

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
