"""Settings — everything deploy-specific, read from the environment or .env.

Invariants:
    - admin_token_secret has no default: the process refuses to start without it
    - get_settings() is cached, so every caller sees the same Settings instance

Design Decisions:
    - pydantic-settings for typed, validated env parsing
    - Non-secret values default to the docker-compose setup
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://blindbeer:blindbeer@db:5432/blindbeer"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Admin auth
    admin_token_secret: str = Field(min_length=16)
    admin_token_algorithm: str = "HS256"
    admin_token_ttl_minutes: int = 60 * 24
    admin_cookie_name: str = "blind_beer_admin"
    admin_cookie_secure: bool = False

    # Sessions
    session_code_length: int = Field(6, ge=4, le=12)
    session_code_max_attempts: int = Field(10, ge=1)

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
