"""Credit API settings — read once per process from the environment or a .env file.

Invariants:
    - database_url always names an async driver (postgresql+asyncpg or sqlite+aiosqlite)
    - service_name / service_version are what the health endpoint and OpenAPI report
    - get_settings() returns the same Settings object for the life of the process
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


SYNC_POSTGRES_SCHEME = "postgresql://"
ASYNC_POSTGRES_SCHEME = "postgresql+asyncpg://"


def normalize_database_url(url: str) -> str:
    """Point a plain postgresql:// URL at the asyncpg driver; leave others alone."""
    if url.startswith(SYNC_POSTGRES_SCHEME):
        return ASYNC_POSTGRES_SCHEME + url[len(SYNC_POSTGRES_SCHEME):]
    return url


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    service_name: str = "credit-application-system"
    service_version: str = "1.0.0"
    api_title: str = "Credit Application System API"

    # Customers and credits store
    database_url: str = "postgresql+asyncpg://credit:credit@db:5432/credit"
    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_echo: bool = False

    # Front-ends allowed to call the API from a browser
    cors_origins: list[str] = ["http://localhost:5173"]

    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_driver(cls, value):
        return normalize_database_url(value) if isinstance(value, str) else value

    @field_validator("log_format")
    @classmethod
    def known_log_format(cls, value: str) -> str:
        if value not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
