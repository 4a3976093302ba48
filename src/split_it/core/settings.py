"""Application settings loaded from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for API, CLI and persistence layers."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str = Field(
        default="sqlite+pysqlite:///./split_it.db",
        alias="DATABASE_URL",
    )
    snapshot_key: str = Field(
        default="splitItData",
        alias="SNAPSHOT_KEY",
        min_length=1,
        max_length=120,
    )
    default_expense_description: str = Field(
        default="Varios",
        alias="DEFAULT_EXPENSE_DESCRIPTION",
        min_length=1,
        max_length=280,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance for the current process."""

    return Settings()
