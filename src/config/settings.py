"""Environment configuration and validation.

This module defines strongly-typed application settings loaded from environment variables
(optionally via a local `.env` file). API keys are secrets and have no defaults; keep them in the
environment, never in the repository.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

AppEnv = Literal["dev", "prod"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: AppEnv = Field(default="dev", alias="APP_ENV")
    log_level: str | None = Field(default=None, alias="LOG_LEVEL")

    telegram_bot_token: str | None = Field(default=None, alias="TELEGRAM_BOT_TOKEN")
    tmdb_api_key: str | None = Field(default=None, alias="TMDB_API_KEY")
    omdb_api_key: str | None = Field(default=None, alias="OMDB_API_KEY")

    cache_dir: str = Field(default="storage/cache", alias="CACHE_DIR")
    ttl_tmdb_discover: int = Field(default=1800, alias="TTL_TMDB_DISCOVER")  # 30 minutes
    ttl_tmdb_genres: int = Field(default=86400, alias="TTL_TMDB_GENRES")  # 24 hours
    ttl_omdb_details: int = Field(default=86400, alias="TTL_OMDB_DETAILS")  # 24 hours

    sanitize_max_len: int = Field(default=2048, alias="SANITIZE_MAX_LEN", ge=1)

    @field_validator("app_env", mode="before")
    @classmethod
    def normalize_app_env(cls, value: object) -> object:
        """Accept `APP_ENV` case-insensitively."""

        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("ttl_tmdb_discover", "ttl_tmdb_genres", "ttl_omdb_details")
    @classmethod
    def validate_ttl_positive(cls, value: int) -> int:
        """Cache TTLs must be positive; a zero TTL would make every entry instantly stale."""

        if value <= 0:
            raise ValueError("cache TTL must be a positive number of seconds")
        return value

    @model_validator(mode="after")
    def validate_cache_dir(self) -> Settings:
        """Validate that a cache directory is configured."""

        if not self.cache_dir.strip():
            raise ValueError("CACHE_DIR must not be empty")
        return self

    @property
    def effective_log_level(self) -> str:
        """Explicit `LOG_LEVEL`, else DEBUG in dev and INFO in prod."""

        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.app_env == "dev" else "INFO"


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        # Raising here is fine: caller can decide how to handle startup errors.
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
