"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from emitkit.domain.enums import ErrorPolicy


class Settings(BaseSettings):
    """Settings loaded from ``EMITKIT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EMITKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Emitter defaults
    default_max_listeners: int = Field(default=10, ge=0)
    error_policy: ErrorPolicy = ErrorPolicy.RAISE


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
