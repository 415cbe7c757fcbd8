"""Application settings using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``WIKIMARK_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WIKIMARK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"

    # CLI
    output_format: Literal["text", "json"] = "text"
    encoding: str = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
