"""Configuration management for todolint."""

from functools import lru_cache
from typing import List, Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from todolint.errors import ConfigurationError
from todolint.models.base import MatchLocation


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TODOLINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Rule options
    terms: List[str] = ["todo", "fixme", "xxx"]
    location: MatchLocation = MatchLocation.START
    url: Optional[str] = None
    discover_url: bool = True  # Fall back to package.json bugs/repository
    max_message_length: int = 60

    # Server settings
    host: str = "127.0.0.1"
    port: int = 8000
    enable_docs: bool = True
    max_comments: int = 1000

    # Logging
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    try:
        return Settings()
    except (ValidationError, SettingsError) as e:
        raise ConfigurationError(f"Invalid TODOLINT_* settings: {e}") from e
