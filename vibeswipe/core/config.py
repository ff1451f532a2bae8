"""Application configuration."""
import logging
from functools import lru_cache
from typing import Any, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def clean_int_value(v: Any) -> int:
    """Clean integer values from environment variables."""
    if isinstance(v, str):
        # Remove any comments and whitespace
        v = v.split('#')[0].strip()
    return int(v)


class Settings(BaseSettings):
    """Application settings."""

    # Application
    PROJECT_NAME: str = "VibeSwipe Backend"
    API_V1_STR: str = "/api/v1"
    BACKEND_CORS_ORIGINS: List[str] = ["*"]
    ENVIRONMENT: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = True

    # Database
    DATABASE_URL: str = "sqlite:///./vibeswipe.db"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Feed
    FEED_CANDIDATE_LIMIT: int = 30
    DEFAULT_GO_OUT_DAYS: List[str] = ["friday", "saturday"]
    DEFAULT_BUDGET_LEVEL: str = "any"

    # Scoring
    SCORING_NORMALIZE_TAGS: bool = False

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @field_validator('PORT', 'FEED_CANDIDATE_LIMIT', mode='before')
    @classmethod
    def clean_ints(cls, v: Any) -> int:
        return clean_int_value(v)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings = None) -> None:
    """Set up root logging from settings."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format=settings.LOG_FORMAT
    )
