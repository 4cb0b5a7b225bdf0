"""Configuration settings for the application."""
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent
ROOT_DIR = BASE_DIR.parent.parent

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:3001",
    "http://127.0.0.1:3001",
]


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=str((ROOT_DIR / ".env").resolve()),
        case_sensitive=False,
    )

    # API configuration
    api_version: str = "v1"
    debug: bool = False
    log_level: str = Field(default="INFO", description="Level for the storyforge package logger")

    # Local server
    backend_host: str = "0.0.0.0"
    backend_port: int = Field(default=8000, ge=1, le=65535)
    backend_reload: bool = False

    # CORS configuration
    cors_origins: List[str] = Field(default_factory=lambda: DEFAULT_CORS_ORIGINS.copy())
    cors_origin_regex: str | None = Field(default=None)
    cors_allow_all: bool = Field(default=False)

    # Price action attribution
    price_source_name: str = "Benzinga Pro"
    price_source_url: str = "https://pro.benzinga.com"

    # Related article selection
    related_article_min_body: int = Field(
        default=50,
        ge=0,
        le=10000,
        description="Articles with a body this short or shorter are never used for Also Read / Read Next",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
