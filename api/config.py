"""FastAPI application settings."""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
import os

from config.constants import ITEMS_PER_PAGE, MAX_PAGE_SIZE


def _parse_cors_origins() -> list[str]:
    """Parse CORS origins from environment variable."""
    cors_env = os.getenv("DIRECTORY_ALLOWED_ORIGINS", "")
    if cors_env:
        return [origin.strip() for origin in cors_env.split(",")]
    # Default development origins
    return ["http://localhost:3000", "http://localhost:5173"]


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(env_prefix="DIRECTORY_")

    # App info
    app_name: str = "Supplier Directory API"
    version: str = "1.0.0"
    debug: bool = False

    # Database
    database_path: Path = Path(__file__).parent.parent / "data" / "directory.duckdb"

    # CORS
    cors_origins: list[str] = _parse_cors_origins()

    # Pagination
    default_page_size: int = ITEMS_PER_PAGE
    max_page_size: int = MAX_PAGE_SIZE

    # Cache
    cache_ttl_seconds: int = 1800
    flag_cache_ttl_seconds: int = 300

    # Notifications
    admin_email: str = "admin@movingsuppliershub.com"
    site_url: str = "http://localhost:3000"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
