"""Application settings and configuration."""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent


@dataclass
class DatabaseConfig:
    """Database configuration settings."""

    path: Path = field(
        default_factory=lambda: Path(
            os.getenv("DIRECTORY_DB_PATH", str(PROJECT_ROOT / "data" / "directory.duckdb"))
        )
    )
    read_only: bool = False
    memory_limit: str = "1GB"
    threads: int = -1  # Use all available threads


@dataclass
class ListingConfig:
    """Listing endpoint client settings."""

    base_url: str = field(
        default_factory=lambda: os.getenv("DIRECTORY_API_URL", "http://localhost:8000")
    )
    listing_path: str = "/api/suppliers"
    timeout_seconds: float = field(
        default_factory=lambda: float(os.getenv("DIRECTORY_API_TIMEOUT", "15"))
    )
    default_page_size: int = 12
    max_visible_pages: int = 7


@dataclass
class StorageConfig:
    """Local selection storage settings."""

    path: Path = field(
        default_factory=lambda: Path(
            os.getenv(
                "DIRECTORY_STORAGE_PATH",
                str(Path.home() / ".supplier_directory" / "local_storage.json"),
            )
        )
    )
    favorites_key: str = "favorites"
    compare_key: str = "compare"
    compare_capacity: int = 3
    poll_interval_seconds: float = field(
        default_factory=lambda: float(os.getenv("DIRECTORY_STORAGE_POLL", "1.0"))
    )


@dataclass
class AppConfig:
    """Application configuration settings."""

    name: str = field(default_factory=lambda: os.getenv("APP_NAME", "Supplier Directory"))
    version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    admin_email: Optional[str] = field(
        default_factory=lambda: os.getenv("ADMIN_EMAIL", "admin@movingsuppliershub.com")
    )
    site_url: str = field(
        default_factory=lambda: os.getenv("SITE_URL", "http://localhost:3000")
    )


@dataclass
class Config:
    """Main configuration container."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    listing: ListingConfig = field(default_factory=ListingConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    app: AppConfig = field(default_factory=AppConfig)


# Global config instance
config = Config()
