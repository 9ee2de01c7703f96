"""Database connection service for FastAPI."""

import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from api.config import get_settings
from api.services.cache import TTLCache
from config.logging_config import get_logger
from src.database.connection import DatabaseConnection

logger = get_logger("api.database")


class DatabaseService:
    """Shares one directory database connection between request handlers.

    The schema is created and reference data seeded on first connect.
    DuckDB connections are not safe to share between threads without a
    lock, so every statement runs under one. The category list and flag
    lookups are cached per service, so each database has its own caches.
    """

    def __init__(self, db_path: Optional[Union[Path, str]] = None, seed: bool = True):
        """Initialize database service.

        Args:
            db_path: Path to database file, or ":memory:".
            seed: Seed categories and feature flags on first connect.
        """
        settings = get_settings()
        self.db_path = db_path or settings.database_path
        self.category_cache = TTLCache(maxsize=20, ttl=settings.cache_ttl_seconds)
        self.flag_cache = TTLCache(maxsize=50, ttl=settings.flag_cache_ttl_seconds)
        self._db = DatabaseConnection(self.db_path, initialize=True, seed=seed)
        self._lock = threading.RLock()

    def connect(self):
        """Get or create database connection."""
        with self._lock:
            return self._db.connect()

    def execute(self, query: str, params: Optional[list] = None):
        """Execute a query and return the connection for fetching."""
        with self._lock:
            return self._db.execute(query, params)

    def fetch_one(self, query: str, params: Optional[list] = None):
        with self._lock:
            return self.execute(query, params).fetchone()

    def fetch_all(self, query: str, params: Optional[list] = None):
        with self._lock:
            return self.execute(query, params).fetchall()

    def fetch_dicts(self, query: str, params: Optional[list] = None) -> list[dict]:
        """Execute query and return rows as column-name dictionaries."""
        with self._lock:
            cursor = self.execute(query, params)
            columns = [d[0] for d in cursor.description]
            return [dict(zip(columns, row)) for row in cursor.fetchall()]

    @contextmanager
    def transaction(self) -> Iterator["DatabaseService"]:
        """Hold the lock and run the block's statements atomically."""
        with self._lock:
            with self._db.transaction():
                yield self

    def cache_stats(self) -> dict[str, dict[str, int]]:
        return {"category_cache": self.category_cache.stats(), "flag_cache": self.flag_cache.stats()}

    def clear_caches(self) -> None:
        self.category_cache.clear()
        self.flag_cache.clear()

    def close(self) -> None:
        with self._lock:
            self._db.close()
        self.clear_caches()


# Global database instance
_db_service: Optional[DatabaseService] = None


def get_db() -> DatabaseService:
    """Get global database service instance."""
    global _db_service
    if _db_service is None:
        _db_service = DatabaseService()
        logger.info(f"API database: {_db_service.db_path}")
    return _db_service


def close_db() -> None:
    """Close the global database connection."""
    global _db_service
    if _db_service is not None:
        _db_service.close()
        _db_service = None
