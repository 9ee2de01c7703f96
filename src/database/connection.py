"""DuckDB connections for the supplier directory.

A connection can be opened with ``initialize=True`` to create the schema
and seed categories and feature flags before first use. Writes that touch
more than one table go through ``transaction()`` so a failed request never
leaves a supplier without its tags or a review without its rating update.
"""

import duckdb
from pathlib import Path
from typing import Iterator, Optional, Union
from contextlib import contextmanager

from config import config
from config.logging_config import get_logger
from src.database.schema import initialize_database

logger = get_logger("database")

MEMORY_PATH = ":memory:"


class DatabaseConnection:
    """Owns one DuckDB connection to the directory database."""

    def __init__(
        self,
        db_path: Optional[Union[Path, str]] = None,
        read_only: bool = False,
        initialize: bool = False,
        seed: bool = True,
    ):
        """
        Args:
            db_path: Database file, or ":memory:". Defaults to config setting.
            read_only: Open the file read-only (ignored in memory).
            initialize: Create tables and indexes on connect.
            seed: With ``initialize``, also seed reference data.
        """
        self.db_path = db_path or config.database.path
        self.read_only = read_only
        self.initialize = initialize
        self.seed = seed
        self._connection: Optional[duckdb.DuckDBPyConnection] = None

    @property
    def in_memory(self) -> bool:
        return str(self.db_path) == MEMORY_PATH

    def connect(self) -> duckdb.DuckDBPyConnection:
        """Open the connection if needed and return it."""
        if self._connection is not None:
            return self._connection

        if not self.in_memory:
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

        conn = duckdb.connect(
            str(self.db_path),
            read_only=self.read_only and not self.in_memory,
        )
        conn.execute(f"SET memory_limit = '{config.database.memory_limit}'")
        if config.database.threads > 0:
            conn.execute(f"SET threads = {config.database.threads}")

        if self.initialize and not self.read_only:
            initialize_database(conn, seed=self.seed)

        self._connection = conn
        logger.info(f"Connected to directory database: {self.db_path}")
        return conn

    @property
    def connection(self) -> duckdb.DuckDBPyConnection:
        return self.connect()

    def execute(self, query: str, parameters: Optional[list] = None):
        if parameters:
            return self.connection.execute(query, parameters)
        return self.connection.execute(query)

    @contextmanager
    def transaction(self) -> Iterator[duckdb.DuckDBPyConnection]:
        """
        Run a block of statements atomically.

        Example:
            with db.transaction() as conn:
                conn.execute("INSERT INTO suppliers ...")
                conn.execute("INSERT INTO supplier_tags ...")
        """
        conn = self.connection
        conn.begin()
        try:
            yield conn
        except Exception:
            conn.rollback()
            logger.warning("Transaction rolled back")
            raise
        conn.commit()

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            logger.info("Directory database connection closed")

    def __enter__(self) -> "DatabaseConnection":
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


@contextmanager
def get_connection(
    db_path: Optional[Union[Path, str]] = None,
    read_only: bool = False,
    initialize: bool = False,
) -> Iterator[duckdb.DuckDBPyConnection]:
    """
    Context manager yielding a raw connection that is closed afterwards.

    Example:
        with get_connection(initialize=True) as conn:
            conn.execute("SELECT name FROM suppliers WHERE status = 'approved'")
    """
    db = DatabaseConnection(db_path, read_only=read_only, initialize=initialize)
    try:
        yield db.connect()
    finally:
        db.close()


def get_memory_connection(initialize: bool = False) -> duckdb.DuckDBPyConnection:
    """In-memory connection, optionally with the schema and reference data in place."""
    return DatabaseConnection(MEMORY_PATH, initialize=initialize).connect()
