"""Tests for the database initialization script."""

from src.database import get_connection, get_table_counts
from scripts.init_database import main


class TestInitDatabase:
    def test_creates_and_seeds(self, tmp_path):
        db_path = tmp_path / "directory.duckdb"

        assert main(["--db", str(db_path)]) == 0

        with get_connection(db_path, read_only=True) as conn:
            counts = get_table_counts(conn)
        assert counts["categories"] == 5
        assert counts["suppliers"] == 0

    def test_demo_suppliers(self, tmp_path):
        db_path = tmp_path / "directory.duckdb"

        assert main(["--db", str(db_path), "--demo"]) == 0
        assert main(["--db", str(db_path), "--demo"]) == 0

        with get_connection(db_path, read_only=True) as conn:
            assert get_table_counts(conn)["suppliers"] == 7
