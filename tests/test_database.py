"""Tests for database module."""

import pytest


class TestDatabaseConnection:
    """Tests for database connection functions."""

    def test_get_memory_connection(self):
        """Test in-memory connection."""
        from src.database import get_memory_connection

        conn = get_memory_connection()
        assert conn is not None

        result = conn.execute("SELECT 1").fetchone()
        assert result[0] == 1

        conn.close()

    def test_get_connection_creates_file(self, tmp_path):
        """Test file-based connection creates parent directories."""
        from src.database import get_connection

        db_path = tmp_path / "data" / "directory.duckdb"

        with get_connection(db_path) as conn:
            conn.execute("CREATE TABLE test (id INTEGER)")
            conn.execute("INSERT INTO test VALUES (1)")

        assert db_path.exists()

    def test_database_connection_context_manager(self):
        from src.database import DatabaseConnection

        with DatabaseConnection(":memory:") as db:
            assert db.in_memory
            assert db.execute("SELECT ?", [2]).fetchone()[0] == 2

        assert db._connection is None

    def test_initialize_on_connect(self):
        from src.database import get_memory_connection, get_table_counts

        conn = get_memory_connection(initialize=True)
        assert get_table_counts(conn)["categories"] == 5
        conn.close()

    def test_transaction_rolls_back_on_error(self):
        """Test that a failing block leaves no partial writes behind."""
        from src.database import DatabaseConnection

        with DatabaseConnection(":memory:", initialize=True) as db:
            with pytest.raises(RuntimeError):
                with db.transaction() as conn:
                    conn.execute(
                        "INSERT INTO supplier_tags (supplier_id, tag) VALUES ('s1', 'CRM')"
                    )
                    raise RuntimeError("tag insert failed")

            assert db.execute("SELECT COUNT(*) FROM supplier_tags").fetchone()[0] == 0

            with db.transaction() as conn:
                conn.execute(
                    "INSERT INTO supplier_tags (supplier_id, tag) VALUES ('s1', 'CRM')"
                )
            assert db.execute("SELECT COUNT(*) FROM supplier_tags").fetchone()[0] == 1


class TestSchema:
    """Tests for database schema functions."""

    def test_create_all_tables(self):
        """Test table creation."""
        from src.database import create_all_tables, get_memory_connection

        conn = get_memory_connection()
        create_all_tables(conn)

        tables = conn.execute("""
            SELECT table_name FROM information_schema.tables
            WHERE table_schema = 'main'
        """).fetchall()

        table_names = [t[0] for t in tables]
        for expected in ("categories", "suppliers", "supplier_tags", "reviews",
                         "quote_requests", "contact_messages", "feature_flags"):
            assert expected in table_names

        conn.close()

    def test_initialize_seeds_reference_data(self):
        from src.database import get_memory_connection, get_schema_version, get_table_counts, initialize_database

        conn = get_memory_connection()
        initialize_database(conn)

        counts = get_table_counts(conn)
        assert counts["categories"] == 5
        assert counts["feature_flags"] == 8
        assert counts["suppliers"] == 0
        assert get_schema_version(conn) == "1.0"

        conn.close()

    def test_initialize_is_idempotent(self):
        """Test that running initialization twice adds nothing."""
        from src.database import get_memory_connection, get_table_counts, initialize_database

        conn = get_memory_connection()
        initialize_database(conn)
        initialize_database(conn)

        counts = get_table_counts(conn)
        assert counts["categories"] == 5
        assert counts["feature_flags"] == 8
        assert counts["schema_info"] == 1

        conn.close()

    def test_seeding_keeps_changed_flags(self):
        from src.database import get_memory_connection, initialize_database, seed_reference_data

        conn = get_memory_connection()
        initialize_database(conn)
        conn.execute("UPDATE feature_flags SET enabled = false WHERE id = 'reviews_system'")

        seed_reference_data(conn)

        enabled = conn.execute(
            "SELECT enabled FROM feature_flags WHERE id = 'reviews_system'"
        ).fetchone()[0]
        assert enabled is False

        conn.close()

    def test_schema_version_without_tables(self):
        from src.database import get_memory_connection, get_schema_version, get_table_counts

        conn = get_memory_connection()
        assert get_schema_version(conn) is None
        assert set(get_table_counts(conn).values()) == {0}
        conn.close()

    def test_supplier_status_is_checked(self, test_db):
        import duckdb

        with pytest.raises(duckdb.ConstraintException):
            test_db.execute(
                """
                INSERT INTO suppliers (id, name, slug, description, short_summary,
                                       website_url, contact_email, status)
                VALUES ('00000000-0000-0000-0000-000000000001', 'X', 'x', 'd', 's',
                        'https://x.example.com', 'x@example.com', 'published')
                """
            )

    def test_drop_all_tables(self):
        from src.database import drop_all_tables, get_memory_connection, get_table_counts, initialize_database

        conn = get_memory_connection()
        initialize_database(conn)
        drop_all_tables(conn)

        assert set(get_table_counts(conn).values()) == {0}
        conn.close()


class TestDemoData:
    """Tests for demo supplier loading."""

    def test_demo_suppliers_loaded(self, test_db):
        from src.database import DEMO_SUPPLIERS

        total = test_db.execute("SELECT COUNT(*) FROM suppliers").fetchone()[0]
        approved = test_db.execute(
            "SELECT COUNT(*) FROM suppliers WHERE status = 'approved'"
        ).fetchone()[0]

        assert total == len(DEMO_SUPPLIERS)
        assert approved == 5

    def test_tags_loaded(self, test_db):
        tags = test_db.execute(
            """
            SELECT t.tag FROM supplier_tags t
            JOIN suppliers s ON s.id = t.supplier_id
            WHERE s.slug = 'acme-removals-crm'
            ORDER BY t.tag
            """
        ).fetchall()
        assert [t[0] for t in tags] == ["Booking System", "CRM", "Software"]

    def test_load_is_idempotent(self, test_db):
        from src.database import load_demo_suppliers

        assert load_demo_suppliers(test_db) == 0
