"""DuckDB schema definitions for the supplier directory.

Tables:
- categories: supplier categories, seeded from config/directory.yaml
- suppliers: supplier profiles; only ``approved`` rows are listed publicly
- supplier_tags: free-text tags, one row per (supplier, tag)
- reviews, quote_requests, contact_messages: visitor submissions
- feature_flags: runtime toggles, seeded with their default state

DuckDB does not enforce the foreign keys below; they document the
relationships (supplier_tags/reviews/quote_requests -> suppliers.id,
suppliers.category_id -> categories.id).
"""

from typing import Dict, Optional

import duckdb

from config.config_loader import get_default_feature_flags, get_seed_categories
from config.logging_config import get_logger

logger = get_logger("schema")

SCHEMA_VERSION = "1.0"

CREATE_CATEGORIES = """
CREATE TABLE IF NOT EXISTS categories (
    id VARCHAR PRIMARY KEY,
    name VARCHAR NOT NULL,
    slug VARCHAR NOT NULL UNIQUE,
    description VARCHAR,
    icon VARCHAR,
    created_at TIMESTAMP DEFAULT current_timestamp
)
"""

CREATE_SUPPLIERS = """
CREATE TABLE IF NOT EXISTS suppliers (
    id VARCHAR PRIMARY KEY,
    name VARCHAR NOT NULL,
    slug VARCHAR NOT NULL UNIQUE,
    category_id VARCHAR,
    description VARCHAR,
    short_summary VARCHAR,
    website_url VARCHAR,
    contact_email VARCHAR,
    contact_phone VARCHAR,
    location VARCHAR,
    service_areas VARCHAR[],
    founded_year INTEGER,
    employee_count VARCHAR,
    pricing_model VARCHAR,

    -- pending | approved | rejected | hidden
    status VARCHAR NOT NULL DEFAULT 'pending'
        CHECK (status IN ('pending', 'approved', 'rejected', 'hidden')),
    featured BOOLEAN DEFAULT false,
    verified_business BOOLEAN DEFAULT false,
    verified_insurance BOOLEAN DEFAULT false,

    has_discount BOOLEAN DEFAULT false,
    discount_description VARCHAR,
    discount_code VARCHAR,

    view_count INTEGER DEFAULT 0,
    contact_count INTEGER DEFAULT 0,
    rating_average DOUBLE DEFAULT 0,
    rating_count INTEGER DEFAULT 0,
    accepts_quotes BOOLEAN DEFAULT true,

    created_at TIMESTAMP DEFAULT current_timestamp,
    updated_at TIMESTAMP DEFAULT current_timestamp
)
"""

CREATE_SUPPLIER_TAGS = """
CREATE TABLE IF NOT EXISTS supplier_tags (
    supplier_id VARCHAR NOT NULL,
    tag VARCHAR NOT NULL,
    PRIMARY KEY (supplier_id, tag)
)
"""

CREATE_REVIEWS = """
CREATE TABLE IF NOT EXISTS reviews (
    id VARCHAR PRIMARY KEY,
    supplier_id VARCHAR NOT NULL,
    rating INTEGER NOT NULL CHECK (rating BETWEEN 1 AND 5),
    title VARCHAR,
    content VARCHAR NOT NULL,
    company_name VARCHAR,
    verified BOOLEAN DEFAULT false,
    helpful_count INTEGER DEFAULT 0,
    created_at TIMESTAMP DEFAULT current_timestamp
)
"""

CREATE_QUOTE_REQUESTS = """
CREATE TABLE IF NOT EXISTS quote_requests (
    id VARCHAR PRIMARY KEY,
    supplier_id VARCHAR NOT NULL,
    requester_name VARCHAR NOT NULL,
    requester_email VARCHAR NOT NULL,
    company_name VARCHAR,
    phone VARCHAR,
    service_type VARCHAR,
    budget_range VARCHAR,
    timeline VARCHAR,
    location VARCHAR,
    message VARCHAR NOT NULL,
    status VARCHAR NOT NULL DEFAULT 'new',
    source VARCHAR DEFAULT 'website',
    created_at TIMESTAMP DEFAULT current_timestamp
)
"""

CREATE_CONTACT_MESSAGES = """
CREATE TABLE IF NOT EXISTS contact_messages (
    id VARCHAR PRIMARY KEY,
    name VARCHAR NOT NULL,
    email VARCHAR NOT NULL,
    company VARCHAR,
    phone VARCHAR,
    subject VARCHAR,
    message VARCHAR NOT NULL,
    supplier_id VARCHAR,
    status VARCHAR NOT NULL DEFAULT 'new',
    source VARCHAR DEFAULT 'website',
    created_at TIMESTAMP DEFAULT current_timestamp
)
"""

CREATE_FEATURE_FLAGS = """
CREATE TABLE IF NOT EXISTS feature_flags (
    id VARCHAR PRIMARY KEY,
    enabled BOOLEAN NOT NULL DEFAULT false,
    updated_at TIMESTAMP DEFAULT current_timestamp
)
"""

CREATE_SCHEMA_INFO = """
CREATE TABLE IF NOT EXISTS schema_info (
    version VARCHAR NOT NULL,
    applied_at TIMESTAMP DEFAULT current_timestamp
)
"""

TABLES = [
    ("categories", CREATE_CATEGORIES),
    ("suppliers", CREATE_SUPPLIERS),
    ("supplier_tags", CREATE_SUPPLIER_TAGS),
    ("reviews", CREATE_REVIEWS),
    ("quote_requests", CREATE_QUOTE_REQUESTS),
    ("contact_messages", CREATE_CONTACT_MESSAGES),
    ("feature_flags", CREATE_FEATURE_FLAGS),
    ("schema_info", CREATE_SCHEMA_INFO),
]

INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_suppliers_status ON suppliers(status)",
    "CREATE INDEX IF NOT EXISTS idx_suppliers_category ON suppliers(category_id)",
    "CREATE INDEX IF NOT EXISTS idx_supplier_tags_tag ON supplier_tags(tag)",
    "CREATE INDEX IF NOT EXISTS idx_reviews_supplier ON reviews(supplier_id)",
]


def create_all_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """
    Create all database tables.

    Args:
        conn: DuckDB connection.
    """
    for table_name, create_sql in TABLES:
        try:
            conn.execute(create_sql)
            logger.debug(f"Created table: {table_name}")
        except duckdb.Error as e:
            logger.error(f"Error creating table {table_name}: {e}")
            raise


def create_all_indexes(conn: duckdb.DuckDBPyConnection) -> None:
    for index_sql in INDEXES:
        conn.execute(index_sql)


def seed_reference_data(conn: duckdb.DuckDBPyConnection) -> None:
    """Insert configured categories and feature flag defaults that are not present yet."""
    for category in get_seed_categories():
        conn.execute(
            """
            INSERT INTO categories (id, name, slug, description, icon)
            SELECT ?, ?, ?, ?, ?
            WHERE NOT EXISTS (SELECT 1 FROM categories WHERE id = ? OR slug = ?)
            """,
            [
                category.id,
                category.name,
                category.slug,
                category.description,
                category.icon,
                category.id,
                category.slug,
            ],
        )

    for flag_id, enabled in get_default_feature_flags().items():
        conn.execute(
            """
            INSERT INTO feature_flags (id, enabled)
            SELECT ?, ?
            WHERE NOT EXISTS (SELECT 1 FROM feature_flags WHERE id = ?)
            """,
            [flag_id, enabled, flag_id],
        )


def initialize_database(conn: duckdb.DuckDBPyConnection, seed: bool = True) -> None:
    """
    Create tables and indexes, record the schema version and seed reference data.

    Safe to run against an existing database.
    """
    create_all_tables(conn)
    create_all_indexes(conn)

    if get_schema_version(conn) is None:
        conn.execute("INSERT INTO schema_info (version) VALUES (?)", [SCHEMA_VERSION])

    if seed:
        seed_reference_data(conn)

    logger.info(f"Database initialized (schema {SCHEMA_VERSION})")


def get_schema_version(conn: duckdb.DuckDBPyConnection) -> Optional[str]:
    try:
        row = conn.execute(
            "SELECT version FROM schema_info ORDER BY applied_at DESC LIMIT 1"
        ).fetchone()
    except duckdb.CatalogException:
        return None
    return row[0] if row else None


def get_table_counts(conn: duckdb.DuckDBPyConnection) -> Dict[str, int]:
    """
    Get row counts for all tables.

    Returns:
        Dictionary mapping table names to row counts (0 for missing tables).
    """
    counts = {}
    for table, _ in TABLES:
        try:
            result = conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()
            counts[table] = result[0] if result else 0
        except duckdb.CatalogException:
            counts[table] = 0
    return counts


def drop_all_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Drop all tables (use with caution!)."""
    for table, _ in reversed(TABLES):
        conn.execute(f"DROP TABLE IF EXISTS {table}")
        logger.info(f"Dropped table: {table}")
