"""Database module for DuckDB operations."""

from .connection import (
    DatabaseConnection,
    get_connection,
    get_memory_connection,
)
from .schema import (
    initialize_database,
    create_all_tables,
    create_all_indexes,
    seed_reference_data,
    get_schema_version,
    get_table_counts,
    drop_all_tables,
)
from .seed import (
    DEMO_SUPPLIERS,
    insert_supplier,
    load_demo_suppliers,
)

__all__ = [
    # Connection
    "DatabaseConnection",
    "get_connection",
    "get_memory_connection",
    # Schema
    "initialize_database",
    "create_all_tables",
    "create_all_indexes",
    "seed_reference_data",
    "get_schema_version",
    "get_table_counts",
    "drop_all_tables",
    # Demo data
    "DEMO_SUPPLIERS",
    "insert_supplier",
    "load_demo_suppliers",
]
