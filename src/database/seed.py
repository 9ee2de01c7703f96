"""Demo supplier data for local development and tests."""

from typing import Any, Dict, List

import duckdb

from config.logging_config import get_logger

logger = get_logger("seed")

SOFTWARE = "3f1c2a8e-5b7d-4c1e-9a2f-1d6e8b4c7a01"
INSURANCE = "7a9e4d21-0c3b-4f6a-8e5d-2b1c9f7e3d02"
VEHICLES = "c2d8f6b4-1e7a-4d3c-b9f0-5a4e2c8d6b03"
PACKING = "e5b3a7c9-8d2f-4b6e-a1c4-7f9d3e5b2a04"

DEMO_SUPPLIERS: List[Dict[str, Any]] = [
    {
        "id": "0b6f8a52-6c1d-4f7e-9a3b-2d5e8c1f4a10",
        "name": "Acme Removals CRM",
        "slug": "acme-removals-crm",
        "category_id": SOFTWARE,
        "short_summary": "CRM and booking software for removal firms",
        "description": "Job scheduling, quoting and customer records in one place, built for removal companies of every size.",
        "location": "London",
        "status": "approved",
        "featured": True,
        "has_discount": True,
        "discount_description": "10% off the first year",
        "rating_average": 4.6,
        "rating_count": 18,
        "view_count": 120,
        "accepts_quotes": True,
        "created_at": "2024-03-01 09:00:00",
        "tags": ["CRM", "Software", "Booking System"],
    },
    {
        "id": "1c7a9b63-7d2e-4a8f-8b4c-3e6f9d2a5b21",
        "name": "MoveSure Insurance",
        "slug": "movesure-insurance",
        "category_id": INSURANCE,
        "short_summary": "Goods in transit and liability cover",
        "description": "Specialist policies for removal and storage businesses, with same-day certificates and claims support.",
        "location": "Manchester",
        "status": "approved",
        "featured": False,
        "has_discount": False,
        "rating_average": 4.2,
        "rating_count": 9,
        "view_count": 80,
        "accepts_quotes": True,
        "created_at": "2024-01-15 09:00:00",
        "tags": ["Insurance", "Goods in Transit"],
    },
    {
        "id": "2d8b0c74-8e3f-4b9a-9c5d-4f7a0e3b6c32",
        "name": "FleetLine Leasing",
        "slug": "fleetline-leasing",
        "category_id": VEHICLES,
        "short_summary": "Luton and 7.5t vans on flexible leases",
        "description": "Vehicle leasing with servicing, breakdown cover and fuel cards bundled into one monthly payment.",
        "location": "Birmingham",
        "status": "approved",
        "featured": False,
        "has_discount": True,
        "discount_description": "First month free",
        "rating_average": 3.8,
        "rating_count": 5,
        "view_count": 200,
        "accepts_quotes": True,
        "created_at": "2024-05-10 09:00:00",
        "tags": ["Fleet Management", "Fuel Cards"],
    },
    {
        "id": "3e9c1d85-9f4a-4cab-8d6e-5a8b1f4c7d43",
        "name": "BoxMaster Packing",
        "slug": "boxmaster-packing",
        "category_id": PACKING,
        "short_summary": "Boxes, crates and packing materials",
        "description": "Double-wall boxes, wardrobe cartons and reusable crates delivered next day across the country.",
        "location": "London",
        "status": "approved",
        "featured": True,
        "has_discount": False,
        "rating_average": 4.9,
        "rating_count": 31,
        "view_count": 45,
        "accepts_quotes": True,
        "created_at": "2023-11-20 09:00:00",
        "tags": ["Packing Materials", "Storage"],
    },
    {
        "id": "4fad2e96-a05b-4dbc-9e7f-6b9c2a5d8e54",
        "name": "Removal CRM Insurance Bundle",
        "slug": "removal-crm-insurance-bundle",
        "category_id": SOFTWARE,
        "short_summary": "CRM software with built-in cover quotes",
        "description": "Manage jobs and buy insurance per move from the same dashboard.",
        "location": "Leeds",
        "status": "approved",
        "featured": False,
        "has_discount": False,
        "rating_average": 4.1,
        "rating_count": 7,
        "view_count": 60,
        "accepts_quotes": False,
        "created_at": "2024-06-01 09:00:00",
        "tags": ["CRM", "Insurance", "Software"],
    },
    {
        "id": "5abe3fa7-b16c-4ecd-8f80-7cad3b6e9f65",
        "name": "Pending CRM Startup",
        "slug": "pending-crm-startup",
        "category_id": SOFTWARE,
        "short_summary": "A CRM awaiting review",
        "description": "Not yet approved, so it never appears in public listings.",
        "location": "London",
        "status": "pending",
        "rating_average": 5.0,
        "created_at": "2024-07-01 09:00:00",
        "tags": ["CRM"],
    },
    {
        "id": "6bcf4ab8-c27d-4fde-9091-8dbe4c7fa076",
        "name": "Hidden Storage Ltd",
        "slug": "hidden-storage-ltd",
        "category_id": PACKING,
        "short_summary": "Storage units, currently hidden",
        "description": "Hidden by an administrator and excluded from listings.",
        "location": "Bristol",
        "status": "hidden",
        "created_at": "2024-02-01 09:00:00",
        "tags": ["Storage"],
    },
]

SUPPLIER_COLUMNS = [
    "id",
    "name",
    "slug",
    "category_id",
    "short_summary",
    "description",
    "location",
    "status",
    "featured",
    "has_discount",
    "discount_description",
    "rating_average",
    "rating_count",
    "view_count",
    "accepts_quotes",
    "created_at",
]

_DEFAULTS = {
    "featured": False,
    "has_discount": False,
    "rating_average": 0.0,
    "rating_count": 0,
    "view_count": 0,
    "accepts_quotes": True,
}


def insert_supplier(conn: duckdb.DuckDBPyConnection, supplier: Dict[str, Any]) -> None:
    """Insert one supplier row and its tags."""
    values = [supplier.get(column, _DEFAULTS.get(column)) for column in SUPPLIER_COLUMNS]
    placeholders = ", ".join(["?" for _ in SUPPLIER_COLUMNS])
    conn.execute(
        f"INSERT INTO suppliers ({', '.join(SUPPLIER_COLUMNS)}) VALUES ({placeholders})",
        values,
    )
    for tag in supplier.get("tags", []):
        conn.execute(
            "INSERT INTO supplier_tags (supplier_id, tag) VALUES (?, ?)",
            [supplier["id"], tag],
        )


def load_demo_suppliers(conn: duckdb.DuckDBPyConnection) -> int:
    """
    Insert the demo suppliers that are not present yet.

    Returns:
        Number of suppliers inserted.
    """
    inserted = 0
    for supplier in DEMO_SUPPLIERS:
        exists = conn.execute(
            "SELECT 1 FROM suppliers WHERE id = ?", [supplier["id"]]
        ).fetchone()
        if exists:
            continue
        insert_supplier(conn, supplier)
        inserted += 1

    logger.info(f"Inserted {inserted} demo suppliers")
    return inserted
