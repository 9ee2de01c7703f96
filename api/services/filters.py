"""Filter building utilities for supplier SQL queries."""

from typing import Optional

from config.constants import SORT_COLUMNS
from src.listing.filter_state import SupplierFilter


def like_pattern(text: str) -> str:
    """Case-insensitive substring pattern with LIKE wildcards taken literally."""
    escaped = text.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def build_filter_clause(filters: SupplierFilter, table_alias: str = "s") -> tuple[str, list]:
    """Build WHERE clause and parameters for the public supplier listing.

    Only approved suppliers are ever listed.

    Args:
        filters: Decoded listing filter.
        table_alias: SQL table alias to use.

    Returns:
        Tuple of (WHERE clause string, list of parameters).
    """
    conditions = [f"{table_alias}.status = 'approved'"]
    params: list = []

    if filters.search:
        pattern = like_pattern(filters.search)
        conditions.append(
            f"(LOWER({table_alias}.name) LIKE ? ESCAPE '\\' "
            f"OR LOWER({table_alias}.short_summary) LIKE ? ESCAPE '\\' "
            f"OR LOWER({table_alias}.description) LIKE ? ESCAPE '\\')"
        )
        params.extend([pattern, pattern, pattern])

    if filters.category:
        # Category may be given by id or by slug
        conditions.append(f"""
            {table_alias}.category_id IN (
                SELECT c.id FROM categories c WHERE c.id = ? OR c.slug = ?
            )
        """)
        params.extend([filters.category, filters.category])

    if filters.location:
        conditions.append(f"LOWER({table_alias}.location) LIKE ? ESCAPE '\\'")
        params.append(like_pattern(filters.location))

    if filters.rating:
        conditions.append(f"{table_alias}.rating_average >= ?")
        params.append(filters.rating)

    if filters.has_discount:
        conditions.append(f"{table_alias}.has_discount = true")

    if filters.featured:
        conditions.append(f"{table_alias}.featured = true")

    # Supplier must carry every requested tag
    for tag in filters.tags:
        conditions.append(f"""
            EXISTS (
                SELECT 1 FROM supplier_tags t
                WHERE t.supplier_id = {table_alias}.id AND t.tag = ?
            )
        """)
        params.append(tag)

    return " AND ".join(conditions), params


def default_sort_order(sort_by: Optional[str]) -> str:
    """Names read A-Z by default; ratings, dates and view counts highest first."""
    return "asc" if sort_by in (None, "name") else "desc"


def build_order_clause(
    sort_by: Optional[str] = None,
    sort_order: Optional[str] = None,
    table_alias: str = "s",
) -> str:
    """Build ORDER BY clause: featured suppliers first, then the requested sort.

    Unknown sort keys fall back to name. Name breaks ties so paging is stable.
    """
    key = sort_by if sort_by in SORT_COLUMNS else "name"
    direction = (sort_order or default_sort_order(sort_by if sort_by in SORT_COLUMNS else None)).lower()
    if direction not in ("asc", "desc"):
        direction = "asc"

    column = SORT_COLUMNS[key]
    clauses = [f"{table_alias}.featured DESC", f"{table_alias}.{column} {direction.upper()}"]
    if column != "name":
        clauses.append(f"{table_alias}.name ASC")
    clauses.append(f"{table_alias}.id ASC")
    return "ORDER BY " + ", ".join(clauses)
