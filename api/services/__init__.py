"""API services."""

from api.services.database import get_db, DatabaseService
from api.services.queries import SupplierQueryService
from api.services.filters import build_filter_clause, build_order_clause

__all__ = [
    "get_db",
    "DatabaseService",
    "SupplierQueryService",
    "build_filter_clause",
    "build_order_clause",
]
