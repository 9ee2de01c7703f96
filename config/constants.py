"""Constants for Supplier Directory application.

Static values shared by the filter codec, the pager, the selection sets and
the listing service. Catalogue data (categories, tags) lives in directory.yaml
and is read through config_loader.
"""

from typing import Dict, List


# =============================================================================
# Listing Defaults
# =============================================================================

ITEMS_PER_PAGE = 12
MAX_PAGE_SIZE = 100
DEFAULT_MAX_VISIBLE_PAGES = 7
LISTING_PATH = "/api/suppliers"


# =============================================================================
# Sorting
# =============================================================================

SORT_KEYS: List[str] = ["name", "rating", "newest", "popular"]
SORT_ORDERS: List[str] = ["asc", "desc"]

# Sort key -> supplier column used by the listing service
SORT_COLUMNS: Dict[str, str] = {
    "name": "name",
    "rating": "rating_average",
    "newest": "created_at",
    "popular": "view_count",
}

MIN_RATING = 1
MAX_RATING = 5


# =============================================================================
# Selection Sets
# =============================================================================

FAVORITES_KEY = "favorites"
COMPARE_KEY = "compare"
MAX_COMPARE_ITEMS = 3


# =============================================================================
# Supplier Records
# =============================================================================

SUPPLIER_STATUSES: List[str] = ["pending", "approved", "rejected", "hidden"]
QUOTE_STATUSES: List[str] = ["new", "responded", "converted", "lost"]
MESSAGE_STATUSES: List[str] = ["new", "read", "responded"]

FEATURE_FLAG_IDS: List[str] = [
    "commission_tracking",
    "premium_listings",
    "supplier_analytics",
    "quote_requests",
    "reviews_system",
    "ai_comparison",
    "location_filtering",
    "email_notifications",
]

MAX_TAGS = 10
MAX_SERVICE_AREAS = 10
