"""Configuration module for Supplier Directory.

All filter defaults are empty: an unfiltered listing shows every approved supplier.
"""

from .settings import (
    config,
    Config,
    DatabaseConfig,
    ListingConfig,
    StorageConfig,
    AppConfig,
)
from .constants import (
    ITEMS_PER_PAGE,
    MAX_PAGE_SIZE,
    DEFAULT_MAX_VISIBLE_PAGES,
    LISTING_PATH,
    SORT_KEYS,
    SORT_ORDERS,
    SORT_COLUMNS,
    MIN_RATING,
    MAX_RATING,
    FAVORITES_KEY,
    COMPARE_KEY,
    MAX_COMPARE_ITEMS,
    SUPPLIER_STATUSES,
    FEATURE_FLAG_IDS,
    MAX_TAGS,
    MAX_SERVICE_AREAS,
)
from .config_loader import (
    ConfigurationError,
    CategorySeed,
    load_directory_config,
    clear_config_cache,
    get_seed_categories,
    get_popular_tags,
    get_location_suggestions,
    get_sort_options,
    get_default_feature_flags,
)

__all__ = [
    # Settings
    "config",
    "Config",
    "DatabaseConfig",
    "ListingConfig",
    "StorageConfig",
    "AppConfig",
    # Constants
    "ITEMS_PER_PAGE",
    "MAX_PAGE_SIZE",
    "DEFAULT_MAX_VISIBLE_PAGES",
    "LISTING_PATH",
    "SORT_KEYS",
    "SORT_ORDERS",
    "SORT_COLUMNS",
    "MIN_RATING",
    "MAX_RATING",
    "FAVORITES_KEY",
    "COMPARE_KEY",
    "MAX_COMPARE_ITEMS",
    "SUPPLIER_STATUSES",
    "FEATURE_FLAG_IDS",
    "MAX_TAGS",
    "MAX_SERVICE_AREAS",
    # Loader
    "ConfigurationError",
    "CategorySeed",
    "load_directory_config",
    "clear_config_cache",
    "get_seed_categories",
    "get_popular_tags",
    "get_location_suggestions",
    "get_sort_options",
    "get_default_feature_flags",
]
