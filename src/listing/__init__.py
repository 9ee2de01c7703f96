"""Listing module: filter state, pagination and listing requests."""

from .filter_state import (
    SupplierFilter,
    encode_filter,
    decode_filter,
    PARAM_NAMES,
)
from .pagination import (
    ELLIPSIS,
    PaginationMeta,
    compute_window,
    should_render,
    clamp_page,
)
from .query_builder import (
    ListingRequest,
    ListingResult,
    SupplierQueryBuilder,
    build_request,
    interpret_response,
)
from .client import SupplierListingClient
from .feature_flags import FeatureFlagCache

__all__ = [
    # Filter state
    "SupplierFilter",
    "encode_filter",
    "decode_filter",
    "PARAM_NAMES",
    # Pagination
    "ELLIPSIS",
    "PaginationMeta",
    "compute_window",
    "should_render",
    "clamp_page",
    # Requests
    "ListingRequest",
    "ListingResult",
    "SupplierQueryBuilder",
    "build_request",
    "interpret_response",
    "SupplierListingClient",
    "FeatureFlagCache",
]
