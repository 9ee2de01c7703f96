"""Supplier listing request construction and response interpretation.

The builder turns a ``SupplierFilter`` into the request the listing endpoint
expects and reads the endpoint's envelope back::

    {"success": bool, "data": [...], "pagination": {...}, "error": str?}

A failed call never raises past this module: it is reported as a
``ListingResult`` holding no items, a zeroed pagination block and a
``FetchFailed`` error the caller can offer a retry for. The builder itself
performs no retries, caching or de-duplication.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from config.constants import ITEMS_PER_PAGE, LISTING_PATH
from config.logging_config import get_logger
from src.errors import FetchFailed
from src.listing.filter_state import SupplierFilter
from src.listing.pagination import PaginationMeta

logger = get_logger("query_builder")

FAILURE_NOTICE = "Failed to load suppliers. Please try again."


@dataclass(frozen=True)
class ListingRequest:
    """A listing request ready to be issued."""

    path: str
    query_string: str
    page: int = 1
    limit: int = ITEMS_PER_PAGE

    @property
    def url(self) -> str:
        """Path with query string appended."""
        return f"{self.path}?{self.query_string}" if self.query_string else self.path


@dataclass
class ListingResult:
    """Outcome of one listing request."""

    items: List[Dict[str, Any]] = field(default_factory=list)
    pagination: PaginationMeta = field(default_factory=PaginationMeta.empty)
    error: Optional[FetchFailed] = None
    sequence: int = 0
    stale: bool = False

    @property
    def ok(self) -> bool:
        """True when the request succeeded."""
        return self.error is None

    @property
    def retryable(self) -> bool:
        """True when the caller should offer a retry action."""
        return self.error is not None and self.error.retryable

    @property
    def notice(self) -> Optional[str]:
        """User-facing message for a failed request."""
        return FAILURE_NOTICE if self.error is not None else None

    @classmethod
    def failure(cls, error: FetchFailed, limit: int = ITEMS_PER_PAGE) -> "ListingResult":
        """Empty result with zeroed pagination."""
        return cls(items=[], pagination=PaginationMeta.empty(limit), error=error)


class SupplierQueryBuilder:
    """
    Builds listing requests and interprets listing responses.

    Usage:
        builder = SupplierQueryBuilder()
        request = builder.build_request(SupplierFilter(search="CRM"))
        # ... issue request.url ...
        result = builder.interpret_response(payload, request)
    """

    def __init__(self, path: str = LISTING_PATH, default_limit: int = ITEMS_PER_PAGE):
        """
        Initialize the builder.

        Args:
            path: Listing endpoint path.
            default_limit: Page size used when the filter does not set one.
        """
        self.path = path
        self.default_limit = default_limit

    def build_request(self, supplier_filter: SupplierFilter) -> ListingRequest:
        """
        Build the request for a filter.

        ``page`` and ``limit`` are always present because the listing always
        paginates, even when the user never touched them.
        """
        page = supplier_filter.page or 1
        limit = supplier_filter.limit or self.default_limit
        paged = replace(supplier_filter, page=page, limit=limit)
        return ListingRequest(
            path=self.path,
            query_string=paged.to_query_string(),
            page=page,
            limit=limit,
        )

    def interpret_response(
        self,
        raw: Any,
        request: Optional[ListingRequest] = None,
    ) -> ListingResult:
        """
        Interpret a decoded listing envelope.

        Args:
            raw: Parsed JSON body (anything; malformed bodies are failures).
            request: The request that produced it, used for fallback paging.

        Returns:
            ListingResult; on failure it holds a FetchFailed error.
        """
        limit = request.limit if request else self.default_limit

        if not isinstance(raw, dict):
            return self._failed(FetchFailed("Malformed listing response"), limit)

        if raw.get("success") is not True:
            message = raw.get("error") or "Failed to fetch suppliers"
            return self._failed(FetchFailed(str(message)), limit)

        items = raw.get("data") or []
        if not isinstance(items, list):
            return self._failed(FetchFailed("Listing data is not a list"), limit)

        block = raw.get("pagination")
        if isinstance(block, dict):
            try:
                pagination = PaginationMeta.from_dict(block, fallback_limit=limit)
            except (TypeError, ValueError) as e:
                return self._failed(FetchFailed(f"Invalid pagination block: {e}"), limit)
        else:
            page = request.page if request else 1
            pagination = PaginationMeta.from_total(page, limit, len(items))

        return ListingResult(items=items, pagination=pagination)

    def _failed(self, error: FetchFailed, limit: int) -> ListingResult:
        logger.warning(f"Listing request failed: {error.message}")
        return ListingResult.failure(error, limit)


def build_request(supplier_filter: SupplierFilter) -> ListingRequest:
    """Build a listing request with the default builder."""
    return SupplierQueryBuilder().build_request(supplier_filter)


def interpret_response(raw: Any, request: Optional[ListingRequest] = None) -> ListingResult:
    """Interpret a listing envelope with the default builder."""
    return SupplierQueryBuilder().interpret_response(raw, request)
