"""HTTP client for the supplier listing endpoint.

Each ``fetch`` issues exactly one request. Requests are tagged with an
increasing sequence number; a response that comes back after a newer
request was started is marked ``stale`` so the caller can drop it instead
of overwriting fresher results.
"""

import threading
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from config import config
from config.logging_config import get_logger
from src.errors import FetchFailed
from src.listing.filter_state import SupplierFilter
from src.listing.query_builder import ListingResult, SupplierQueryBuilder

logger = get_logger("listing_client")


class SupplierListingClient:
    """Client for the supplier listing, category and detail endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        builder: Optional[SupplierQueryBuilder] = None,
    ):
        """
        Initialize the listing client.

        Args:
            base_url: Service root, e.g. "http://localhost:8000".
            session: HTTP session to use (a new one is created if omitted).
            timeout: Per-request timeout in seconds.
            builder: Query builder (defaults from configuration).
        """
        self.base_url = (base_url or config.listing.base_url).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout or config.listing.timeout_seconds
        self.builder = builder or SupplierQueryBuilder(
            path=config.listing.listing_path,
            default_limit=config.listing.default_page_size,
        )
        self._sequence = 0
        self._sequence_lock = threading.Lock()

    @property
    def latest_sequence(self) -> int:
        """Sequence number of the most recently issued listing request."""
        return self._sequence

    def is_current(self, sequence: int) -> bool:
        """Check whether a result belongs to the newest request."""
        return sequence == self._sequence

    def fetch(self, supplier_filter: SupplierFilter) -> ListingResult:
        """
        Fetch one page of suppliers.

        Never raises for endpoint failures; check ``result.ok`` and
        ``result.stale``.

        Args:
            supplier_filter: Current filter state.

        Returns:
            ListingResult tagged with its sequence number.
        """
        request = self.builder.build_request(supplier_filter)
        with self._sequence_lock:
            self._sequence += 1
            sequence = self._sequence

        logger.debug(f"Listing request #{sequence}: {request.url}")

        try:
            payload = self._get_json(request.url)
        except FetchFailed as e:
            logger.warning(f"Listing request #{sequence} failed: {e.message}")
            result = ListingResult.failure(e, request.limit)
        else:
            result = self.builder.interpret_response(payload, request)

        result.sequence = sequence
        result.stale = not self.is_current(sequence)
        if result.stale:
            logger.info(
                f"Discarding listing response #{sequence}; newer request #{self._sequence} issued"
            )
        return result

    def fetch_categories(self) -> List[Dict[str, Any]]:
        """Fetch the category list; an empty list on any failure."""
        try:
            payload = self._get_json("/api/categories")
        except FetchFailed as e:
            logger.warning(f"Error fetching categories: {e.message}")
            return []

        if isinstance(payload, dict) and payload.get("success") is True:
            return list(payload.get("data") or [])
        return []

    def fetch_supplier(self, slug: str) -> Optional[Dict[str, Any]]:
        """Fetch a single supplier by slug; None when absent or on failure."""
        try:
            payload = self._get_json(f"/api/suppliers/{quote(slug, safe='')}")
        except FetchFailed as e:
            if e.status_code != 404:
                logger.warning(f"Error fetching supplier '{slug}': {e.message}")
            return None

        if isinstance(payload, dict) and payload.get("success") is True:
            return payload.get("data")
        return None

    def _get_json(self, path: str) -> Any:
        """
        GET a path and decode the JSON body.

        Raises:
            FetchFailed: On transport errors, non-2xx statuses or non-JSON bodies.
        """
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise FetchFailed(f"Request error: {e}")

        if not response.ok:
            raise FetchFailed(f"HTTP {response.status_code} from {path}", response.status_code)

        try:
            return response.json()
        except ValueError:
            raise FetchFailed(f"Response from {path} is not JSON", response.status_code)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "SupplierListingClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
