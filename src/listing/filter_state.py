"""Supplier filter state and its query-string codec.

The query string is the canonical home of the filter: every navigation
rebuilds a ``SupplierFilter`` from it, and every user action produces a new
filter that is encoded back into it. Filters are immutable; changes return
a new instance.

Parameter grammar (in encoding order)::

    search, category, location, rating, hasDiscount, featured,
    tags (repeated), sortBy, sortOrder, page, limit
"""

from dataclasses import dataclass, field, replace as dataclass_replace
from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import parse_qsl, urlencode

from config.constants import (
    MAX_RATING,
    MIN_RATING,
    SORT_KEYS,
    SORT_ORDERS,
)
from config.logging_config import get_logger

logger = get_logger("filter_state")

# Attribute name -> query parameter name
PARAM_NAMES: Dict[str, str] = {
    "search": "search",
    "category": "category",
    "location": "location",
    "rating": "rating",
    "has_discount": "hasDiscount",
    "featured": "featured",
    "tags": "tags",
    "sort_by": "sortBy",
    "sort_order": "sortOrder",
    "page": "page",
    "limit": "limit",
}


def _unique(values: Iterable[str]) -> Tuple[str, ...]:
    """Drop empty and repeated values, keeping first-seen order."""
    seen: List[str] = []
    for value in values:
        if value and value not in seen:
            seen.append(value)
    return tuple(seen)


def _parse_int(raw: Optional[str], minimum: int, maximum: Optional[int] = None) -> Optional[int]:
    """Parse an integer parameter; anything unparsable or out of range is absent."""
    if raw is None:
        return None
    try:
        value = int(raw.strip())
    except (ValueError, AttributeError):
        return None
    if value < minimum or (maximum is not None and value > maximum):
        return None
    return value


def _in_range(value: Optional[int], minimum: int, maximum: Optional[int] = None) -> bool:
    if value is None or isinstance(value, bool):
        return False
    return value >= minimum and (maximum is None or value <= maximum)


@dataclass(frozen=True)
class SupplierFilter:
    """Current search, sort and pagination intent for the supplier listing."""

    search: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    rating: Optional[int] = None
    has_discount: bool = False
    featured: bool = False
    tags: Tuple[str, ...] = field(default_factory=tuple)
    sort_by: Optional[str] = None
    sort_order: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None

    def __post_init__(self):
        # Accept any iterable for tags but always hold an ordered, unique tuple
        object.__setattr__(self, "tags", _unique(self.tags or ()))

    @property
    def is_empty(self) -> bool:
        """Check if no narrowing filter is active (sort and paging ignored)."""
        return self.active_filter_count == 0

    @property
    def active_filter_count(self) -> int:
        """Count of active narrowing filters."""
        count = 0
        if self.search:
            count += 1
        if self.category:
            count += 1
        if self.location:
            count += 1
        if self.rating:
            count += 1
        if self.has_discount:
            count += 1
        if self.featured:
            count += 1
        if self.tags:
            count += 1
        return count

    # ------------------------------------------------------------------
    # Derived filters
    # ------------------------------------------------------------------

    def replace(self, **changes: Any) -> "SupplierFilter":
        """
        Return a new filter with the given fields changed.

        Any change other than ``page`` sends the user back to the first page,
        so ``page`` is dropped unless it is one of the changes.

        Args:
            **changes: Field values to set. ``None`` clears a field.

        Returns:
            A new SupplierFilter.
        """
        unknown = set(changes) - set(PARAM_NAMES)
        if unknown:
            raise TypeError(f"Unknown filter fields: {', '.join(sorted(unknown))}")

        if "page" not in changes:
            changes["page"] = None
        if "tags" in changes and changes["tags"] is None:
            changes["tags"] = ()
        for flag in ("has_discount", "featured"):
            if flag in changes and changes[flag] is None:
                changes[flag] = False
        return dataclass_replace(self, **changes)

    def with_page(self, page: int) -> "SupplierFilter":
        """Return a new filter pointing at another page."""
        return dataclass_replace(self, page=page)

    def toggle_tag(self, tag: str) -> "SupplierFilter":
        """Add the tag if absent, remove it if present."""
        if tag in self.tags:
            return self.replace(tags=tuple(t for t in self.tags if t != tag))
        return self.replace(tags=self.tags + (tag,))

    def toggle_rating(self, rating: int) -> "SupplierFilter":
        """Select a minimum rating; selecting the current one clears it."""
        return self.replace(rating=None if self.rating == rating else rating)

    def cleared(self) -> "SupplierFilter":
        """Drop every filter, keeping the page size."""
        return SupplierFilter(limit=self.limit)

    def get_summary(self) -> str:
        """Get a human-readable summary of active filters."""
        parts = []

        if self.search:
            parts.append(f'Search: "{self.search}"')
        if self.category:
            parts.append(f"Category: {self.category}")
        if self.location:
            parts.append(f"Location: {self.location}")
        if self.rating:
            parts.append(f"Rating: {self.rating}+ stars")
        if self.has_discount:
            parts.append("Has discount")
        if self.featured:
            parts.append("Featured")
        if self.tags:
            if len(self.tags) <= 3:
                parts.append(f"Tags: {', '.join(self.tags)}")
            else:
                parts.append(f"Tags: {len(self.tags)} selected")

        return " | ".join(parts) if parts else "All suppliers (no filters)"

    # ------------------------------------------------------------------
    # Codec
    # ------------------------------------------------------------------

    def to_url_params(self) -> List[Tuple[str, str]]:
        """
        Convert filter state to ordered query parameters.

        Absent, empty and false fields are omitted. Integer fields outside
        their valid range are omitted as well, so the output always decodes
        back to the same values.

        Returns:
            List of (parameter name, value) pairs; ``tags`` repeats.
        """
        params: List[Tuple[str, str]] = []

        if self.search:
            params.append(("search", self.search))
        if self.category:
            params.append(("category", self.category))
        if self.location:
            params.append(("location", self.location))
        if self.rating is not None:
            if _in_range(self.rating, MIN_RATING, MAX_RATING):
                params.append(("rating", str(self.rating)))
            else:
                logger.debug(f"Dropping out-of-range rating: {self.rating!r}")
        if self.has_discount:
            params.append(("hasDiscount", "true"))
        if self.featured:
            params.append(("featured", "true"))
        for tag in self.tags:
            params.append(("tags", tag))
        if self.sort_by in SORT_KEYS:
            params.append(("sortBy", self.sort_by))
        if self.sort_order in SORT_ORDERS:
            params.append(("sortOrder", self.sort_order))
        if _in_range(self.page, 1):
            params.append(("page", str(self.page)))
        if _in_range(self.limit, 1):
            params.append(("limit", str(self.limit)))

        return params

    def to_query_string(self) -> str:
        """Encode the filter as a query string (without a leading '?')."""
        return urlencode(self.to_url_params())

    @classmethod
    def from_url_params(cls, params: Iterable[Tuple[str, str]]) -> "SupplierFilter":
        """
        Create filter state from query parameters.

        Unknown parameters are ignored. Malformed values are treated as
        absent rather than raising.

        Args:
            params: (name, value) pairs, names may repeat.

        Returns:
            SupplierFilter populated from parameters.
        """
        single: Dict[str, str] = {}
        tags: List[str] = []

        for name, value in params:
            if name == "tags":
                tags.append(value)
            elif name not in single:
                # First occurrence wins for scalar parameters
                single[name] = value

        sort_by = single.get("sortBy")
        sort_order = single.get("sortOrder")

        return cls(
            search=single.get("search") or None,
            category=single.get("category") or None,
            location=single.get("location") or None,
            rating=_parse_int(single.get("rating"), MIN_RATING, MAX_RATING),
            has_discount=single.get("hasDiscount") == "true",
            featured=single.get("featured") == "true",
            tags=tuple(tags),
            sort_by=sort_by if sort_by in SORT_KEYS else None,
            sort_order=sort_order if sort_order in SORT_ORDERS else None,
            page=_parse_int(single.get("page"), 1),
            limit=_parse_int(single.get("limit"), 1),
        )

    @classmethod
    def from_query_string(cls, query_string: str) -> "SupplierFilter":
        """Decode a query string (a leading '?' is allowed)."""
        if query_string.startswith("?"):
            query_string = query_string[1:]
        return cls.from_url_params(parse_qsl(query_string, keep_blank_values=True))


def encode_filter(supplier_filter: SupplierFilter) -> str:
    """Encode a filter into its query-string form."""
    return supplier_filter.to_query_string()


def decode_filter(query_string: str) -> SupplierFilter:
    """Decode a query string into a filter."""
    return SupplierFilter.from_query_string(query_string)
