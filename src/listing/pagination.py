"""Pagination metadata and pager window calculation.

``PaginationMeta`` mirrors the ``pagination`` block of the listing envelope.
``compute_window`` turns (current page, total pages, visible buttons) into
the token sequence a pager renders: page numbers with ``ELLIPSIS`` markers
standing in for skipped ranges.
"""

import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Union

from config.constants import DEFAULT_MAX_VISIBLE_PAGES, ITEMS_PER_PAGE

ELLIPSIS = "..."

PageToken = Union[int, str]


@dataclass(frozen=True)
class PaginationMeta:
    """Pagination block for one page of listing results."""

    page: int = 1
    limit: int = ITEMS_PER_PAGE
    total: int = 0
    total_pages: int = 0
    has_next: bool = False
    has_prev: bool = False

    @classmethod
    def from_total(cls, page: int, limit: int, total: int) -> "PaginationMeta":
        """
        Build metadata from a total item count.

        Args:
            page: Current page (1-based)
            limit: Page size
            total: Total matching items

        Returns:
            PaginationMeta with derived page count and navigation flags
        """
        total_pages = math.ceil(total / limit) if limit > 0 and total > 0 else 0
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )

    @classmethod
    def empty(cls, limit: int = ITEMS_PER_PAGE) -> "PaginationMeta":
        """Zeroed block used when a listing request fails."""
        return cls(page=1, limit=limit, total=0, total_pages=0, has_next=False, has_prev=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], fallback_limit: int = ITEMS_PER_PAGE) -> "PaginationMeta":
        """
        Read the envelope's camelCase pagination block.

        Navigation flags are recomputed when the block omits them.

        Raises:
            ValueError: If a numeric field is not an integer.
        """
        page = int(data.get("page", 1))
        limit = int(data.get("limit", fallback_limit))
        total = int(data.get("total", 0))
        total_pages = data.get("totalPages")
        if total_pages is None:
            total_pages = math.ceil(total / limit) if limit > 0 and total > 0 else 0
        total_pages = int(total_pages)

        has_next = data.get("hasNext")
        has_prev = data.get("hasPrev")
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=bool(has_next) if has_next is not None else page < total_pages,
            has_prev=bool(has_prev) if has_prev is not None else page > 1,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the envelope's camelCase form."""
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "totalPages": self.total_pages,
            "hasNext": self.has_next,
            "hasPrev": self.has_prev,
        }

    def as_record(self) -> Dict[str, Any]:
        """Convert to a snake_case dictionary."""
        return asdict(self)

    @property
    def offset(self) -> int:
        """Calculate offset for current page."""
        return (self.page - 1) * self.limit

    @property
    def start_item(self) -> int:
        """Get 1-based index of the first item on this page."""
        if self.total == 0:
            return 0
        return self.offset + 1

    @property
    def end_item(self) -> int:
        """Get 1-based index of the last item on this page."""
        return min(self.offset + self.limit, self.total)

    @property
    def should_render(self) -> bool:
        """Check if a pager should be shown at all."""
        return should_render(self.total_pages)

    def get_display_range(self) -> str:
        """Get formatted display range string."""
        if self.total == 0:
            return "No results"
        return f"Showing {self.start_item:,} - {self.end_item:,} of {self.total:,}"

    def window(self, max_visible: int = DEFAULT_MAX_VISIBLE_PAGES) -> List[PageToken]:
        """Pager tokens for this page, or an empty list when no pager is shown."""
        if not self.should_render:
            return []
        current = min(max(self.page, 1), self.total_pages)
        return compute_window(current, self.total_pages, max_visible)


def should_render(total_pages: int) -> bool:
    """A pager is only rendered when there is more than one page."""
    return total_pages > 1


def compute_window(
    current_page: int,
    total_pages: int,
    max_visible: int = DEFAULT_MAX_VISIBLE_PAGES,
) -> List[PageToken]:
    """
    Compute the page tokens for a pager control.

    The caller is responsible for clamping ``current_page`` into
    ``[1, total_pages]`` and for not rendering a pager when
    ``total_pages <= 1``.

    Args:
        current_page: Page being shown (1-based)
        total_pages: Number of pages available
        max_visible: Width of the block of consecutive page numbers

    Returns:
        Ordered list of page numbers and ELLIPSIS markers. When truncated,
        the first and last pages are always included.
    """
    if total_pages <= max_visible:
        return list(range(1, total_pages + 1))

    side = max_visible // 2
    start = max(1, current_page - side)
    end = min(total_pages, current_page + side)

    # Keep the window full width near either edge
    if current_page <= side:
        end = max_visible
    if current_page > total_pages - side:
        start = total_pages - max_visible + 1

    tokens: List[PageToken] = []

    if start > 1:
        tokens.append(1)
        if start > 2:
            tokens.append(ELLIPSIS)

    tokens.extend(range(start, end + 1))

    if end < total_pages:
        if end < total_pages - 1:
            tokens.append(ELLIPSIS)
        tokens.append(total_pages)

    return tokens


def clamp_page(page: Optional[int], total_pages: int) -> int:
    """Clamp a requested page into the valid range (1 when there are no pages)."""
    if page is None or page < 1:
        return 1
    if total_pages < 1:
        return 1
    return min(page, total_pages)
