"""Tests for pagination metadata and the pager window."""

import pytest

from src.listing.pagination import (
    ELLIPSIS,
    PaginationMeta,
    clamp_page,
    compute_window,
    should_render,
)


class TestComputeWindow:
    """Tests for the pager token sequence."""

    def test_centered_window(self):
        """Test 20 pages, 7 visible, page 10."""
        assert compute_window(10, 20, 7) == [1, ELLIPSIS, 7, 8, 9, 10, 11, 12, 13, ELLIPSIS, 20]

    def test_small_total_shows_every_page(self):
        assert compute_window(2, 5, 7) == [1, 2, 3, 4, 5]
        assert compute_window(7, 7, 7) == [1, 2, 3, 4, 5, 6, 7]

    def test_start_edge_keeps_full_width(self):
        assert compute_window(1, 20, 7) == [1, 2, 3, 4, 5, 6, 7, ELLIPSIS, 20]
        assert compute_window(3, 20, 7) == [1, 2, 3, 4, 5, 6, 7, ELLIPSIS, 20]

    def test_end_edge_keeps_full_width(self):
        assert compute_window(20, 20, 7) == [1, ELLIPSIS, 14, 15, 16, 17, 18, 19, 20]
        assert compute_window(18, 20, 7) == [1, ELLIPSIS, 14, 15, 16, 17, 18, 19, 20]

    def test_no_ellipsis_for_adjacent_gap(self):
        """Test that a window starting at page 2 is not preceded by an ellipsis."""
        tokens = compute_window(5, 20, 7)
        assert tokens[:3] == [1, 2, 3]

    @pytest.mark.parametrize("total", [1, 2, 7, 8, 9, 20, 57])
    @pytest.mark.parametrize("max_visible", [3, 5, 7])
    def test_window_invariants(self, total, max_visible):
        """Test bounds, ordering, endpoints and ellipsis placement for every page."""
        for current in range(1, total + 1):
            tokens = compute_window(current, total, max_visible)
            pages = [t for t in tokens if t != ELLIPSIS]

            assert all(1 <= p <= total for p in pages)
            assert pages == sorted(set(pages))
            assert current in pages
            assert pages[0] == 1
            assert pages[-1] == total

            for a, b in zip(tokens, tokens[1:]):
                assert not (a == ELLIPSIS and b == ELLIPSIS)

            # Each ellipsis stands for at least one skipped page
            for i, token in enumerate(tokens):
                if token == ELLIPSIS:
                    assert tokens[i + 1] - tokens[i - 1] > 1


class TestShouldRender:
    """Tests for whether a pager is shown."""

    @pytest.mark.parametrize("total_pages,expected", [(0, False), (1, False), (2, True), (40, True)])
    def test_should_render(self, total_pages, expected):
        assert should_render(total_pages) is expected


class TestClampPage:
    def test_clamp_page(self):
        assert clamp_page(None, 5) == 1
        assert clamp_page(0, 5) == 1
        assert clamp_page(9, 5) == 5
        assert clamp_page(3, 5) == 3
        assert clamp_page(3, 0) == 1


class TestPaginationMeta:
    """Tests for pagination metadata."""

    def test_from_total(self):
        meta = PaginationMeta.from_total(page=2, limit=12, total=40)

        assert meta.total_pages == 4
        assert meta.has_next is True
        assert meta.has_prev is True
        assert meta.offset == 12

    def test_from_total_last_page(self):
        meta = PaginationMeta.from_total(page=4, limit=12, total=40)
        assert meta.has_next is False
        assert meta.end_item == 40

    def test_from_total_empty(self):
        meta = PaginationMeta.from_total(page=1, limit=12, total=0)
        assert meta.total_pages == 0
        assert meta.has_next is False
        assert meta.has_prev is False
        assert meta.should_render is False
        assert meta.window() == []

    def test_display_range(self):
        assert PaginationMeta.from_total(2, 12, 40).get_display_range() == "Showing 13 - 24 of 40"
        assert PaginationMeta.empty().get_display_range() == "No results"

    def test_from_dict_reads_camel_case(self):
        meta = PaginationMeta.from_dict(
            {"page": 2, "limit": 2, "total": 5, "totalPages": 3, "hasNext": True, "hasPrev": True}
        )
        assert meta == PaginationMeta(2, 2, 5, 3, True, True)

    def test_from_dict_recomputes_missing_fields(self):
        meta = PaginationMeta.from_dict({"page": 1, "total": 30}, fallback_limit=12)
        assert meta.limit == 12
        assert meta.total_pages == 3
        assert meta.has_next is True
        assert meta.has_prev is False

    def test_from_dict_rejects_non_numeric(self):
        with pytest.raises(ValueError):
            PaginationMeta.from_dict({"page": "two"})

    def test_to_dict_round_trips(self):
        meta = PaginationMeta.from_total(3, 10, 95)
        assert PaginationMeta.from_dict(meta.to_dict()) == meta

    def test_window_clamps_current_page(self):
        """Test that a page past the end still yields a valid window."""
        meta = PaginationMeta(page=50, limit=12, total=240, total_pages=20, has_next=False, has_prev=True)
        assert meta.window(7)[-1] == 20
        assert 20 in meta.window(7)
