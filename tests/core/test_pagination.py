"""Tests for offset/limit windowing and page counts."""

import pytest

from widget_table.core.pagination import PageMeta, page_meta, total_pages, window
from widget_table.core.state import MAX_PAGE, PaginationState


class TestWindow:
    def test_offset_for_third_page(self):
        spec = window(PaginationState(sort_key="name", order="asc", page=3), 10)
        assert spec.offset == 20
        assert spec.limit == 10
        assert spec.sort_key == "name"
        assert spec.order == "asc"

    def test_first_page_starts_at_zero(self):
        assert window(PaginationState(), 25).offset == 0

    def test_page_past_the_end_is_not_clamped(self):
        assert window(PaginationState(page=50), 10).offset == 490

    def test_sort_key_passes_through_unchecked(self):
        spec = window(PaginationState(sort_key="anything; drop table"), 10)
        assert spec.sort_key == "anything; drop table"

    def test_rejects_non_positive_page_size(self):
        with pytest.raises(ValueError):
            window(PaginationState(), 0)


    def test_largest_page_fits_a_64_bit_offset(self):
        spec = window(PaginationState(page=MAX_PAGE), 1_000_000)
        assert spec.offset < 2**63


class TestTotalPages:
    @pytest.mark.parametrize(
        "count, size, expected",
        [(95, 10, 10), (100, 10, 10), (101, 10, 11), (1, 10, 1), (0, 10, 0), (7, 1, 7)],
    )
    def test_ceiling(self, count, size, expected):
        assert total_pages(count, size) == expected

    def test_rejects_bad_input(self):
        with pytest.raises(ValueError):
            total_pages(10, 0)
        with pytest.raises(ValueError):
            total_pages(-1, 10)


def test_page_meta():
    meta = page_meta(PaginationState(page=2), total_count=95, page_size=10)
    assert meta == PageMeta(total=95, page=2, limit=10, pages=10)
