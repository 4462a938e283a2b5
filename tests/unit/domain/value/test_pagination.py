"""Unit tests for pagination values."""

import pytest

from bunko.domain.value import PaginationMeta
from bunko.domain.value.pagination import normalize_page, page_offset


class TestPaginationMeta:
    """Tests for metadata derived from the unpaginated total."""

    @pytest.mark.parametrize(
        "page,total_pages,prev_page,next_page",
        [
            (1, 3, None, 2),
            (2, 3, 1, 3),
            (3, 3, 2, None),
            (99, 3, 98, None),
        ],
    )
    def test_twenty_five_items_ten_per_page(
        self, page, total_pages, prev_page, next_page
    ):
        meta = PaginationMeta.compute(page, 10, 25)

        assert meta.current_page == page
        assert meta.total_count == 25
        assert meta.total_pages == total_pages
        assert meta.prev_page == prev_page
        assert meta.next_page == next_page

    def test_exact_multiple(self):
        meta = PaginationMeta.compute(2, 10, 20)

        assert meta.total_pages == 2
        assert meta.next_page is None

    def test_no_items(self):
        meta = PaginationMeta.compute(1, 10, 0)

        assert meta.total_pages == 0
        assert meta.prev_page is None
        assert meta.next_page is None

    def test_serialised_keys(self):
        meta = PaginationMeta.compute(1, 10, 5)

        assert set(meta.model_dump()) == {
            "current_page",
            "per_page",
            "total_count",
            "total_pages",
            "prev_page",
            "next_page",
        }


class TestPageHelpers:
    @pytest.mark.parametrize("page,expected", [(None, 1), (-3, 1), (0, 1), (7, 7)])
    def test_normalize_page(self, page, expected):
        assert normalize_page(page) == expected

    def test_page_offset(self):
        assert page_offset(1, 10) == 0
        assert page_offset(3, 10) == 20
