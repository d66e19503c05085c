"""Unit tests for PageRequest normalization."""

import pytest

from bse.domain.blog import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, PageRequest


class TestPageRequestNormalize:
    @pytest.mark.parametrize(
        ("page", "page_size", "expected"),
        [
            (None, None, (1, DEFAULT_PAGE_SIZE)),
            (0, 10, (1, 10)),
            (-3, 10, (1, 10)),
            (2, 0, (2, DEFAULT_PAGE_SIZE)),
            (2, -1, (2, DEFAULT_PAGE_SIZE)),
            (1, 500, (1, MAX_PAGE_SIZE)),
            (1, MAX_PAGE_SIZE, (1, MAX_PAGE_SIZE)),
            (3, 6, (3, 6)),
        ],
    )
    def test_normalize(self, page, page_size, expected):
        request = PageRequest.normalize(page, page_size)

        assert (request.page, request.page_size) == expected


class TestPageRequestMath:
    def test_offset(self):
        assert PageRequest(page=1, page_size=10).offset == 0
        assert PageRequest(page=3, page_size=10).offset == 20

    @pytest.mark.parametrize(
        ("total", "page_size", "pages"),
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 6, 5)],
    )
    def test_total_pages_is_ceiling(self, total, page_size, pages):
        assert PageRequest(page=1, page_size=page_size).total_pages(total) == pages
