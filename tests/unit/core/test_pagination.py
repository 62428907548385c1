from __future__ import annotations

import pytest

from modules.core.pagination import Page, PageRequest

pytestmark = pytest.mark.unit


class TestPageRequest:
    def test_offset(self):
        assert PageRequest(page=3, size=10, order_by="category").offset == 30

    def test_first_page_offset_is_zero(self):
        assert PageRequest(page=0, size=10, order_by="category").offset == 0


class TestPage:
    @pytest.mark.parametrize(
        ("total", "size", "expected"),
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3)],
    )
    def test_total_pages(self, total, size, expected):
        page = Page(items=[], total_elements=total, page=0, size=size)
        assert page.total_pages == expected
