"""Tests for the convenience query builders."""

from __future__ import annotations

from sample_galleries.core import builder
from sample_galleries.models.query import Pagination, SearchFilter


class TestBuilders:
    def test_by_product(self) -> None:
        request = builder.by_product("spfx", 2, 25)
        assert request.filter == SearchFilter(product_id=("spfx",))
        assert request.pagination == Pagination(index=2, size=25)
        assert request.sort is None

    def test_by_author(self) -> None:
        request = builder.by_author("octocat", 1, 10)
        assert request.filter == SearchFilter(author_id="octocat")
        assert request.pagination == Pagination(index=1, size=10)

    def test_by_keyword(self) -> None:
        request = builder.by_keyword("react hooks", 3, 5)
        assert request.filter == SearchFilter(search="react hooks")
        assert request.pagination == Pagination(index=3, size=5)

    def test_page_index_passed_verbatim(self) -> None:
        assert builder.by_keyword("x", 0, 10).pagination == Pagination(index=0, size=10)
