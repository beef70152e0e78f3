"""Convenience query builders — single-field searches by product, author or keyword.

Callers validate ``value`` before building; these helpers do not.
"""

from __future__ import annotations

from sample_galleries.models.query import Pagination, SearchFilter, SearchRequest


def by_product(product: str, page_index: int, page_size: int) -> SearchRequest:
    """Samples leveraging ``product``."""
    return SearchRequest(
        filter=SearchFilter(product_id=(product,)),
        pagination=Pagination(index=page_index, size=page_size),
    )


def by_author(author: str, page_index: int, page_size: int) -> SearchRequest:
    """Samples written by ``author``."""
    return SearchRequest(
        filter=SearchFilter(author_id=author),
        pagination=Pagination(index=page_index, size=page_size),
    )


def by_keyword(keyword: str, page_index: int, page_size: int) -> SearchRequest:
    """Samples matching the free-text ``keyword``."""
    return SearchRequest(
        filter=SearchFilter(search=keyword),
        pagination=Pagination(index=page_index, size=page_size),
    )
