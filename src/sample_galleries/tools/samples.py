"""Samples tools — the four search operations offered to a calling agent.

The convenience operations (by product, author or keyword) never fail on a
blank argument: they log a warning and return an empty page without calling
the samples API. Every gateway failure is wrapped in ``SearchSamplesError``
with the original exception kept as ``__cause__``.
"""

from __future__ import annotations

import logging

from sample_galleries.core import builder
from sample_galleries.gateway.exceptions import SamplesApiError
from sample_galleries.gateway.gateway import SamplesGateway
from sample_galleries.models.query import SearchRequest
from sample_galleries.models.result import PagedResult
from sample_galleries.models.sample import Sample

logger = logging.getLogger(__name__)


class SearchSamplesError(Exception):
    """Raised when a search against the samples API fails."""


class SamplesTools:
    """Search operations over the Community Samples Gallery.

    Args:
        gateway: The samples API gateway every search goes through.
    """

    def __init__(self, gateway: SamplesGateway) -> None:
        self.gateway = gateway

    async def samples_by_product(self, product: str | None, page_index: int, page_size: int) -> PagedResult[Sample]:
        """Retrieve samples leveraging ``product``."""
        if _is_blank(product):
            logger.warning("Received null or empty product parameter, cannot retrieve samples by product")
            return PagedResult[Sample].empty()
        return await self.search_samples(builder.by_product(product, page_index, page_size))  # type: ignore[arg-type]

    async def samples_by_author(self, author: str | None, page_index: int, page_size: int) -> PagedResult[Sample]:
        """Retrieve samples written by ``author``."""
        if _is_blank(author):
            logger.warning("Received null or empty author parameter, cannot retrieve samples by author")
            return PagedResult[Sample].empty()
        return await self.search_samples(builder.by_author(author, page_index, page_size))  # type: ignore[arg-type]

    async def samples_by_keyword(self, keyword: str | None, page_index: int, page_size: int) -> PagedResult[Sample]:
        """Retrieve samples matching ``keyword``."""
        if _is_blank(keyword):
            logger.warning("Received null or empty keyword parameter, cannot retrieve samples by keyword")
            return PagedResult[Sample].empty()
        return await self.search_samples(builder.by_keyword(keyword, page_index, page_size))  # type: ignore[arg-type]

    async def search_samples(self, search: SearchRequest | None = None) -> PagedResult[Sample]:
        """Search samples with an arbitrary filter, sort and pagination.

        Args:
            search: Search parameters. ``None`` behaves like an empty request.

        Returns:
            The page of matching samples.

        Raises:
            SearchSamplesError: If the samples API is not configured, cannot
                be reached, or returns an unparseable response.
        """
        if search is None:
            logger.warning("Received null search parameters, using default values")
            search = SearchRequest()

        try:
            return await self.gateway.search(search)
        except SamplesApiError as e:
            logger.error("Samples search failed: %s", e, exc_info=True)
            raise SearchSamplesError(f"Failed to retrieve samples from the API: {e}") from e


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()
