"""Parameter normalization — turns loosely-specified search input into a canonical request.

The samples API treats an explicit empty value differently from an absent
field, so every blank string, empty list, invalid metadata pair and
all-empty filter is dropped before the request goes upstream. A page index
of ``0`` is read as a 0-based caller mistake and upgraded to ``1``.
"""

from __future__ import annotations

import logging

from sample_galleries.models.query import MetadataFilter, Pagination, SearchFilter, SearchRequest

logger = logging.getLogger(__name__)


def normalize(request: SearchRequest) -> SearchRequest:
    """Return the canonical form of ``request``.

    Pure and total: never raises, never mutates its input. Normalizing an
    already normalized request returns an equal request.

    Args:
        request: Raw search parameters as received from the caller.

    Returns:
        A new request that is safe to serialize upstream.
    """
    return SearchRequest(
        filter=_clean_filter(request.filter) if request.filter is not None else None,
        sort=request.sort,
        pagination=_clean_pagination(request.pagination),
    )


def _clean_pagination(pagination: Pagination | None) -> Pagination | None:
    if pagination is None or pagination.index != 0:
        return pagination
    logger.debug("Upgraded page index from 0 to 1 for 1-based pagination")
    return Pagination(index=1, size=pagination.size)


def _clean_filter(raw: SearchFilter) -> SearchFilter | None:
    product_ids = tuple(p.strip() for p in raw.product_id or () if not _is_blank(p))
    metadata = tuple(m for m in raw.metadata if _is_valid_metadata(m))

    cleaned = SearchFilter(
        search=None if _is_blank(raw.search) else raw.search,
        product_id=product_ids or None,
        author_id=None if _is_blank(raw.author_id) else raw.author_id,
        category_id=None if _is_blank(raw.category_id) else raw.category_id,
        featured_only=raw.featured_only,
        metadata=metadata,
    )

    meaningful = (
        cleaned.search is not None
        or cleaned.author_id is not None
        or cleaned.category_id is not None
        or cleaned.product_id is not None
        or cleaned.featured_only
        or bool(cleaned.metadata)
    )
    return cleaned if meaningful else None


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _is_valid_metadata(pair: MetadataFilter) -> bool:
    return not _is_blank(pair.key) and not _is_blank(pair.value)
