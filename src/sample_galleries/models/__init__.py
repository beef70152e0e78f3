"""Data models for search requests, samples and paged results."""

from sample_galleries.models.query import (
    MetadataFilter,
    Pagination,
    SearchFilter,
    SearchRequest,
    SearchSort,
    Sorting,
    SortField,
)
from sample_galleries.models.result import PagedResult
from sample_galleries.models.sample import Sample, Thumbnail, ThumbnailType

__all__ = [
    "MetadataFilter",
    "PagedResult",
    "Pagination",
    "Sample",
    "SearchFilter",
    "SearchRequest",
    "SearchSort",
    "SortField",
    "Sorting",
    "Thumbnail",
    "ThumbnailType",
]
