"""Search request models — filter, sort and pagination sent to the samples API."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field, field_validator

from sample_galleries.models.base import RequestModel


class SortField(str, Enum):
    """Fields the samples API can sort on."""

    TITLE = "title"
    CREATION_DATE_TIME = "creationDateTime"
    UPDATE_DATE_TIME = "updateDateTime"

    @classmethod
    def _missing_(cls, value: object) -> SortField | None:
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None


class Sorting(str, Enum):
    """Effective sort direction applied to a single field."""

    NONE = "none"
    ASCENDING = "ascending"
    DESCENDING = "descending"


class Pagination(RequestModel):
    """Page selection. ``index`` is 1-based on the samples API."""

    index: int = Field(default=1, description="The page number, starting from 1")
    size: int = Field(default=20, description="The number of samples per page")


class SearchSort(RequestModel):
    """How samples should be sorted."""

    field: SortField = Field(description="The field to sort on: title, creationDateTime or updateDateTime")
    descending: bool = Field(default=False, description="Sort in descending order")

    @field_validator("field", mode="before")
    @classmethod
    def _parse_field(cls, value: Any) -> Any:
        if isinstance(value, str):
            return SortField(value)
        return value

    def direction_for(self, field: SortField) -> Sorting:
        """Return the direction this sort applies to ``field`` (``NONE`` for other fields)."""
        if field is not self.field:
            return Sorting.NONE
        return Sorting.DESCENDING if self.descending else Sorting.ASCENDING


class MetadataFilter(RequestModel):
    """A key/value pair matched against sample metadata (e.g. ``CLIENT-SIDE-DEV``)."""

    key: str | None = Field(default=None, description="The metadata key to search in")
    value: str | None = Field(default=None, description="The value to search for")


class SearchFilter(RequestModel):
    """Filter criteria. Unset fields are not sent upstream."""

    search: str | None = Field(default=None, description="Free text to search for; empty retrieves all samples")
    product_id: tuple[str, ...] | None = Field(default=None, description="Product IDs to filter on")
    author_id: str | None = Field(default=None, description="The author ID to filter on")
    category_id: str | None = Field(default=None, description="The category ID to filter on")
    featured_only: bool = Field(default=False, description="Retrieve featured samples only")
    metadata: tuple[MetadataFilter, ...] = Field(default=(), description="Additional metadata filters")


class SearchRequest(RequestModel):
    """Search parameters: optional filter, sort and pagination."""

    filter: SearchFilter | None = Field(default=None, description="The optional filter to apply")
    sort: SearchSort | None = Field(default=None, description="The optional sorting to apply")
    pagination: Pagination | None = Field(default=None, description="The optional pagination to apply")

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON body, omitting unset fields."""
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        filter_payload = payload.get("filter")
        if filter_payload is not None and not filter_payload.get("metadata"):
            filter_payload.pop("metadata", None)
        return payload
