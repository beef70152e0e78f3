"""Paged result envelope returned by every search tool."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import Field, field_validator

from sample_galleries.models.base import ApiModel

T = TypeVar("T")


class PagedResult(ApiModel, Generic[T]):
    """A page of items plus the total number of matches before pagination."""

    items: list[T] = Field(default_factory=list, description="The items of the current page")
    total: int = Field(default=0, ge=0, description="Total number of matching items, despite the pagination")

    @field_validator("items", mode="before")
    @classmethod
    def _null_items(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("total", mode="before")
    @classmethod
    def _null_total(cls, value: Any) -> Any:
        return 0 if value is None else value

    @classmethod
    def empty(cls) -> PagedResult[T]:
        """An empty page: no items, ``total == 0``."""
        return cls(items=[], total=0)
