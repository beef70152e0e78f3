"""Sample models — catalog records returned by the Community Samples Gallery API."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from sample_galleries.models.base import ApiModel

# Validation context key switching thumbnail types to lenient parsing.
LENIENT_ENUMS = "lenient_enums"

# Error type raised for thumbnail type tokens outside ``ThumbnailType``.
UNKNOWN_THUMBNAIL_TYPE = "unknown_thumbnail_type"


class ThumbnailType(str, Enum):
    """Flavors of sample thumbnails.

    ``UNSPECIFIED`` is never sent by the API; it marks a missing type or, in
    lenient decoding, a token this client does not know yet.
    """

    IMAGE = "image"
    VIDEO = "video"
    SLIDESHOW = "slideshow"
    UNSPECIFIED = "unspecified"

    @classmethod
    def parse(cls, token: Any, *, lenient: bool = False) -> ThumbnailType:
        """Match ``token`` case-insensitively against the known types.

        Raises:
            PydanticCustomError: If the token is unknown and ``lenient`` is False.
        """
        if isinstance(token, str):
            for member in (cls.IMAGE, cls.VIDEO, cls.SLIDESHOW):
                if member.value.lower() == token.lower():
                    return member
        if lenient:
            return cls.UNSPECIFIED
        raise PydanticCustomError(
            UNKNOWN_THUMBNAIL_TYPE,
            "Unknown thumbnail type '{token}'",
            {"token": token},
        )


class SampleMetadata(ApiModel):
    key: str | None = None
    value: str | None = None


class ThumbnailSlide(ApiModel):
    """A slide of a sample's slideshow."""

    order: int = 0
    url: str | None = None
    alt: str | None = None


class Thumbnail(ApiModel):
    """A thumbnail of a sample. ``url`` may be relative or absolute."""

    type: ThumbnailType = ThumbnailType.UNSPECIFIED
    sort_order: int = 0
    url: str | None = None
    alt: str | None = None
    slides: list[ThumbnailSlide] = Field(default_factory=list)

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: Any, info: ValidationInfo) -> ThumbnailType:
        if isinstance(value, ThumbnailType):
            return value
        lenient = bool(info.context and info.context.get(LENIENT_ENUMS))
        return ThumbnailType.parse(value, lenient=lenient)

    @field_validator("slides", mode="before")
    @classmethod
    def _null_slides(cls, value: Any) -> Any:
        return [] if value is None else value


class Author(ApiModel):
    """Lightweight author record attached to a sample."""

    git_hub_account: str | None = None
    display_name: str | None = None
    company: str | None = None
    picture_url: str | None = None


class Reference(ApiModel):
    name: str | None = None
    url: str | None = None
    description: str | None = None


class Preview(ApiModel):
    """Preview settings of a sample; ``settings`` is an opaque JSON blob."""

    label: str | None = None
    url: str | None = None
    settings: Any = None


class Sample(ApiModel):
    """A community-contributed code sample."""

    sample_id: str | None = Field(default=None, description="The ID of the sample")
    name: str | None = None
    version: str | None = None
    source: str | None = None
    title: str | None = None
    short_description: str | None = None
    download_url: str | None = Field(default=None, description="Absolute download URL")
    url: str | None = Field(default=None, description="Absolute URL of the sample page")
    tracking_image: str | None = None
    products: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    authors: list[Author] = Field(default_factory=list)
    metadata: list[SampleMetadata] = Field(default_factory=list)
    thumbnails: list[Thumbnail] = Field(default_factory=list)
    references: list[Reference] = Field(default_factory=list)
    preview: Preview | None = None
    creation_date_time: datetime | None = None
    update_date_time: datetime | None = None
    featured: bool = False

    @field_validator("products", "categories", "authors", "metadata", "thumbnails", "references", mode="before")
    @classmethod
    def _null_lists(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("featured", mode="before")
    @classmethod
    def _null_featured(cls, value: Any) -> Any:
        return False if value is None else value
