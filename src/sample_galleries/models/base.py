"""Shared model base — camelCase wire format with case-insensitive key matching."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base class for every model exchanged with the samples API or a tool caller.

    Fields are declared in snake_case and exposed in camelCase on the wire.
    Incoming keys are matched case-insensitively (``SampleId``, ``sampleid``
    and ``sampleId`` all land on ``sample_id``); unknown keys are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        known: dict[str, str] = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            known[name.lower()] = alias
            known[alias.lower()] = alias

        return {known.get(str(key).lower(), key): value for key, value in data.items()}


class RequestModel(ApiModel):
    """Immutable variant used for outbound search requests."""

    model_config = ConfigDict(frozen=True)
