"""Samples API gateway — the single outbound call to the samples search API."""

from sample_galleries.gateway.exceptions import ConfigurationError, DecodeError, SamplesApiError, TransportError
from sample_galleries.gateway.gateway import SamplesGateway

__all__ = ["ConfigurationError", "DecodeError", "SamplesApiError", "SamplesGateway", "TransportError"]
