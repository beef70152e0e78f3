"""Samples API gateway exceptions."""


class SamplesApiError(Exception):
    """Base exception for samples API errors."""


class ConfigurationError(SamplesApiError):
    """Raised when the samples API base URL is not configured."""


class TransportError(SamplesApiError):
    """Raised when the HTTP exchange fails (connection error, timeout or non-2xx status)."""


class DecodeError(SamplesApiError):
    """Raised when the samples API response cannot be parsed."""
