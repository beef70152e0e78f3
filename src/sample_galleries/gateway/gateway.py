"""Samples API gateway — normalize, POST and decode one search against the samples API.

Uses ``httpx`` (async) for the single outbound call per search.  The
response is decoded in two stages: a strict pass first, then, only when the
strict pass failed on thumbnail types the client does not know yet, a
lenient pass that maps those tokens to ``ThumbnailType.UNSPECIFIED``.

Usage::

    gateway = SamplesGateway(base_url="https://samples.example.com/api/samples")
    await gateway.initialize()
    page = await gateway.search(SearchRequest(pagination=Pagination(index=1, size=10)))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError

from sample_galleries.core.normalizer import normalize
from sample_galleries.gateway.exceptions import ConfigurationError, DecodeError, TransportError
from sample_galleries.models.query import SearchRequest
from sample_galleries.models.result import PagedResult
from sample_galleries.models.sample import LENIENT_ENUMS, UNKNOWN_THUMBNAIL_TYPE, Sample

if TYPE_CHECKING:
    from sample_galleries.config.settings import SamplesApiSettings

logger = logging.getLogger(__name__)

SamplePage = PagedResult[Sample]


# ── Decode outcomes ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class _Decoded:
    page: PagedResult[Sample]


@dataclass(frozen=True)
class _ThumbnailTypeDrift:
    tokens: list[Any]


@dataclass(frozen=True)
class _Malformed:
    error: ValidationError


_DecodeOutcome = _Decoded | _ThumbnailTypeDrift | _Malformed


def _decode_page(payload: Any, *, lenient: bool) -> _DecodeOutcome:
    """Validate ``payload`` as a page of samples and classify the outcome."""
    try:
        page = SamplePage.model_validate(payload, context={LENIENT_ENUMS: lenient})
    except ValidationError as e:
        errors = e.errors()
        if not lenient and errors and all(err["type"] == UNKNOWN_THUMBNAIL_TYPE for err in errors):
            return _ThumbnailTypeDrift(tokens=[err.get("ctx", {}).get("token") for err in errors])
        return _Malformed(error=e)
    return _Decoded(page=page)


class SamplesGateway:
    """Client for the Community Samples Gallery search API.

    Args:
        base_url: Samples search endpoint. A trailing ``/`` is stripped.
            An empty value is accepted here and rejected on first search.
        client: Optional pre-configured ``httpx.AsyncClient``. When omitted,
            the gateway creates (and later closes) its own client.
        timeout: Request timeout in seconds for a self-created client.
    """

    def __init__(
        self,
        base_url: str | None = "",
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._base_url = (base_url or "").strip().rstrip("/")
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None

    @classmethod
    def from_settings(cls, settings: SamplesApiSettings, client: httpx.AsyncClient | None = None) -> SamplesGateway:
        """Build a gateway from the ``samples_api`` settings section."""
        return cls(settings.base_url, client=client, timeout=settings.timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def is_configured(self) -> bool:
        """Whether a base URL is set."""
        return bool(self._base_url)

    async def initialize(self) -> None:
        """Create the ``httpx.AsyncClient`` if none was injected."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout))
            self._owns_client = True

    async def shutdown(self) -> None:
        """Close the HTTP client if the gateway created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    # ── Search ───────────────────────────────────────────────────────────

    async def search(self, request: SearchRequest | None = None) -> PagedResult[Sample]:
        """Run one search against the samples API.

        Args:
            request: Search parameters. ``None`` means no filter, no sort and
                no pagination.

        Returns:
            The page of samples. A ``null`` response body yields an empty page.

        Raises:
            ConfigurationError: If the base URL is not configured.
            TransportError: If the request fails or returns a non-2xx status.
            DecodeError: If the response body cannot be parsed.
        """
        if request is None:
            request = SearchRequest()

        if not self._base_url:
            raise ConfigurationError("Samples API base URL is not configured.")

        logger.info("Searching for samples with parameters: %s", request.model_dump(mode="json"))

        cleaned = normalize(request)
        body = cleaned.to_payload()
        logger.debug("Making POST request to %s with body: %s", self._base_url, body)

        client = await self._get_client()
        try:
            resp = await client.post(self._base_url, json=body)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            raise TransportError(f"Samples API request failed: {e}") from e

        logger.debug("Raw API response: %s", resp.text)

        page = self._parse_response(resp)
        logger.info("Successfully retrieved %d samples out of %d total", len(page.items), page.total)
        return page

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            await self.initialize()
        return self._client  # type: ignore[return-value]

    # ── Decoding ─────────────────────────────────────────────────────────

    @staticmethod
    def _parse_response(resp: httpx.Response) -> PagedResult[Sample]:
        try:
            payload = resp.json()
        except ValueError as e:
            raise DecodeError(f"Failed to parse samples response: {e}") from e

        if payload is None:
            logger.warning("Received null response from samples API")
            return SamplePage.empty()

        outcome = _decode_page(payload, lenient=False)
        if isinstance(outcome, _ThumbnailTypeDrift):
            logger.warning(
                "Unknown thumbnail types %s in samples response, decoding leniently",
                outcome.tokens,
            )
            outcome = _decode_page(payload, lenient=True)

        if isinstance(outcome, _Malformed):
            raise DecodeError(f"Failed to parse samples response: {outcome.error}") from outcome.error
        if isinstance(outcome, _ThumbnailTypeDrift):
            raise DecodeError(f"Unknown thumbnail types in samples response: {outcome.tokens}")
        return outcome.page
