"""Tests for the samples tool operations."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from sample_galleries.core import builder
from sample_galleries.gateway.exceptions import ConfigurationError, DecodeError, TransportError
from sample_galleries.gateway.gateway import SamplesGateway
from sample_galleries.models.query import SearchRequest
from sample_galleries.models.result import PagedResult
from sample_galleries.models.sample import Sample
from sample_galleries.tools.samples import SamplesTools, SearchSamplesError

# ── Fixtures ─────────────────────────────────────────────────────────────────


@pytest.fixture
def mock_gateway() -> AsyncMock:
    gateway = AsyncMock(spec=SamplesGateway)
    gateway.search.return_value = PagedResult[Sample](items=[Sample(sample_id="s1")], total=1)
    return gateway


@pytest.fixture
def tools(mock_gateway: AsyncMock) -> SamplesTools:
    return SamplesTools(mock_gateway)


# ── Blank arguments ──────────────────────────────────────────────────────────


class TestBlankArguments:
    @pytest.mark.parametrize("value", ["", None, "   "])
    async def test_blank_product_returns_empty(self, tools: SamplesTools, mock_gateway: AsyncMock, value: Any) -> None:
        page = await tools.samples_by_product(value, 1, 10)
        assert page.items == []
        assert page.total == 0
        mock_gateway.search.assert_not_awaited()

    @pytest.mark.parametrize("value", ["", None, "\t"])
    async def test_blank_author_returns_empty(self, tools: SamplesTools, mock_gateway: AsyncMock, value: Any) -> None:
        page = await tools.samples_by_author(value, 1, 10)
        assert page.total == 0
        mock_gateway.search.assert_not_awaited()

    @pytest.mark.parametrize("value", ["", None, "   "])
    async def test_blank_keyword_returns_empty(self, tools: SamplesTools, mock_gateway: AsyncMock, value: Any) -> None:
        page = await tools.samples_by_keyword(value, 1, 10)
        assert page.total == 0
        mock_gateway.search.assert_not_awaited()


# ── Delegation ───────────────────────────────────────────────────────────────


class TestDelegation:
    async def test_by_product(self, tools: SamplesTools, mock_gateway: AsyncMock) -> None:
        page = await tools.samples_by_product("spfx", 2, 10)
        mock_gateway.search.assert_awaited_once_with(builder.by_product("spfx", 2, 10))
        assert page.items[0].sample_id == "s1"

    async def test_by_author(self, tools: SamplesTools, mock_gateway: AsyncMock) -> None:
        await tools.samples_by_author("octocat", 1, 5)
        mock_gateway.search.assert_awaited_once_with(builder.by_author("octocat", 1, 5))

    async def test_by_keyword(self, tools: SamplesTools, mock_gateway: AsyncMock) -> None:
        await tools.samples_by_keyword("hooks", 1, 5)
        mock_gateway.search.assert_awaited_once_with(builder.by_keyword("hooks", 1, 5))

    async def test_search_samples_none_uses_default_request(self, tools: SamplesTools, mock_gateway: AsyncMock) -> None:
        await tools.search_samples(None)
        mock_gateway.search.assert_awaited_once_with(SearchRequest())

    async def test_search_samples_passes_request(self, tools: SamplesTools, mock_gateway: AsyncMock) -> None:
        request = builder.by_keyword("teams", 1, 20)
        page = await tools.search_samples(request)
        mock_gateway.search.assert_awaited_once_with(request)
        assert page.total == 1


# ── Failures ─────────────────────────────────────────────────────────────────


class TestFailures:
    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError("Samples API base URL is not configured."),
            TransportError("Samples API request failed"),
            DecodeError("Failed to parse samples response"),
        ],
    )
    async def test_gateway_errors_wrapped(self, tools: SamplesTools, mock_gateway: AsyncMock, error: Exception) -> None:
        mock_gateway.search.side_effect = error
        with pytest.raises(SearchSamplesError, match="Failed to retrieve samples") as exc_info:
            await tools.search_samples(SearchRequest())
        assert exc_info.value.__cause__ is error

    async def test_convenience_operation_errors_wrapped(self, tools: SamplesTools, mock_gateway: AsyncMock) -> None:
        mock_gateway.search.side_effect = TransportError("boom")
        with pytest.raises(SearchSamplesError):
            await tools.samples_by_author("octocat", 1, 10)

    async def test_unexpected_errors_propagate_unchanged(self, tools: SamplesTools, mock_gateway: AsyncMock) -> None:
        mock_gateway.search.side_effect = RuntimeError("unexpected")
        with pytest.raises(RuntimeError, match="unexpected"):
            await tools.search_samples()


# ── End to end through the gateway ───────────────────────────────────────────


class TestThroughGateway:
    async def test_convenience_zero_page_index_upgraded(self, gateway: SamplesGateway, samples_api: Any) -> None:
        tools = SamplesTools(gateway)
        await tools.samples_by_product("spfx", 0, 10)
        assert samples_api.last_payload == {
            "filter": {"productId": ["spfx"], "featuredOnly": False},
            "pagination": {"index": 1, "size": 10},
        }

    async def test_blank_argument_makes_no_call(self, gateway: SamplesGateway, samples_api: Any) -> None:
        tools = SamplesTools(gateway)
        await tools.samples_by_product("", 1, 10)
        await tools.samples_by_author(None, 1, 10)  # type: ignore[arg-type]
        await tools.samples_by_keyword("   ", 1, 10)
        assert samples_api.requests == []

    async def test_non_2xx_yields_no_partial_result(self, gateway: SamplesGateway, samples_api: Any) -> None:
        samples_api.respond_with({"items": [{"sampleId": "s1"}], "total": 1}, status_code=503)
        tools = SamplesTools(gateway)
        with pytest.raises(SearchSamplesError) as exc_info:
            await tools.search_samples()
        assert isinstance(exc_info.value.__cause__, TransportError)
