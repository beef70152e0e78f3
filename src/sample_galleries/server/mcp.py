"""MCP server — registers the samples tools on a FastMCP instance.

The same server backs both transports: ``run(transport="stdio")`` from the
CLI, or ``http_app()`` mounted into the FastAPI application.
"""

import logging
from collections.abc import AsyncIterator, Awaitable
from contextlib import asynccontextmanager
from typing import Annotated

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from sample_galleries import __version__
from sample_galleries.models.query import SearchRequest
from sample_galleries.models.result import PagedResult
from sample_galleries.models.sample import Sample
from sample_galleries.tools.samples import SamplesTools, SearchSamplesError

logger = logging.getLogger(__name__)

SERVER_NAME = "sample-galleries"

_INSTRUCTIONS = (
    "Search the Community Samples Gallery. Use samples_by_product, samples_by_author "
    "or samples_by_keyword for single-criterion lookups and search_samples for "
    "combined filters, sorting and pagination. Page indexes start at 1."
)

PageIndex = Annotated[int, Field(description="The page index for pagination.")]
PageSize = Annotated[int, Field(description="The page size for pagination.")]


async def _surface_errors(call: Awaitable[PagedResult[Sample]]) -> PagedResult[Sample]:
    try:
        return await call
    except SearchSamplesError as e:
        raise ToolError(str(e)) from e


def create_server(tools: SamplesTools) -> FastMCP:
    """Create the FastMCP server exposing the four samples tools.

    Args:
        tools: The samples tools the MCP handlers delegate to.

    Returns:
        A configured FastMCP server.
    """

    @asynccontextmanager
    async def lifespan(_: FastMCP) -> AsyncIterator[None]:
        await tools.gateway.initialize()
        logger.info("MCP server '%s' v%s ready", SERVER_NAME, __version__)
        try:
            yield
        finally:
            await tools.gateway.shutdown()

    mcp = FastMCP(name=SERVER_NAME, instructions=_INSTRUCTIONS, lifespan=lifespan)

    @mcp.tool(description="Allows retrieving samples by product in the Community Samples Gallery.")
    async def samples_by_product(
        product: Annotated[str, Field(description="The product to use for filtering samples.")],
        page_index: PageIndex = 1,
        page_size: PageSize = 20,
    ) -> PagedResult[Sample]:
        return await _surface_errors(tools.samples_by_product(product, page_index, page_size))

    @mcp.tool(description="Allows retrieving samples by author in the Community Samples Gallery.")
    async def samples_by_author(
        author: Annotated[str, Field(description="The author to use for filtering samples.")],
        page_index: PageIndex = 1,
        page_size: PageSize = 20,
    ) -> PagedResult[Sample]:
        return await _surface_errors(tools.samples_by_author(author, page_index, page_size))

    @mcp.tool(description="Allows retrieving samples by keyword in the Community Samples Gallery.")
    async def samples_by_keyword(
        keyword: Annotated[str, Field(description="The keyword to use for filtering samples.")],
        page_index: PageIndex = 1,
        page_size: PageSize = 20,
    ) -> PagedResult[Sample]:
        return await _surface_errors(tools.samples_by_keyword(keyword, page_index, page_size))

    @mcp.tool(description="Allows searching for samples in the Community Samples Gallery.")
    async def search_samples(
        search: Annotated[
            SearchRequest | None,
            Field(description="Search parameters, including filtering, sorting, and pagination."),
        ] = None,
    ) -> PagedResult[Sample]:
        return await _surface_errors(tools.search_samples(search))

    return mcp
