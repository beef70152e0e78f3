"""FastAPI application factory — serves the MCP tools over streamable HTTP.

Routes:
  - ``/v1/health``: server health
  - ``/mcp``: MCP streamable-HTTP endpoint (FastMCP)
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sample_galleries import __version__
from sample_galleries.api.deps import set_tools
from sample_galleries.api.v1.router import router as v1_router
from sample_galleries.config.settings import Settings
from sample_galleries.gateway.gateway import SamplesGateway
from sample_galleries.server.mcp import create_server
from sample_galleries.tools.samples import SamplesTools

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "sample-galleries-config.yaml"


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. If None, loads from environment.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        yaml_path = Path(DEFAULT_CONFIG_FILE)
        if yaml_path.exists():
            logger.info("Loading configuration from %s", yaml_path)
            settings = Settings.from_yaml(yaml_path)
        else:
            settings = Settings()

    tools = SamplesTools(SamplesGateway.from_settings(settings.samples_api))
    mcp_app = create_server(tools).http_app(path="/mcp")

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Manage application lifecycle (startup/shutdown)."""
        logger.info("Starting sample-galleries v%s", __version__)
        if not tools.gateway.is_configured:
            logger.warning("Samples API base URL is not configured; searches will fail until it is set")

        set_tools(tools)
        app.state.settings = settings
        app.state.tools = tools

        async with mcp_app.lifespan(app):
            logger.info("Serving MCP over HTTP on port %d", settings.server.port)
            yield

        logger.info("Shutting down sample-galleries...")
        await tools.gateway.shutdown()
        set_tools(None)

    app = FastAPI(
        title="Sample Galleries MCP",
        description="MCP tools for searching the Community Samples Gallery.",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix="/v1")

    # Mounted last so the v1 routes take precedence.
    app.mount("/", mcp_app)

    return app
