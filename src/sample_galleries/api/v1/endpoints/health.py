"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from sample_galleries import __version__
from sample_galleries.api.deps import get_tools
from sample_galleries.tools.samples import SamplesTools

router = APIRouter()


class HealthResponse(BaseModel):
    """System health check response."""

    status: str = Field(description="Health status: 'healthy', or 'degraded' when the samples API is not configured")
    version: str = Field(description="Server version")
    service: str = Field(description="Service name ('sample-galleries')")
    samples_api_configured: bool = Field(description="Whether the samples API base URL is set")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="System Health Check",
    description="Returns server health, version, and whether the upstream samples API is configured.",
)
async def health_check(
    tools: SamplesTools = Depends(get_tools),
) -> HealthResponse:
    """Basic health check endpoint."""
    configured = tools.gateway.is_configured
    return HealthResponse(
        status="healthy" if configured else "degraded",
        version=__version__,
        service="sample-galleries",
        samples_api_configured=configured,
    )
