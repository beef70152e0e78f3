"""API v1 Router — Health endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from sample_galleries.api.v1.endpoints.health import router as health_router

router = APIRouter(tags=["v1"])
router.include_router(health_router)
