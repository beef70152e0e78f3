"""API dependencies — Dependency injection for FastAPI endpoints."""

from __future__ import annotations

from sample_galleries.tools.samples import SamplesTools

# Global tools instance (set during application lifespan)
_tools: SamplesTools | None = None


def set_tools(tools: SamplesTools | None) -> None:
    """Set the global tools instance (called during app lifespan)."""
    global _tools
    _tools = tools


def get_tools() -> SamplesTools:
    """Get the global samples tools instance.

    Raises:
        RuntimeError: If the tools are not initialized.
    """
    if _tools is None:
        raise RuntimeError("Samples tools not initialized. Is the server running?")
    return _tools
