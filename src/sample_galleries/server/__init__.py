"""MCP server binding for the samples tools."""

from sample_galleries.server.mcp import create_server

__all__ = ["create_server"]
