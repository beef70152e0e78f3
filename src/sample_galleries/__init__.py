"""Sample Galleries MCP — Tool server for the Community Samples Gallery search API."""

__version__ = "0.1.0"
