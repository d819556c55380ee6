"""MCP server exposing the Tavus video and avatar API as tools."""

__version__ = "0.1.0"
