"""Command contract and validation engine for MCP tool commands."""

__version__ = "0.1.0"
