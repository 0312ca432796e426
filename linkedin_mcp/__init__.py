"""LinkedIn MCP Gateway - exposes LinkedIn API operations as MCP tools."""

__version__ = "1.0.0"
