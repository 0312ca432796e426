"""Tool catalog module - static descriptors for every exposed tool."""

from .config import ToolConfig, ToolCatalogConfig, load_tool_catalog
from .schemas import ToolDescriptor
from .service import clear_catalog_cache, get_tool, list_tools


__all__ = [
    "ToolConfig",
    "ToolCatalogConfig",
    "ToolDescriptor",
    "load_tool_catalog",
    "clear_catalog_cache",
    "get_tool",
    "list_tools",
]
