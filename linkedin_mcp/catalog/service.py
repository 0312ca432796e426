"""Service layer for the tool catalog with caching."""

from functools import lru_cache

from .config import load_tool_catalog
from .schemas import ToolDescriptor


@lru_cache()
def _load_descriptors() -> tuple[ToolDescriptor, ...]:
    catalog = load_tool_catalog()
    return tuple(
        ToolDescriptor(
            name=tool.name,
            description=tool.description,
            inputSchema=tool.inputSchema,
            missing_messages=tool.missingMessages,
        )
        for tool in catalog.tools
    )


def clear_catalog_cache() -> None:
    """Clear the cached catalog. Useful after editing tools.yaml."""
    _load_descriptors.cache_clear()


def list_tools() -> list[ToolDescriptor]:
    """Return every tool descriptor in catalog order."""
    return list(_load_descriptors())


def get_tool(name: str) -> ToolDescriptor | None:
    """Look up a descriptor by tool name.

    Args:
        name: Tool name to look up.

    Returns:
        The matching descriptor, or None if the catalog has no such tool.
    """
    return next((tool for tool in _load_descriptors() if tool.name == name), None)
