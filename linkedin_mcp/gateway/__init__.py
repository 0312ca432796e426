"""Gateway module - tool validation, routing and result envelopes."""

from .schemas import ContentBlock, ToolCallRequest, ToolListResult, ToolResult
from .exceptions import (
    GatewayError,
    GatewayStateError,
    InvalidArgumentError,
    MissingArgumentError,
    StartupError,
    UnknownToolError,
)
from .handlers import TOOL_ROUTES, dispatch
from .formatter import format_error, format_result
from .server import GatewayState, LinkedInMCPGateway


__all__ = [
    # Schemas
    "ContentBlock",
    "ToolCallRequest",
    "ToolListResult",
    "ToolResult",
    # Exceptions
    "GatewayError",
    "GatewayStateError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "StartupError",
    "UnknownToolError",
    # Routing
    "TOOL_ROUTES",
    "dispatch",
    # Formatting
    "format_error",
    "format_result",
    # Lifecycle
    "GatewayState",
    "LinkedInMCPGateway",
]
