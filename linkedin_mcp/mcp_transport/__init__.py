"""MCP transport module - JSON-RPC dispatch over stdio and HTTP."""

from .base import MessageHandler, Transport
from .http_transport import HttpTransport, create_app
from .schemas import (
    MCPErrorCodes,
    MCPErrorDetail,
    MCPInitializeParams,
    MCPJSONRPCRequest,
    MCPJSONRPCResponse,
)
from .service import handle_jsonrpc_message
from .stdio import StdioTransport


__all__ = [
    # Transports
    "MessageHandler",
    "Transport",
    "HttpTransport",
    "StdioTransport",
    "create_app",
    # Schemas
    "MCPErrorCodes",
    "MCPErrorDetail",
    "MCPInitializeParams",
    "MCPJSONRPCRequest",
    "MCPJSONRPCResponse",
    # Service
    "handle_jsonrpc_message",
]
