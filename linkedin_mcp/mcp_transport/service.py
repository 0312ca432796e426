"""Business logic for MCP protocol handlers."""

from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError

from linkedin_mcp.gateway.schemas import ToolCallRequest, ToolListResult

from .schemas import (
    MCPErrorCodes,
    MCPInitializeParams,
    MCPJSONRPCRequest,
    MCPJSONRPCResponse,
)

if TYPE_CHECKING:
    from linkedin_mcp.gateway.server import LinkedInMCPGateway


logger = structlog.get_logger("mcp_transport")


def handle_initialize(gateway: "LinkedInMCPGateway", params: MCPInitializeParams) -> dict[str, Any]:
    """Handle initialize request.

    Args:
        gateway: Gateway answering the request.
        params: Initialize parameters from client.

    Returns:
        Server initialization response.
    """
    return {
        "protocolVersion": gateway.settings.MCP_PROTOCOL_VERSION,
        "capabilities": {
            "tools": {
                "listChanged": False  # Static tool catalog
            }
        },
        "serverInfo": {
            "name": gateway.settings.APP_NAME,
            "version": gateway.settings.APP_VERSION,
        },
    }


def handle_tools_list(gateway: "LinkedInMCPGateway") -> ToolListResult:
    """Handle tools/list request."""
    return ToolListResult(tools=gateway.list_tools())


def parse_error_payload() -> dict[str, Any]:
    """Response for a message that is not valid JSON."""
    return MCPJSONRPCResponse.error_response(
        id=None,
        code=MCPErrorCodes.PARSE_ERROR,
        message="Parse error",
    ).to_payload()


def message_too_large_payload(limit: int) -> dict[str, Any]:
    """Response for a message longer than the transport accepts."""
    return MCPJSONRPCResponse.error_response(
        id=None,
        code=MCPErrorCodes.INVALID_REQUEST,
        message=f"Message exceeds {limit} bytes",
    ).to_payload()


async def handle_jsonrpc_message(
    gateway: "LinkedInMCPGateway",
    payload: Any,
) -> dict[str, Any] | None:
    """Dispatch one decoded JSON-RPC message to the gateway.

    Tool failures come back as results with isError set; JSON-RPC errors
    are reserved for protocol problems.

    Args:
        gateway: Gateway serving the request.
        payload: Decoded JSON message.

    Returns:
        The JSON-RPC response payload, or None for notifications.
    """
    try:
        request = MCPJSONRPCRequest.model_validate(payload)
    except ValidationError:
        request_id = payload.get("id") if isinstance(payload, dict) else None
        if not isinstance(request_id, (str, int)):
            request_id = None
        return MCPJSONRPCResponse.error_response(
            id=request_id,
            code=MCPErrorCodes.INVALID_REQUEST,
            message="Invalid Request",
        ).to_payload()

    if request.is_notification:
        return None

    method = request.method
    params = request.params or {}

    try:
        if method == "initialize":
            init_params = MCPInitializeParams(**params)
            result: Any = handle_initialize(gateway, init_params)

        elif method == "ping" or method.startswith("notifications/"):
            result = {}

        elif method == "tools/list":
            result = handle_tools_list(gateway).model_dump()

        elif method == "tools/call":
            call_params = ToolCallRequest(**params)
            tool_result = await gateway.call_tool(call_params.name, call_params.arguments)
            result = tool_result.model_dump()

        else:
            return MCPJSONRPCResponse.error_response(
                id=request.id,
                code=MCPErrorCodes.METHOD_NOT_FOUND,
                message=f"Method not found: {method}",
            ).to_payload()

    except ValidationError as e:
        return MCPJSONRPCResponse.error_response(
            id=request.id,
            code=MCPErrorCodes.INVALID_PARAMS,
            message=f"Invalid params for {method}",
            data=e.errors(include_url=False, include_context=False, include_input=False),
        ).to_payload()
    except Exception as e:
        logger.error("jsonrpc_internal_error", method=method, error=str(e), exc_info=True)
        return MCPJSONRPCResponse.error_response(
            id=request.id,
            code=MCPErrorCodes.INTERNAL_ERROR,
            message=f"Internal error: {str(e)}",
        ).to_payload()

    return MCPJSONRPCResponse.success(id=request.id, result=result).to_payload()
