"""LinkedIn MCP gateway: lifecycle and the tool-call boundary."""

from enum import Enum
from typing import TYPE_CHECKING, Any

import structlog

from linkedin_mcp.catalog.schemas import ToolDescriptor
from linkedin_mcp.catalog.service import list_tools
from linkedin_mcp.config import Settings
from linkedin_mcp.linkedin.client import LinkedInClient

from .exceptions import GatewayStateError, StartupError
from .formatter import error_message, format_error, format_result
from .handlers import dispatch, routed_tool_names
from .invocation_log import track_tool_invocation
from .schemas import ToolResult

if TYPE_CHECKING:
    from linkedin_mcp.mcp_transport.base import Transport


class GatewayState(str, Enum):
    """Lifecycle states; transitions only move forward."""

    CONSTRUCTED = "constructed"
    RUNNING = "running"
    STOPPED = "stopped"


def check_catalog_matches_routes() -> None:
    """Ensure every advertised tool has a handler and vice versa.

    Raises:
        StartupError: If the catalog and the router disagree.
    """
    catalog_names = {tool.name for tool in list_tools()}
    route_names = routed_tool_names()
    if catalog_names != route_names:
        unrouted = sorted(catalog_names - route_names)
        undeclared = sorted(route_names - catalog_names)
        raise StartupError(
            "Tool catalog and router disagree "
            f"(no handler: {unrouted}, not in catalog: {undeclared})"
        )


class LinkedInMCPGateway:
    """Expose LinkedIn operations as MCP tools over a transport.

    The gateway keeps no per-call state, so concurrent tool calls are
    safe. Every call-level failure is returned as an error ToolResult.

    Attributes:
        settings: Application settings.
        client: LinkedIn client the tool handlers call.
        logger: structlog logger for gateway events.
        state: Current lifecycle state.
    """

    def __init__(
        self,
        settings: Settings,
        client: LinkedInClient | None = None,
        logger: Any | None = None,
    ) -> None:
        """Build the gateway, failing fast on missing credentials.

        Args:
            settings: Application settings.
            client: LinkedIn client to use; built from settings when omitted.
            logger: structlog logger, defaults to the "gateway" logger.

        Raises:
            StartupError: If the access token is missing or the catalog and
                router disagree.
        """
        self.settings = settings
        self.logger = logger or structlog.get_logger("gateway")

        if not settings.LINKEDIN_ACCESS_TOKEN:
            raise StartupError("LinkedIn access token is required")
        check_catalog_matches_routes()

        self.client = client or LinkedInClient(
            access_token=settings.LINKEDIN_ACCESS_TOKEN,
            base_url=settings.LINKEDIN_API_BASE_URL,
            api_version=settings.LINKEDIN_API_VERSION,
            timeout=settings.LINKEDIN_TIMEOUT_SECONDS,
            logger=self.logger,
        )
        self.state = GatewayState.CONSTRUCTED
        self._transport: "Transport | None" = None

    def list_tools(self) -> list[ToolDescriptor]:
        """Return the tool catalog in display order."""
        return list_tools()

    async def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
        """Invoke a tool and wrap the outcome in a ToolResult.

        Args:
            name: Tool name.
            arguments: Raw tool arguments.

        Returns:
            Success result, or an error result if validation, routing or
            the LinkedIn call failed. Never raises for call-level errors.
        """
        self.logger.info("tool_called", tool_name=name)

        with track_tool_invocation(self.logger, name) as ctx:
            try:
                value = await dispatch(self.client, name, arguments or {})
                result = format_result(value)
            except Exception as e:
                ctx.mark_error(getattr(e, "code", None) or type(e).__name__)
                self.logger.error(
                    "tool_failed",
                    tool_name=name,
                    error=error_message(e),
                    error_type=type(e).__name__,
                )
                result = format_error(e)

        return result

    async def handle_message(self, payload: Any) -> dict[str, Any] | None:
        """Handle one decoded JSON-RPC message from the transport."""
        from linkedin_mcp.mcp_transport.service import handle_jsonrpc_message

        return await handle_jsonrpc_message(self, payload)

    async def start(self, transport: "Transport") -> None:
        """Bind the transport and begin serving.

        Raises:
            GatewayStateError: If the gateway was already started.
        """
        if self.state is not GatewayState.CONSTRUCTED:
            raise GatewayStateError("start", self.state.value)

        await transport.connect(self.handle_message)
        self._transport = transport
        self.state = GatewayState.RUNNING
        self.logger.info(
            "gateway_started",
            transport=type(transport).__name__,
            tools=len(self.list_tools()),
        )

    async def wait_closed(self) -> None:
        """Wait until the transport stops on its own.

        Raises:
            GatewayStateError: If the gateway was never started.
        """
        if self._transport is None:
            raise GatewayStateError("wait on", self.state.value)
        await self._transport.wait_closed()

    async def stop(self) -> None:
        """Close the transport after in-flight calls finish, then the client.

        Raises:
            GatewayStateError: If the gateway is not running.
        """
        if self.state is not GatewayState.RUNNING or self._transport is None:
            raise GatewayStateError("stop", self.state.value)

        await self._transport.close()
        await self.client.aclose()
        self.state = GatewayState.STOPPED
        self.logger.info("gateway_stopped")
