"""Custom exceptions for the tool invocation gateway."""

from linkedin_mcp.exceptions import LinkedInMCPError


class GatewayError(LinkedInMCPError):
    """Base exception for gateway-specific errors."""
    pass


class UnknownToolError(GatewayError):
    """Raised when a call names a tool the router does not handle.

    Attributes:
        tool_name: Name of the tool that was requested.
    """

    def __init__(self, tool_name: str):
        super().__init__(
            message=f"Unknown tool: {tool_name}",
            code="UNKNOWN_TOOL"
        )
        self.tool_name = tool_name


class MissingArgumentError(GatewayError):
    """Raised when required arguments are absent or empty.

    Attributes:
        tool_name: Tool whose arguments were checked.
        fields: Names of the missing arguments, in declaration order.
    """

    def __init__(self, tool_name: str, fields: list[str], messages: list[str]):
        super().__init__(
            message="; ".join(messages),
            code="MISSING_ARGUMENT"
        )
        self.tool_name = tool_name
        self.fields = fields


class InvalidArgumentError(GatewayError):
    """Raised when an argument is present but has the wrong type or value.

    Attributes:
        tool_name: Tool whose arguments were checked.
        detail: Description of what was wrong.
    """

    def __init__(self, tool_name: str, detail: str):
        super().__init__(
            message=f"Invalid arguments for {tool_name}: {detail}",
            code="INVALID_ARGUMENT"
        )
        self.tool_name = tool_name
        self.detail = detail


class StartupError(GatewayError):
    """Raised when the gateway cannot be constructed."""

    def __init__(self, message: str):
        super().__init__(message=message, code="STARTUP_FAILED")


class GatewayStateError(GatewayError):
    """Raised when a lifecycle method is called in the wrong state.

    Attributes:
        operation: Lifecycle method that was called.
        state: State the gateway was in.
    """

    def __init__(self, operation: str, state: str):
        super().__init__(
            message=f"Cannot {operation} gateway in state '{state}'",
            code="INVALID_STATE"
        )
        self.operation = operation
        self.state = state
