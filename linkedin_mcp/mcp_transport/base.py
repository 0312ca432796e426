"""Transport interface the gateway binds its request handler to."""

from typing import Any, Awaitable, Callable, Protocol


MessageHandler = Callable[[Any], Awaitable[dict[str, Any] | None]]


class Transport(Protocol):
    """Request/response channel carrying decoded JSON-RPC messages."""

    async def connect(self, handler: MessageHandler) -> None:
        """Start delivering incoming messages to handler."""
        ...

    async def close(self) -> None:
        """Stop accepting messages and wait for in-flight ones to finish."""
        ...

    async def wait_closed(self) -> None:
        """Wait until the channel stops on its own or is closed."""
        ...
