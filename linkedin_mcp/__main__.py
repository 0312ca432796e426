"""Command-line entry point: python -m linkedin_mcp."""

import argparse
import asyncio
import contextlib
import signal
import sys

import structlog

from linkedin_mcp.config import Settings, get_settings, validate_settings
from linkedin_mcp.exceptions import LinkedInMCPError
from linkedin_mcp.gateway.server import LinkedInMCPGateway
from linkedin_mcp.logging_config import configure_logging
from linkedin_mcp.mcp_transport.base import Transport
from linkedin_mcp.mcp_transport.http_transport import HttpTransport, create_app
from linkedin_mcp.mcp_transport.stdio import StdioTransport


logger = structlog.get_logger("main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LinkedIn MCP Gateway Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        help="Transport to serve on (default: MCP_TRANSPORT setting, stdio)",
    )
    parser.add_argument("--host", help="HTTP server host (http transport only)")
    parser.add_argument("--port", type=int, help="HTTP server port (http transport only)")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="Minimum log level (default: LOG_LEVEL setting)",
    )
    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Return settings with command-line values taking precedence."""
    overrides = {
        "MCP_TRANSPORT": args.transport,
        "HOST": args.host,
        "PORT": args.port,
        "LOG_LEVEL": args.log_level,
    }
    return settings.model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )


def build_transport(settings: Settings) -> Transport:
    if settings.MCP_TRANSPORT == "http":
        return HttpTransport(create_app(settings), host=settings.HOST, port=settings.PORT)
    return StdioTransport()


async def serve(gateway: LinkedInMCPGateway, transport: Transport) -> None:
    """Run the gateway until the transport closes or a stop signal arrives."""
    loop = asyncio.get_running_loop()
    stop_requested = asyncio.Event()
    signals = (signal.SIGINT, signal.SIGTERM)
    for sig in signals:
        with contextlib.suppress(NotImplementedError):
            loop.add_signal_handler(sig, stop_requested.set)

    try:
        await gateway.start(transport)

        closed = asyncio.create_task(gateway.wait_closed())
        stopping = asyncio.create_task(stop_requested.wait())
        _, pending = await asyncio.wait({closed, stopping}, return_when=asyncio.FIRST_COMPLETED)
        for task in pending:
            task.cancel()

        await gateway.stop()
    finally:
        for sig in signals:
            with contextlib.suppress(NotImplementedError):
                loop.remove_signal_handler(sig)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = apply_overrides(get_settings(), args)
    configure_logging(settings.LOG_LEVEL)

    try:
        validate_settings(settings)
        gateway = LinkedInMCPGateway(settings)
    except LinkedInMCPError as e:
        logger.error("startup_failed", error=e.message, code=e.code)
        return 1

    asyncio.run(serve(gateway, build_transport(settings)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
