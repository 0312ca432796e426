"""HTTP transport: JSON-RPC over POST /mcp served by FastAPI and uvicorn."""

import asyncio
from typing import Annotated

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, Response

from linkedin_mcp.config import Settings

from .base import MessageHandler
from .service import parse_error_payload


router = APIRouter(prefix="", tags=["mcp"])


async def get_message_handler(request: Request) -> MessageHandler:
    """Dependency to get the handler bound by the running gateway.

    Args:
        request: The FastAPI request object.

    Returns:
        The gateway's message handler.

    Raises:
        HTTPException: 503 if no gateway is bound to the app.
    """
    handler = getattr(request.app.state, "mcp_handler", None)
    if handler is None:
        raise HTTPException(status_code=503, detail="MCP gateway is not running")
    return handler


@router.post("/mcp", operation_id="mcp_endpoint_post")
async def mcp_post_endpoint(
    request: Request,
    handler: Annotated[MessageHandler, Depends(get_message_handler)],
):
    """Handle JSON-RPC 2.0 messages."""
    try:
        body = await request.json()
    except ValueError:
        return JSONResponse(content=parse_error_payload())

    response = await handler(body)
    if response is None:
        # Notification: accepted, nothing to return
        return Response(status_code=202)
    return JSONResponse(content=response)


def create_app(settings: Settings) -> FastAPI:
    """Build the FastAPI app exposing the MCP endpoint.

    Args:
        settings: Application settings.

    Returns:
        App with /mcp and /health routes and no handler bound yet.
    """
    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)
    app.state.mcp_handler = None

    @app.get("/health")
    async def health_check():
        return {
            "status": "ok" if app.state.mcp_handler is not None else "starting",
            "app": settings.APP_NAME,
        }

    app.include_router(router)
    return app


class HttpTransport:
    """Serve a FastAPI app with uvicorn and route /mcp to the gateway."""

    def __init__(self, app: FastAPI, host: str = "127.0.0.1", port: int = 3000) -> None:
        self.app = app
        self.host = host
        self.port = port
        self._server: uvicorn.Server | None = None
        self._serve_task: asyncio.Task | None = None

    async def connect(self, handler: MessageHandler) -> None:
        if self._serve_task is not None:
            raise RuntimeError("HttpTransport is already connected")
        self.app.state.mcp_handler = handler
        config = uvicorn.Config(
            self.app,
            host=self.host,
            port=self.port,
            log_config=None,
            lifespan="off",
        )
        self._server = uvicorn.Server(config)
        self._serve_task = asyncio.create_task(self._server.serve())

    async def close(self) -> None:
        # uvicorn finishes in-flight requests before serve() returns
        if self._server is not None:
            self._server.should_exit = True
        if self._serve_task is not None:
            await self._serve_task
        self.app.state.mcp_handler = None

    async def wait_closed(self) -> None:
        if self._serve_task is not None:
            await asyncio.shield(self._serve_task)
