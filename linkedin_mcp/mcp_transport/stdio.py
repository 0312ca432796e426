"""Stdio transport: newline-delimited JSON-RPC over stdin/stdout."""

import asyncio
import contextlib
import json
import sys
from typing import Any, TextIO

import structlog

from .base import MessageHandler
from .service import message_too_large_payload, parse_error_payload


# Largest single message accepted on stdin
MAX_MESSAGE_BYTES = 4 * 1024 * 1024

logger = structlog.get_logger("mcp_transport")


async def open_stdin_reader(limit: int = MAX_MESSAGE_BYTES) -> asyncio.StreamReader:
    """Wrap the process stdin in an asyncio StreamReader."""
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader(limit=limit)
    await loop.connect_read_pipe(lambda: asyncio.StreamReaderProtocol(reader), sys.stdin)
    return reader


class StdioTransport:
    """Serve MCP messages read line by line from a stream.

    Each message is handled in its own task, so responses are written in
    completion order. Closing waits for in-flight messages to finish.
    """

    def __init__(
        self,
        reader: asyncio.StreamReader | None = None,
        writer: TextIO | None = None,
        limit: int = MAX_MESSAGE_BYTES,
    ) -> None:
        """Initialize the transport.

        Args:
            reader: Source of incoming lines, process stdin when omitted.
            writer: Destination for responses, process stdout when omitted.
            limit: Longest accepted line in bytes; match the reader's own
                limit when passing a reader.
        """
        self._reader = reader
        self._writer = writer or sys.stdout
        self._limit = limit
        self._handler: MessageHandler | None = None
        self._read_task: asyncio.Task | None = None
        self._in_flight: set[asyncio.Task] = set()
        self._closed = asyncio.Event()

    async def connect(self, handler: MessageHandler) -> None:
        if self._read_task is not None:
            raise RuntimeError("StdioTransport is already connected")
        self._handler = handler
        if self._reader is None:
            self._reader = await open_stdin_reader(self._limit)
        self._read_task = asyncio.create_task(self._read_loop())

    async def close(self) -> None:
        if self._read_task is not None:
            if not self._read_task.done():
                self._read_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._read_task
        if self._in_flight:
            await asyncio.wait(set(self._in_flight))
        self._closed.set()

    async def wait_closed(self) -> None:
        await self._closed.wait()

    async def _read_loop(self) -> None:
        try:
            while True:
                try:
                    line = await self._reader.readuntil(b"\n")
                except asyncio.IncompleteReadError as e:
                    line = e.partial  # last line without a newline
                    if not line:
                        break  # EOF
                except asyncio.LimitOverrunError as e:
                    await self._skip_oversized_line(e.consumed)
                    continue
                line = line.strip()
                if not line:
                    continue
                task = asyncio.create_task(self._handle_line(line))
                self._in_flight.add(task)
                task.add_done_callback(self._in_flight.discard)

            # Input ended; let pending calls answer before reporting closed.
            if self._in_flight:
                await asyncio.wait(set(self._in_flight))
        finally:
            self._closed.set()

    async def _skip_oversized_line(self, consumed: int) -> None:
        """Drop the rest of a line longer than the reader limit and report it."""
        while True:
            await self._reader.readexactly(consumed)
            try:
                await self._reader.readuntil(b"\n")
                break
            except asyncio.LimitOverrunError as e:
                consumed = e.consumed
            except asyncio.IncompleteReadError:
                break  # EOF inside the oversized line

        logger.warning("stdio_message_too_large", limit=self._limit)
        self._write(message_too_large_payload(self._limit))

    async def _handle_line(self, line: bytes) -> None:
        try:
            payload = json.loads(line)
        except ValueError:
            logger.warning("stdio_parse_error", size=len(line))
            self._write(parse_error_payload())
            return

        response = await self._handler(payload)
        if response is not None:
            self._write(response)

    def _write(self, message: dict[str, Any]) -> None:
        self._writer.write(json.dumps(message) + "\n")
        self._writer.flush()
