"""Structured logging of tool invocations."""

import time
from contextlib import contextmanager
from enum import Enum
from typing import Any, Generator
from uuid import uuid4


class InvocationStatus(str, Enum):
    """Outcome of a tool invocation."""

    success = "success"
    error = "error"


class InvocationContext:
    """Tracks timing and status of one tool invocation.

    Attributes:
        request_id: Correlation ID for tracing.
        tool_name: Which tool is being invoked.
        start_time: When the invocation started.
        status: Final status of the invocation.
        error_code: Error code if failed.
    """

    def __init__(self, request_id: str, tool_name: str) -> None:
        self.request_id = request_id
        self.tool_name = tool_name
        self.start_time = time.perf_counter()
        self.status = InvocationStatus.success
        self.error_code: str | None = None

    def mark_error(self, error_code: str) -> None:
        """Mark the invocation as failed with an error code.

        Args:
            error_code: The error code to record.
        """
        self.status = InvocationStatus.error
        self.error_code = error_code

    @property
    def duration_ms(self) -> int:
        """Calculate duration in milliseconds."""
        elapsed = time.perf_counter() - self.start_time
        return int(elapsed * 1000)


def log_tool_invocation(logger: Any, context: InvocationContext) -> None:
    """Emit the tool_invocation event for a finished call.

    Args:
        logger: structlog logger to write to.
        context: Invocation context with timing and status.
    """
    logger.info(
        "tool_invocation",
        request_id=context.request_id,
        tool_name=context.tool_name,
        status=context.status.value,
        duration_ms=context.duration_ms,
        error_code=context.error_code,
    )


@contextmanager
def track_tool_invocation(
    logger: Any,
    tool_name: str,
    request_id: str | None = None,
) -> Generator[InvocationContext, None, None]:
    """Context manager for logging tool invocations.

    Automatically tracks timing and logs when the context exits.

    Args:
        logger: structlog logger to write to.
        tool_name: Which tool is being invoked.
        request_id: Correlation ID, generated when omitted.

    Yields:
        InvocationContext for marking errors.

    Example:
        with track_tool_invocation(logger, "get_linkedin_profile") as ctx:
            try:
                result = await do_work()
            except LinkedInAPIError as e:
                ctx.mark_error(e.code)
    """
    context = InvocationContext(request_id or str(uuid4()), tool_name)
    try:
        yield context
    finally:
        log_tool_invocation(logger, context)
