"""Convert handler outcomes into ToolResult envelopes."""

import json
from typing import Any

from pydantic_core import to_jsonable_python

from .schemas import ToolResult


UNKNOWN_ERROR_MESSAGE = "Unknown error"


def render_json(value: Any) -> str:
    """Render a domain value as indented JSON with camelCase keys."""
    payload = to_jsonable_python(value, by_alias=True, exclude_none=True)
    return json.dumps(payload, indent=2)


def format_result(value: Any) -> ToolResult:
    """Wrap a handler's return value in a successful ToolResult.

    Confirmation sentences are passed through as text; everything else
    (profiles, lists of posts, ...) is rendered as JSON.
    """
    text = value if isinstance(value, str) else render_json(value)
    return ToolResult.text(text)


def error_message(exc: BaseException) -> str:
    """Best human-readable message for an exception."""
    message = getattr(exc, "message", None) or str(exc)
    return message or UNKNOWN_ERROR_MESSAGE


def format_error(exc: BaseException) -> ToolResult:
    """Wrap a failure in an error ToolResult."""
    return ToolResult.text(f"Error: {error_message(exc)}", is_error=True)
