"""Pydantic schemas for tool calls and results."""

from typing import Any, Literal
from pydantic import BaseModel, Field, field_validator

from linkedin_mcp.catalog.schemas import ToolDescriptor


class ToolCallRequest(BaseModel):
    """Parameters for tools/call.

    Attributes:
        name: Name of the tool to invoke.
        arguments: Arguments to pass to the tool.
    """

    name: str = Field(..., description="Name of the tool to invoke")
    arguments: dict[str, Any] = Field(default_factory=dict, description="Tool arguments")

    @field_validator("arguments", mode="before")
    @classmethod
    def null_arguments_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class ContentBlock(BaseModel):
    """Content item in a tool response."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Result for tools/call.

    Failures are reported with isError rather than raised, so a
    ToolResult is always a normal response for the transport.
    """

    content: list[ContentBlock] = Field(..., min_length=1)
    isError: bool = False

    @classmethod
    def text(cls, text: str, is_error: bool = False) -> "ToolResult":
        """Create a result holding a single text block.

        Args:
            text: Text of the content block.
            is_error: Whether the result reports a failure.

        Returns:
            ToolResult with one text content block.
        """
        return cls(content=[ContentBlock(text=text)], isError=is_error)


class ToolListResult(BaseModel):
    """Result for tools/list."""

    tools: list[ToolDescriptor]
