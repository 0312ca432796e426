"""Pydantic schemas for tool descriptors."""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class ToolDescriptor(BaseModel):
    """MCP tool definition advertised by tools/list.

    missing_messages holds per-field wording for absent required
    arguments. It is internal and never serialized to clients.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    inputSchema: dict[str, Any]
    missing_messages: dict[str, str] = Field(default_factory=dict, exclude=True)

    @property
    def required_fields(self) -> list[str]:
        """Names of the arguments the tool cannot run without."""
        return list(self.inputSchema.get("required", []))
