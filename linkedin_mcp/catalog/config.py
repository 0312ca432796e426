"""Static tool catalog config loader."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator

DEFAULT_CATALOG_PATH = Path(__file__).parent / "tools.yaml"


class ToolConfig(BaseModel):
    """Tool definition loaded from static config."""

    name: str
    description: str
    inputSchema: dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}}
    )
    missingMessages: dict[str, str] = Field(default_factory=dict)


class ToolCatalogConfig(BaseModel):
    """Ordered container for tool definitions."""

    tools: list[ToolConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_names(self) -> "ToolCatalogConfig":
        seen_names: set[str] = set()
        for tool in self.tools:
            if tool.name in seen_names:
                raise ValueError(f"duplicate tool name in catalog: {tool.name}")
            seen_names.add(tool.name)
        return self


def load_tool_catalog(config_path: str | Path | None = None) -> ToolCatalogConfig:
    """Load the tool catalog from YAML.

    Args:
        config_path: Optional custom path for the catalog file.

    Returns:
        Parsed ToolCatalogConfig, or an empty config if the file is missing.

    Raises:
        pydantic.ValidationError: If the file declares duplicate tool names
            or malformed entries.
    """
    path = DEFAULT_CATALOG_PATH if config_path is None else Path(config_path)

    if not path.exists():
        return ToolCatalogConfig()

    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}

    return ToolCatalogConfig(**data)
