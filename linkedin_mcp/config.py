from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    # App
    APP_NAME: str = "linkedin-mcp-server"
    APP_VERSION: str = "1.0.0"

    # LinkedIn API
    LINKEDIN_ACCESS_TOKEN: str | None = None
    LINKEDIN_API_BASE_URL: str = "https://api.linkedin.com"
    LINKEDIN_API_VERSION: str = "202401"
    LINKEDIN_TIMEOUT_SECONDS: float = 30.0

    # MCP
    MCP_TRANSPORT: Literal["stdio", "http"] = "stdio"
    MCP_PROTOCOL_VERSION: str = "2024-11-05"
    HOST: str = "127.0.0.1"
    PORT: int = 3000

    # Logging
    LOG_LEVEL: Literal["debug", "info", "warning", "error"] = "info"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip().lower()
            if value == "warn":
                return "warning"
        return value


def validate_settings(settings: Settings) -> None:
    """Check settings that the gateway cannot start without.

    Args:
        settings: Loaded application settings.

    Raises:
        ConfigurationError: Listing every missing or invalid setting.
    """
    errors: list[str] = []

    if not settings.LINKEDIN_ACCESS_TOKEN:
        errors.append("LINKEDIN_ACCESS_TOKEN is required")

    if errors:
        raise ConfigurationError(errors)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
