"""Base exceptions shared across the LinkedIn MCP Gateway."""


class LinkedInMCPError(Exception):
    """Base exception for all LinkedIn MCP Gateway errors."""
    
    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ConfigurationError(LinkedInMCPError):
    """Raised when required settings are missing or invalid.
    
    Attributes:
        errors: Individual validation failures.
    """
    
    def __init__(self, errors: list[str]):
        super().__init__(
            message="Configuration validation failed:\n" + "\n".join(errors),
            code="CONFIGURATION_INVALID"
        )
        self.errors = errors
