"""Exceptions raised by the LinkedIn REST client."""

from linkedin_mcp.exceptions import LinkedInMCPError


class LinkedInAPIError(LinkedInMCPError):
    """Raised when the LinkedIn API rejects a request.

    Attributes:
        status_code: HTTP status code from LinkedIn, if any.
        path: API path that was requested.
    """

    def __init__(self, message: str, status_code: int | None = None, path: str = ""):
        super().__init__(message=message, code="LINKEDIN_API_ERROR")
        self.status_code = status_code
        self.path = path


class LinkedInTimeoutError(LinkedInAPIError):
    """Raised when LinkedIn doesn't respond in time.

    Attributes:
        timeout_seconds: Timeout duration that was exceeded.
    """

    def __init__(self, path: str, timeout_seconds: float):
        super().__init__(
            message=f"LinkedIn API request to '{path}' timed out after {timeout_seconds}s",
            path=path,
        )
        self.code = "LINKEDIN_TIMEOUT"
        self.timeout_seconds = timeout_seconds


class LinkedInUnavailableError(LinkedInAPIError):
    """Raised when the LinkedIn API is unreachable.

    Attributes:
        reason: Description of the connection failure.
    """

    def __init__(self, path: str, reason: str = "Connection failed"):
        super().__init__(
            message=f"LinkedIn API is unavailable: {reason}",
            path=path,
        )
        self.code = "LINKEDIN_UNAVAILABLE"
        self.reason = reason
