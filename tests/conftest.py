# Test configuration
import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

REPO_ROOT = Path(__file__).parent.parent

# Add repo root to path so tests can import modules
sys.path.insert(0, str(REPO_ROOT))

from linkedin_mcp.config import Settings  # noqa: E402
from linkedin_mcp.gateway.server import LinkedInMCPGateway  # noqa: E402
from linkedin_mcp.linkedin.client import LinkedInClient  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    """Settings with a token, ignoring any local .env file."""
    return Settings(_env_file=None, LINKEDIN_ACCESS_TOKEN="test-token")


@pytest.fixture
def linkedin_client() -> AsyncMock:
    """LinkedIn client double; every API method is an AsyncMock."""
    return AsyncMock(spec=LinkedInClient)


@pytest.fixture
def gateway(settings, linkedin_client) -> LinkedInMCPGateway:
    return LinkedInMCPGateway(settings, client=linkedin_client)
