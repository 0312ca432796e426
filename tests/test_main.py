"""Tests for the command-line entry point and logging setup."""

import io
import json
from unittest.mock import AsyncMock, patch

import pytest
import structlog

from linkedin_mcp.__main__ import apply_overrides, build_parser, build_transport, main, serve
from linkedin_mcp.config import Settings
from linkedin_mcp.logging_config import configure_logging
from linkedin_mcp.mcp_transport.http_transport import HttpTransport
from linkedin_mcp.mcp_transport.stdio import StdioTransport


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestArguments:
    """Tests for command-line overrides."""

    def test_overrides_take_precedence(self, settings):
        args = build_parser().parse_args(["--transport", "http", "--port", "8080"])

        result = apply_overrides(settings, args)

        assert result.MCP_TRANSPORT == "http"
        assert result.PORT == 8080
        assert result.HOST == settings.HOST
        assert result.LINKEDIN_ACCESS_TOKEN == "test-token"

    def test_no_overrides(self, settings):
        result = apply_overrides(settings, build_parser().parse_args([]))

        assert result.model_dump() == settings.model_dump()

    def test_rejects_unknown_transport(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--transport", "websocket"])


class TestBuildTransport:
    """Tests for transport selection."""

    def test_stdio_by_default(self, settings):
        assert isinstance(build_transport(settings), StdioTransport)

    def test_http(self, settings):
        transport = build_transport(settings.model_copy(update={"MCP_TRANSPORT": "http", "PORT": 3005}))

        assert isinstance(transport, HttpTransport)
        assert transport.port == 3005


class TestMain:
    """Tests for process startup."""

    def test_missing_token_exits_nonzero(self):
        with patch("linkedin_mcp.__main__.get_settings", return_value=Settings(_env_file=None)):
            with patch("linkedin_mcp.__main__.configure_logging"):
                assert main([]) == 1

    def test_runs_until_transport_closes(self, settings):
        with patch("linkedin_mcp.__main__.get_settings", return_value=settings), \
                patch("linkedin_mcp.__main__.configure_logging"), \
                patch("linkedin_mcp.__main__.serve", new=AsyncMock()) as serve_mock:
            assert main(["--log-level", "debug"]) == 0

        serve_mock.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_serve_stops_gateway_when_transport_closes(self):
        gateway = AsyncMock()

        await serve(gateway, AsyncMock())

        gateway.start.assert_awaited_once()
        gateway.stop.assert_awaited_once()


class TestConfigureLogging:
    """Tests for structlog configuration."""

    def test_emits_json_lines(self):
        stream = io.StringIO()
        configure_logging("info", stream=stream)

        structlog.get_logger("test").info("gateway_started", tools=18)

        record = json.loads(stream.getvalue().strip())
        assert record["event"] == "gateway_started"
        assert record["tools"] == 18
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_filters_below_level(self):
        stream = io.StringIO()
        configure_logging("warning", stream=stream)

        structlog.get_logger("test").info("tool_called")

        assert stream.getvalue() == ""
