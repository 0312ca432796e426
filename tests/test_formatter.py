"""Tests for result formatting."""

import json

from linkedin_mcp.gateway.exceptions import UnknownToolError
from linkedin_mcp.gateway.formatter import format_error, format_result
from linkedin_mcp.linkedin.exceptions import LinkedInAPIError
from linkedin_mcp.linkedin.schemas import Post, Profile


class TestFormatResult:
    """Tests for successful results."""

    def test_string_passed_through(self):
        result = format_result("Successfully deleted skill: 7")

        assert result.isError is False
        assert result.content[0].type == "text"
        assert result.content[0].text == "Successfully deleted skill: 7"

    def test_model_rendered_as_indented_json(self):
        result = format_result(Profile(id="abc123", first_name="Ada", profile_picture="pic"))

        text = result.content[0].text
        assert json.loads(text) == {"id": "abc123", "firstName": "Ada", "profilePicture": "pic"}
        assert text.startswith("{\n  ")

    def test_list_rendered_as_array(self):
        result = format_result([Post(id="p1", text="Hi"), Post(id="p2")])

        assert json.loads(result.content[0].text) == [{"id": "p1", "text": "Hi"}, {"id": "p2"}]

    def test_empty_list(self):
        assert format_result([]).content[0].text == "[]"

    def test_single_content_block(self):
        assert len(format_result({"ok": True}).content) == 1


class TestFormatError:
    """Tests for error results."""

    def test_uses_exception_message(self):
        result = format_error(LinkedInAPIError("API Error", 500))

        assert result.isError is True
        assert result.content[0].text == "Error: API Error"

    def test_gateway_error(self):
        result = format_error(UnknownToolError("nope"))

        assert result.content[0].text == "Error: Unknown tool: nope"

    def test_plain_exception(self):
        assert format_error(RuntimeError("boom")).content[0].text == "Error: boom"

    def test_empty_message_falls_back(self):
        assert format_error(RuntimeError()).content[0].text == "Error: Unknown error"
