"""Tests for ResponseBuilder."""

from pattern_hub.mcp_types import PromptArgument, PromptDescriptor, PromptMessage
from pattern_hub.resources import ResponseBuilder


class TestResponseBuilder:
    """Test MCP envelope construction."""

    def test_resource_list(self, make_resource):
        """Should carry uri, name, description and mimeType."""
        result = ResponseBuilder.build_resource_list([
            make_resource("test://ui/dialogs"),
            make_resource("test://plain/notes", mime_type="text/plain"),
        ])

        assert [str(r.uri) for r in result.resources] == ["test://ui/dialogs", "test://plain/notes"]
        assert result.resources[0].name == "dialogs"
        assert result.resources[0].description == "Description of test://ui/dialogs"
        assert result.resources[1].mimeType == "text/plain"

    def test_empty_resource_list(self):
        """Should build an empty list."""
        assert ResponseBuilder.build_resource_list([]).resources == []

    def test_resource_response(self):
        """Should wrap content in a single text entry."""
        result = ResponseBuilder.build_resource_response("test://ui/dialogs", "# Dialogs")

        assert len(result.contents) == 1
        entry = result.contents[0]
        assert str(entry.uri) == "test://ui/dialogs"
        assert entry.mimeType == "text/markdown"
        assert entry.text == "# Dialogs"

    def test_resource_response_empty_content(self):
        """Should allow empty bodies."""
        result = ResponseBuilder.build_resource_response("test://empty", "", "text/plain")

        assert result.contents[0].text == ""
        assert result.contents[0].mimeType == "text/plain"

    def test_prompt_list(self):
        """Should include argument schemas."""
        prompt = PromptDescriptor(
            name="add_component",
            description="Add a component",
            handler=lambda args: None,
            arguments=[PromptArgument("component_type", "Type of component", True, "component")],
        )

        result = ResponseBuilder.build_prompt_list([prompt])

        assert result.prompts[0].name == "add_component"
        argument = result.prompts[0].arguments[0]
        assert argument.name == "component_type"
        assert argument.required is True

    def test_prompt_response(self):
        """Should wrap messages as text content."""
        result = ResponseBuilder.build_prompt_response(
            "Adding button to CRM template",
            [PromptMessage(role="user", text="Create a new button")],
        )

        assert result.description == "Adding button to CRM template"
        assert result.messages[0].role == "user"
        assert result.messages[0].content.type == "text"
        assert result.messages[0].content.text == "Create a new button"
