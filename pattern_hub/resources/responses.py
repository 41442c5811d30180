"""
Response Builder
Shapes registry output into MCP result envelopes.
"""

from typing import Iterable

from mcp import types

from pattern_hub.mcp_types import (
    DEFAULT_MIME_TYPE,
    PromptDescriptor,
    PromptMessage,
    ResourceDescriptor,
)


class ResponseBuilder:
    """Pure envelope construction - lookups and loading happen before this."""

    @staticmethod
    def build_resource_list(resources: Iterable[ResourceDescriptor]) -> types.ListResourcesResult:
        return types.ListResourcesResult(
            resources=[
                types.Resource(
                    uri=resource.uri,
                    name=resource.name,
                    description=resource.description,
                    mimeType=resource.mimeType,
                )
                for resource in resources
            ]
        )

    @staticmethod
    def build_resource_response(uri: str, content: str, mime_type: str = DEFAULT_MIME_TYPE) -> types.ReadResourceResult:
        """Wrap content; `uri` is echoed exactly as the caller sent it."""
        return types.ReadResourceResult(
            contents=[
                types.TextResourceContents(uri=uri, mimeType=mime_type, text=content)
            ]
        )

    @staticmethod
    def build_prompt_list(prompts: Iterable[PromptDescriptor]) -> types.ListPromptsResult:
        return types.ListPromptsResult(
            prompts=[
                types.Prompt(
                    name=prompt.name,
                    description=prompt.description,
                    arguments=[
                        types.PromptArgument(
                            name=arg.name,
                            description=arg.description,
                            required=arg.required,
                        )
                        for arg in prompt.arguments
                    ],
                )
                for prompt in prompts
            ]
        )

    @staticmethod
    def build_prompt_response(description: str, messages: Iterable[PromptMessage]) -> types.GetPromptResult:
        return types.GetPromptResult(
            description=description,
            messages=[
                types.PromptMessage(
                    role=message.role,
                    content=types.TextContent(type="text", text=message.text),
                )
                for message in messages
            ],
        )
