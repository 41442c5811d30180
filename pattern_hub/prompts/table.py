"""
Prompt Table

Named prompts with argument schemas and render handlers. Prompts are looked
up by exact name; there is no URI parsing here.
"""

from typing import Any, Dict, List, Optional

from pattern_hub.mcp_types import (
    NotFoundError,
    PromptArgument,
    PromptDescriptor,
    PromptMessage,
    PromptRender,
    RegistrationConflictError,
)


def template_prompt(
    name: str,
    description: str,
    title_template: str,
    text_template: str,
    arguments: List[PromptArgument],
    role: str = "user",
    title_defaults: Optional[Dict[str, str]] = None,
) -> PromptDescriptor:
    """
    Build a prompt whose handler fills `{argument}` placeholders.

    Omitted or empty arguments fall back to the argument's `default`, so
    rendering never fails for missing input. Unknown arguments are ignored.
    `title_defaults` overrides the placeholder used in the title only.

    Example:
        template_prompt(
            "generate_sow",
            "Generate Statement of Work for client",
            "Generating SOW for {client_name}",
            "Create a Statement of Work for {client_name}...",
            [PromptArgument("client_name", "Name of the client", True, "client")],
        )
    """
    defaults = {arg.name: arg.default for arg in arguments}
    title_fallbacks = {**defaults, **(title_defaults or {})}

    def handler(args: Dict[str, Any]) -> PromptRender:
        supplied = {
            key: str(value)
            for key, value in (args or {}).items()
            if key in defaults and value not in (None, "")
        }
        return PromptRender(
            description=title_template.format_map({**title_fallbacks, **supplied}),
            messages=[PromptMessage(role=role, text=text_template.format_map({**defaults, **supplied}))],
        )

    return PromptDescriptor(
        name=name,
        description=description,
        handler=handler,
        arguments=list(arguments),
    )


class PromptTable:
    """Registry of prompts for one server instance."""

    def __init__(self, logger=None):
        self.logger = logger
        self.prompts: Dict[str, PromptDescriptor] = {}

    def register(self, prompt: PromptDescriptor) -> None:
        if prompt.name in self.prompts:
            raise RegistrationConflictError(prompt.name)
        self.prompts[prompt.name] = prompt
        if self.logger:
            self.logger.debug(f"Prompt registered: {prompt.name}")

    def list(self) -> List[PromptDescriptor]:
        return list(self.prompts.values())

    def get(self, name: str) -> Optional[PromptDescriptor]:
        return self.prompts.get(name)

    def render(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> PromptRender:
        """
        Render a prompt.

        Raises:
            NotFoundError: no prompt named `name`
        """
        prompt = self.prompts.get(name)
        if prompt is None:
            raise NotFoundError(name, kind="prompt")
        return prompt.handler(arguments or {})

    def __len__(self) -> int:
        return len(self.prompts)
