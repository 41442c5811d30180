"""
Resource and prompt types
Dataclasses shared by the registry, loader and prompt table - field names
follow the MCP wire format where they cross the protocol boundary.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union


DEFAULT_MIME_TYPE = "text/markdown"


class MCPErrorCode(IntEnum):
    """JSON-RPC error codes used in MCP error replies."""
    RESOURCE_NOT_FOUND = -32002
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class ContentProducer:
    """Content producer interface - yields a resource body when invoked."""

    def produce(self) -> Union[str, Awaitable[str]]:
        raise NotImplementedError

    def describe(self) -> str:
        return type(self).__name__


class ContentCache:
    """Content cache interface. Values are in-flight or completed loads."""

    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> bool:
        raise NotImplementedError

    def has(self, key: str) -> bool:
        raise NotImplementedError

    def keys(self) -> List[str]:
        raise NotImplementedError


@dataclass(frozen=True)
class ResourceDescriptor:
    """A cataloged resource - follows the MCP Resource shape plus its producer."""
    uri: str
    name: str
    description: str
    producer: ContentProducer
    mimeType: str = DEFAULT_MIME_TYPE


@dataclass
class ErrorLogEntry:
    """One failed load attempt."""
    identifier: str
    message: str
    timestamp: str


@dataclass
class PromptArgument:
    """Prompt argument definition - `default` is the placeholder used when omitted."""
    name: str
    description: str
    required: bool = False
    default: str = ""


@dataclass
class PromptMessage:
    """A rendered prompt message."""
    role: str
    text: str


@dataclass
class PromptRender:
    """Handler output: a description plus messages."""
    description: str
    messages: List[PromptMessage] = field(default_factory=list)


PromptHandler = Callable[[Dict[str, Any]], PromptRender]


@dataclass
class PromptDescriptor:
    """A named prompt with its argument schema and render handler."""
    name: str
    description: str
    handler: PromptHandler
    arguments: List[PromptArgument] = field(default_factory=list)

    def input_schema(self) -> Dict[str, Any]:
        """JSON Schema for the prompt's arguments (all arguments are strings)."""
        return {
            "type": "object",
            "properties": {
                arg.name: {"type": "string", "description": arg.description}
                for arg in self.arguments
            },
            "required": [arg.name for arg in self.arguments if arg.required],
        }
