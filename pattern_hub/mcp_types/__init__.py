"""
MCP Types Module
Types, dataclasses and errors for the resource registry and prompt table.
"""

from .errors import (
    PatternHubError,
    NotFoundError,
    LoadError,
    DiscoveryError,
    RegistrationConflictError,
)
from .resources import (
    # Enums / constants
    MCPErrorCode,
    DEFAULT_MIME_TYPE,

    # Interfaces
    ContentProducer,
    ContentCache,

    # Resources
    ResourceDescriptor,
    ErrorLogEntry,

    # Prompts
    PromptArgument,
    PromptMessage,
    PromptRender,
    PromptDescriptor,

    # Type aliases
    PromptHandler,
)

__all__ = [
    # Errors
    "PatternHubError",
    "NotFoundError",
    "LoadError",
    "DiscoveryError",
    "RegistrationConflictError",

    # Enums / constants
    "MCPErrorCode",
    "DEFAULT_MIME_TYPE",

    # Interfaces
    "ContentProducer",
    "ContentCache",

    # Resources
    "ResourceDescriptor",
    "ErrorLogEntry",

    # Prompts
    "PromptArgument",
    "PromptMessage",
    "PromptRender",
    "PromptDescriptor",

    # Type aliases
    "PromptHandler",
]
