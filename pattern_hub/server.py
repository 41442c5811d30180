#!/usr/bin/env python3
"""
Pattern Hub MCP Server
Serves one catalog's resources and prompts over MCP.
"""

from typing import Any, Dict, Optional, Union

from jsonschema import ValidationError, validate
from mcp import types
from mcp.server import Server
from mcp.server.lowlevel import NotificationOptions
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from pydantic import AnyUrl

from pattern_hub import __package_name__
from pattern_hub.catalogs import CatalogDefinition, build_catalog, get_catalog
from pattern_hub.config import Config, ConfigManager
from pattern_hub.mcp_types import LoadError, MCPErrorCode, NotFoundError
from pattern_hub.resources import ResponseBuilder
from pattern_hub.utils import Logger


def _mcp_error(code: MCPErrorCode, message: str, data: Optional[Dict[str, Any]] = None) -> McpError:
    return McpError(types.ErrorData(code=int(code), message=message, data=data))


class PatternHubMCPServer:
    """MCP server for a single catalog."""

    def __init__(
        self,
        catalog: Union[str, CatalogDefinition, None] = None,
        config: Optional[Config] = None,
        readme_dir=None,
    ):
        # Initialize configuration
        self.config = ConfigManager(config)
        settings = self.config.get()

        if isinstance(catalog, CatalogDefinition):
            definition = catalog
        else:
            definition = get_catalog(catalog or settings.catalog)
        self.definition = definition

        # Initialize logger
        self.logger = Logger(name=f"{__package_name__}.{definition.name}", level=settings.log_level)

        # Build registry and prompts (discovery runs here; conflicts abort startup)
        self.catalog = build_catalog(definition, self.logger, readme_dir=readme_dir)
        self.registry = self.catalog.registry
        self.prompts = self.catalog.prompts

        # Initialize MCP Server
        self.server = Server(definition.name)

        # Set up MCP protocol handlers
        self._setup_handlers()

    # =========================================================================
    # Protocol operations
    # =========================================================================

    async def list_resources(self) -> types.ListResourcesResult:
        return ResponseBuilder.build_resource_list(self.registry.list())

    async def read_resource(self, uri: str) -> types.ReadResourceResult:
        """
        Read a resource by URI.

        Raises:
            McpError: RESOURCE_NOT_FOUND for unknown URIs, INTERNAL_ERROR for load failures
        """
        try:
            descriptor, content = await self.registry.read(uri)
        except NotFoundError as e:
            self.logger.warning(f"Resource not found: {uri}")
            raise _mcp_error(MCPErrorCode.RESOURCE_NOT_FOUND, str(e), {"uri": uri}) from e
        except LoadError as e:
            # Reason stays in the server log
            self.logger.error(f"Error loading resource {uri}: {e.reason}")
            raise _mcp_error(MCPErrorCode.INTERNAL_ERROR, str(e), {"uri": uri}) from e

        return ResponseBuilder.build_resource_response(uri, content, descriptor.mimeType)

    async def list_prompts(self) -> types.ListPromptsResult:
        return ResponseBuilder.build_prompt_list(self.prompts.list())

    async def get_prompt(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> types.GetPromptResult:
        """
        Render a prompt.

        Raises:
            McpError: INVALID_PARAMS for unknown prompts, or for missing
                required arguments when strict prompt arguments are enabled
        """
        prompt = self.prompts.get(name)
        if prompt is None:
            self.logger.warning(f"Prompt not found: {name}")
            raise _mcp_error(MCPErrorCode.INVALID_PARAMS, str(NotFoundError(name, kind="prompt")))

        if self.config.get().strict_prompt_arguments:
            try:
                validate(instance=arguments or {}, schema=prompt.input_schema())
            except ValidationError as e:
                self.logger.warning(f"Prompt argument validation failed for {name}: {e.message}")
                raise _mcp_error(MCPErrorCode.INVALID_PARAMS, f"Invalid arguments for prompt {name}: {e.message}") from e

        rendered = self.prompts.render(name, arguments)
        return ResponseBuilder.build_prompt_response(rendered.description, rendered.messages)

    # =========================================================================
    # MCP wiring
    # =========================================================================

    def _setup_handlers(self):
        """Set up MCP protocol request handlers using decorators."""

        @self.server.list_resources()
        async def handle_list_resources() -> list[types.Resource]:
            result = await self.list_resources()
            self.logger.debug(f"Listing {len(result.resources)} resources")
            return result.resources

        @self.server.read_resource()
        async def handle_read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
            result = await self.read_resource(str(uri))
            return [
                ReadResourceContents(content=item.text, mime_type=item.mimeType)
                for item in result.contents
            ]

        @self.server.list_prompts()
        async def handle_list_prompts() -> list[types.Prompt]:
            result = await self.list_prompts()
            return result.prompts

        @self.server.get_prompt()
        async def handle_get_prompt(name: str, arguments: dict[str, str] | None) -> types.GetPromptResult:
            return await self.get_prompt(name, arguments)

    def initialization_options(self) -> InitializationOptions:
        return InitializationOptions(
            server_name=self.definition.name,
            server_version=self.definition.version,
            capabilities=self.server.get_capabilities(
                notification_options=NotificationOptions(),
                experimental_capabilities={},
            ),
        )

    async def start(self):
        """Start the MCP server on stdio."""
        try:
            self.logger.info(
                f"{self.definition.title} MCP server starting on stdio "
                f"({len(self.registry)} resources, {len(self.prompts)} prompts)"
            )

            async with stdio_server() as (read_stream, write_stream):
                await self.server.run(read_stream, write_stream, self.initialization_options())

        except Exception:
            self.logger.exception(f"{self.definition.name} server stopped with an error")
            raise


async def run_stdio(catalog: Optional[str] = None):
    """Run in stdio mode."""
    server = PatternHubMCPServer(catalog)
    await server.start()


async def run_http(catalog: Optional[str] = None, host: Optional[str] = None, port: Optional[int] = None):
    """Run in HTTP mode using Streamable HTTP transport (see server_http.py)."""
    from pattern_hub.server_http import main as http_main
    await http_main(catalog=catalog, host=host, port=port)
