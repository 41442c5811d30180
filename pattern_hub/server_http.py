#!/usr/bin/env python3
"""
Pattern Hub MCP Server - HTTP Transport
Runs a catalog as a web server using the MCP Streamable HTTP protocol.

For local use, `pattern-hub serve --catalog <name>` (stdio) is enough.
"""

import asyncio
import uuid
from typing import Optional

from mcp.server.streamable_http import StreamableHTTPServerTransport
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.routing import Mount, Route

from pattern_hub import __version__
from pattern_hub.mcp_types import LoadError, NotFoundError
from pattern_hub.server import PatternHubMCPServer


def create_app(hub: PatternHubMCPServer) -> Starlette:
    """
    Build the Starlette app for one server instance.

    Endpoints:
    - /mcp/{session} - MCP protocol
    - /health - Deployment health check
    - /r/{category}/{name} - Raw resource body (for curl)
    """
    active_transports: dict[str, StreamableHTTPServerTransport] = {}
    session_tasks: set[asyncio.Task] = set()

    async def run_session(transport: StreamableHTTPServerTransport, ready: asyncio.Event):
        async with transport.connect() as (read_stream, write_stream):
            ready.set()
            await hub.server.run(read_stream, write_stream, hub.initialization_options())

    async def mcp_endpoint(scope, receive, send):
        """Handle MCP requests (GET/POST/DELETE) for a session."""
        request_path = scope.get("path", "")
        path_parts = request_path.strip("/").split("/")

        # Extract session ID from path like /mcp/session-id or create new session
        if len(path_parts) >= 2:
            session_id = path_parts[1]
        else:
            session_id = str(uuid.uuid4())

        transport = active_transports.get(session_id)
        if transport is None:
            transport = StreamableHTTPServerTransport(mcp_session_id=session_id)
            active_transports[session_id] = transport

            ready = asyncio.Event()
            task = asyncio.create_task(run_session(transport, ready))
            session_tasks.add(task)
            task.add_done_callback(session_tasks.discard)
            task.add_done_callback(lambda _: active_transports.pop(session_id, None))
            await ready.wait()
            hub.logger.info(f"MCP session opened: {session_id}")

        await transport.handle_request(scope, receive, send)

    async def health_check(request: Request):
        """Health check endpoint."""
        return PlainTextResponse(
            f"{hub.definition.title} MCP Server (HTTP)\n"
            f"Catalog: {hub.definition.name}\n"
            f"Version: {__version__}\n"
            f"Status: Running\n"
            f"Resources: {len(hub.registry)}\n"
            f"Prompts: {len(hub.prompts)}\n"
            f"MCP endpoint: /mcp/{{session-id}}\n"
        )

    async def get_resource_raw(request: Request):
        """Serve a resource body by its path, e.g. /r/ui-system/dialog-patterns."""
        uri = hub.registry.uri_for(request.path_params["path"])
        try:
            descriptor, content = await hub.registry.read(uri)
        except NotFoundError:
            return PlainTextResponse(f"Resource not found: {uri}", status_code=404)
        except LoadError as e:
            return PlainTextResponse(str(e), status_code=503)

        return Response(
            content=content,
            media_type=f"{descriptor.mimeType}; charset=utf-8",
        )

    app = Starlette(
        routes=[
            Route("/health", endpoint=health_check),
            Route("/r/{path:path}", endpoint=get_resource_raw),
            Mount("/mcp", app=mcp_endpoint),
        ],
    )
    app.state.hub = hub
    return app


async def main(catalog: Optional[str] = None, host: Optional[str] = None, port: Optional[int] = None):
    """Run the HTTP server."""
    import uvicorn

    hub = PatternHubMCPServer(catalog)
    settings = hub.config.get()
    host = host or settings.http_host
    port = port or settings.http_port

    config = uvicorn.Config(
        create_app(hub),
        host=host,
        port=port,
        log_level="info",
    )
    server = uvicorn.Server(config)

    print(f"{hub.definition.title} MCP Server (HTTP) starting on http://{host}:{port}")
    print(f"")
    print(f"Endpoints:")
    print(f"  MCP:      http://{host}:{port}/mcp/{{session-id}}")
    print(f"  Health:   http://{host}:{port}/health")
    print(f"  Raw:      http://{host}:{port}/r/{{category}}/{{name}}")

    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
