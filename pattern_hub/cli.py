#!/usr/bin/env python3
"""
Pattern Hub CLI Entry Point

Handles:
- Inspecting catalogs, resources and prompts
- Reading a resource by URI
- Server modes (stdio, http)
"""

import argparse
import asyncio
import sys
from typing import Optional

from pattern_hub import __version__, __package_name__
from pattern_hub.catalogs import CATALOGS, Catalog, build_catalog, get_catalog
from pattern_hub.config import ConfigManager
from pattern_hub.mcp_types import LoadError, NotFoundError, RegistrationConflictError
from pattern_hub.utils import Logger


def print_version():
    """Print version info."""
    print(f"{__package_name__} v{__version__}")


def catalog_for_uri(uri: str) -> Optional[str]:
    """Name of the catalog whose scheme prefixes `uri`."""
    for definition in CATALOGS.values():
        if uri.startswith(f"{definition.scheme}://"):
            return definition.name
    return None


def load_catalog(name: str, log_level: str) -> Catalog:
    logger = Logger(name=f"{__package_name__}.cli", level=log_level)
    return build_catalog(get_catalog(name), logger)


def cmd_catalogs(args) -> int:
    for definition in CATALOGS.values():
        print(f"{definition.name:<16} {definition.scheme}://  {definition.title}")
    return 0


def cmd_resources(args) -> int:
    catalog = load_catalog(args.catalog, args.log_level)
    for resource in catalog.registry.list():
        print(f"{resource.uri}  [{resource.mimeType}]  {resource.name}")
    return 0


def cmd_prompts(args) -> int:
    catalog = load_catalog(args.catalog, args.log_level)
    for prompt in catalog.prompts.list():
        names = ", ".join(
            f"{arg.name}{'' if arg.required else '?'}" for arg in prompt.arguments
        )
        print(f"{prompt.name}({names})  {prompt.description}")
    return 0


def cmd_read(args) -> int:
    name = args.catalog or catalog_for_uri(args.uri)
    if name is None:
        print(f"No catalog serves {args.uri}", file=sys.stderr)
        return 1

    catalog = load_catalog(name, args.log_level)
    try:
        _, content = asyncio.run(catalog.registry.read(args.uri))
    except (NotFoundError, LoadError) as e:
        print(str(e), file=sys.stderr)
        return 1

    print(content)
    return 0


def cmd_serve(args) -> int:
    from pattern_hub.server import run_http, run_stdio

    try:
        if args.http:
            asyncio.run(run_http(args.catalog, port=args.port))
        else:
            asyncio.run(run_stdio(args.catalog))
    except RegistrationConflictError as e:
        print(f"Refusing to start: {e}", file=sys.stderr)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    config = ConfigManager().get()

    parser = argparse.ArgumentParser(
        prog="pattern-hub",
        description="Pattern Hub - MCP servers for documentation resources and prompts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  pattern-hub catalogs
  pattern-hub resources --catalog crm-base
  pattern-hub read crm-base://ui-system/dialog-patterns
  pattern-hub serve --catalog agency
  pattern-hub serve --catalog ibso-business --http --port 3000

MCP Configuration:

  {
    "mcpServers": {
      "crm-base": {
        "command": "pattern-hub",
        "args": ["serve", "--catalog", "crm-base"]
      }
    }
  }
"""
    )

    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version and exit"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level for inspection commands (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command")

    catalogs = subparsers.add_parser("catalogs", help="List available catalogs")
    catalogs.set_defaults(func=cmd_catalogs)

    resources = subparsers.add_parser("resources", help="List a catalog's resources")
    resources.add_argument("--catalog", "-c", default=config.catalog)
    resources.set_defaults(func=cmd_resources)

    prompts = subparsers.add_parser("prompts", help="List a catalog's prompts")
    prompts.add_argument("--catalog", "-c", default=config.catalog)
    prompts.set_defaults(func=cmd_prompts)

    read = subparsers.add_parser("read", help="Print a resource body")
    read.add_argument("uri", help="Resource URI, e.g. crm-base://ui-system/dialog-patterns")
    read.add_argument("--catalog", "-c", default=None, help="Catalog (default: inferred from the URI scheme)")
    read.set_defaults(func=cmd_read)

    serve = subparsers.add_parser("serve", help="Run an MCP server")
    serve.add_argument("--catalog", "-c", default=config.catalog)
    serve.add_argument("--http", action="store_true", help="Run in HTTP mode (default: stdio)")
    serve.add_argument("--port", "-p", type=int, default=None, help="HTTP port (default: MCP_PORT or 8000)")
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print_version()
        return 0

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except ValueError as e:
        # Unknown catalog names
        print(str(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
