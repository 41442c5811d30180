"""
Pattern Hub
MCP content servers exposing URI-addressed documentation resources and prompts.
"""

__version__ = "1.0.0"
__package_name__ = "pattern-hub"
