"""
Shared pytest fixtures for Pattern Hub tests

Provides mock loggers, injectable config and small registry builders.
"""

import sys
from pathlib import Path
import pytest
from unittest.mock import Mock

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# ============================================================================
# Base Fixtures
# ============================================================================

@pytest.fixture
def config():
    """
    Standard configuration for all tests.

    A real Config so server code sees concrete values, never the environment.
    """
    from pattern_hub.config.settings import Config

    return Config(
        environment="test",
        log_level="WARNING",
        http_host="127.0.0.1",
        http_port=8000,
        catalog="crm-base",
        strict_prompt_arguments=False,
    )


@pytest.fixture
def logger():
    """
    Standard mock logger for all tests.
    """
    from pattern_hub.utils.logger import Logger
    return Mock(spec=Logger)


@pytest.fixture
def registry(logger):
    """Empty registry for the `test` scheme."""
    from pattern_hub.resources import ResourceRegistry
    return ResourceRegistry("test", logger)


@pytest.fixture
def make_resource():
    """
    Factory for static resource descriptors.

    Usage:
        def test_something(make_resource):
            descriptor = make_resource("test://ui/dialogs", "# Dialogs")
    """
    from pattern_hub.mcp_types import ResourceDescriptor
    from pattern_hub.resources import StaticProducer

    def _make(uri: str, text: str = "content", mime_type: str = "text/markdown", producer=None):
        return ResourceDescriptor(
            uri=uri,
            name=uri.rsplit("/", 1)[-1],
            description=f"Description of {uri}",
            producer=producer or StaticProducer(text),
            mimeType=mime_type,
        )

    return _make
