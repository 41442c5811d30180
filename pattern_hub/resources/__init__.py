"""Resource registry, lazy loading and discovery."""

from .loader import ResourceLoader, MapContentCache, ERROR_LOG_SIZE
from .producers import StaticProducer, ModuleProducer, FileProducer, FunctionProducer
from .registry import ResourceRegistry
from .discovery import discover_readme_resources, README_CATEGORY
from .responses import ResponseBuilder

__all__ = [
    "ResourceLoader",
    "MapContentCache",
    "ERROR_LOG_SIZE",
    "StaticProducer",
    "ModuleProducer",
    "FileProducer",
    "FunctionProducer",
    "ResourceRegistry",
    "discover_readme_resources",
    "README_CATEGORY",
    "ResponseBuilder",
]
