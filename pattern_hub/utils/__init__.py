"""Utility modules."""

from .logger import Logger
from .readme_finder import find_readme_files, readme_slug

__all__ = ["Logger", "find_readme_files", "readme_slug"]
