"""
Dynamic Discovery

Turns README-<name>.md files found next to a catalog into `readme/<name>`
resources. Only metadata is gathered here; file bodies are read by the
loader on first request.
"""

import logging
from pathlib import Path
from typing import List

from pattern_hub.mcp_types import DiscoveryError, ResourceDescriptor
from pattern_hub.resources.producers import FileProducer
from pattern_hub.utils.readme_finder import find_readme_files, readme_slug

logger = logging.getLogger(__name__)

README_CATEGORY = "readme"


def readme_descriptor(path: Path, scheme: str) -> ResourceDescriptor:
    """Synthesize the descriptor for one README file."""
    slug = readme_slug(path)
    return ResourceDescriptor(
        uri=f"{scheme}://{README_CATEGORY}/{slug}",
        name=f"{slug.capitalize()} Management README",
        description=f"README documentation for {slug} management system",
        producer=FileProducer(path),
        mimeType="text/markdown",
    )


def discover_readme_resources(base_dir: Path, scheme: str, log=None) -> List[ResourceDescriptor]:
    """
    Scan `base_dir` for README-*.md files.

    Never raises for scan failures: they are logged and yield no entries.

    Args:
        base_dir: Directory to scan (callers resolve it from their module path)
        scheme: URI scheme of the owning registry
        log: Logger to report through (default: module logger)
    """
    log = log or logger
    try:
        paths = find_readme_files(base_dir)
    except DiscoveryError as e:
        log.error(f"Error discovering markdown files: {e}")
        return []

    descriptors = [readme_descriptor(path, scheme) for path in paths]
    log.info(f"Discovered {len(descriptors)} README resources in {base_dir}")
    return descriptors
