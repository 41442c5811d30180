"""
README File Finder

Locates loose README-<name>.md documents that sit next to a catalog package.
Only the top level of the base directory is scanned.
"""

from pathlib import Path

from pattern_hub.mcp_types.errors import DiscoveryError

README_PREFIX = "README-"
README_SUFFIX = ".md"


def is_readme_file(file_path: Path) -> bool:
    """True for README-<name>.md with a non-empty <name>."""
    name = file_path.name
    return (
        name.startswith(README_PREFIX)
        and name.endswith(README_SUFFIX)
        and len(name) > len(README_PREFIX) + len(README_SUFFIX)
    )


def readme_slug(file_path: Path) -> str:
    """
    Derive the resource name for a README file.

    README-Vitracoat.md -> "vitracoat"
    """
    name = file_path.name
    return name[len(README_PREFIX):-len(README_SUFFIX)].lower()


def find_readme_files(base_path: Path) -> list[Path]:
    """
    Find README-*.md files directly inside base_path.

    Args:
        base_path: Directory to scan

    Returns:
        Matching paths sorted by filename

    Raises:
        DiscoveryError: base_path is missing or cannot be listed
    """
    base_path = Path(base_path)
    if not base_path.is_dir():
        raise DiscoveryError(str(base_path), "directory does not exist")

    try:
        entries = list(base_path.iterdir())
    except OSError as e:
        raise DiscoveryError(str(base_path), str(e)) from e

    return sorted(
        (p for p in entries if is_readme_file(p) and p.is_file()),
        key=lambda p: p.name,
    )
