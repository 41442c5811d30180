"""
Catalog definitions

A catalog is one server instance: a URI scheme, a static manifest, optional
README discovery, and a prompt table. `build_catalog` assembles the runtime
registry and prompt table; registration conflicts propagate so a server
never starts with an ambiguous manifest.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from pattern_hub import __version__
from pattern_hub.mcp_types import DEFAULT_MIME_TYPE, PromptDescriptor, ResourceDescriptor
from pattern_hub.prompts import PromptTable
from pattern_hub.resources import ModuleProducer, ResourceRegistry, discover_readme_resources


@dataclass
class CatalogDefinition:
    """Static definition of a catalog server."""
    name: str
    scheme: str
    title: str
    description: str
    resources: List[ResourceDescriptor] = field(default_factory=list)
    prompts: List[PromptDescriptor] = field(default_factory=list)
    readme_dir: Optional[Path] = None
    version: str = __version__


@dataclass
class Catalog:
    """A built catalog: the definition plus its live registry and prompts."""
    definition: CatalogDefinition
    registry: ResourceRegistry
    prompts: PromptTable

    @property
    def name(self) -> str:
        return self.definition.name


def module_resource(
    scheme: str,
    key: str,
    name: str,
    description: str,
    module: str,
    attribute: str,
    mime_type: str = DEFAULT_MIME_TYPE,
) -> ResourceDescriptor:
    """Descriptor whose content is a constant in a lazily imported content module."""
    return ResourceDescriptor(
        uri=f"{scheme}://{key}",
        name=name,
        description=description,
        producer=ModuleProducer(module, attribute),
        mimeType=mime_type,
    )


def build_catalog(definition: CatalogDefinition, logger, readme_dir: Optional[Path] = None) -> Catalog:
    """
    Build the registry and prompt table for a catalog.

    Static resources are registered first, then discovered READMEs.

    Args:
        definition: Catalog to build
        logger: Logger shared by the registry, loader and prompt table
        readme_dir: Override the definition's discovery directory

    Raises:
        RegistrationConflictError: two resources or prompts share a key
    """
    registry = ResourceRegistry(definition.scheme, logger)
    registry.register_all(definition.resources)

    scan_dir = readme_dir or definition.readme_dir
    if scan_dir is not None:
        registry.register_all(discover_readme_resources(scan_dir, definition.scheme, logger))

    prompts = PromptTable(logger)
    for prompt in definition.prompts:
        prompts.register(prompt)

    logger.info(
        f"Catalog {definition.name} ready: {len(registry)} resources, {len(prompts)} prompts"
    )
    return Catalog(definition=definition, registry=registry, prompts=prompts)
