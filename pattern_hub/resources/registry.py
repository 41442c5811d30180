"""
Resource Registry
Manifest of addressable resources and URI dispatch.
"""

from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Tuple

from pattern_hub.mcp_types import (
    NotFoundError,
    RegistrationConflictError,
    ResourceDescriptor,
)
from pattern_hub.resources.loader import ResourceLoader


class ResourceRegistry:
    """
    Ordered manifest of resources for one server instance.

    Resources are keyed by their URI with this registry's `<scheme>://`
    prefix removed (e.g. `ui-system/dialog-patterns`). Registration order is
    preserved, so static entries list before discovered ones.
    """

    def __init__(self, scheme: str, logger, loader: Optional[ResourceLoader] = None):
        self.scheme = scheme
        self.prefix = f"{scheme}://"
        self.logger = logger
        self.loader = loader or ResourceLoader(logger)
        self.resources: Dict[str, ResourceDescriptor] = {}

    def uri_for(self, key: str) -> str:
        """Build the public URI for a lookup key."""
        return f"{self.prefix}{key}"

    def strip_scheme(self, uri: str) -> str:
        """Remove this registry's scheme prefix. Other strings pass through unchanged."""
        if uri.startswith(self.prefix):
            return uri[len(self.prefix):]
        return uri

    def register(self, descriptor: ResourceDescriptor) -> None:
        """
        Register a resource.

        Raises:
            ValueError: the URI does not use this registry's scheme
            RegistrationConflictError: the lookup key is already taken
        """
        if not descriptor.uri.startswith(self.prefix):
            raise ValueError(f"Resource URI {descriptor.uri} does not use scheme '{self.scheme}'")

        key = self.strip_scheme(descriptor.uri)
        existing = self.resources.get(key)
        if existing is not None:
            raise RegistrationConflictError(key, existing.uri, descriptor.uri)

        # Own copy, so registries built from one catalog stay independent
        self.resources[key] = replace(descriptor)
        self.logger.debug(f"Resource registered: {descriptor.uri}")

    def register_all(self, descriptors: Iterable[ResourceDescriptor]) -> int:
        count = 0
        for descriptor in descriptors:
            self.register(descriptor)
            count += 1
        return count

    def list(self) -> List[ResourceDescriptor]:
        """All resources in registration order."""
        return list(self.resources.values())

    def has(self, uri: str) -> bool:
        return uri.startswith(self.prefix) and self.strip_scheme(uri) in self.resources

    def resolve(self, uri: str) -> ResourceDescriptor:
        """
        Look up the descriptor for a caller-supplied URI.

        Raises:
            NotFoundError: carrying `uri` exactly as supplied
        """
        if not uri.startswith(self.prefix):
            # Bare keys and other schemes are not in the manifest
            raise NotFoundError(uri)
        descriptor = self.resources.get(self.strip_scheme(uri))
        if descriptor is None:
            raise NotFoundError(uri)
        return descriptor

    async def read(self, uri: str) -> Tuple[ResourceDescriptor, str]:
        """
        Resolve `uri` and load its content.

        Raises:
            NotFoundError: unknown URI
            LoadError: the producer failed
        """
        descriptor = self.resolve(uri)
        content = await self.loader.load(self.strip_scheme(uri), descriptor.producer)
        return descriptor, content

    def __len__(self) -> int:
        return len(self.resources)
