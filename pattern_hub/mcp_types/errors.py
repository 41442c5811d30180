"""
Error taxonomy for the resource registry.

NotFoundError and LoadError are per-call failures, DiscoveryError is recovered
during startup, RegistrationConflictError aborts startup.
"""


class PatternHubError(Exception):
    """Base class for registry errors."""


class NotFoundError(PatternHubError):
    """No resource or prompt is registered under the requested identifier."""

    def __init__(self, identifier: str, kind: str = "resource"):
        self.identifier = identifier
        self.kind = kind
        super().__init__(f"{kind} not found: {identifier}")


class LoadError(PatternHubError):
    """A registered producer failed. `reason` is for logs only."""

    def __init__(self, identifier: str, reason: str):
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"failed to load resource {identifier}")


class DiscoveryError(PatternHubError):
    """The filesystem scan for discoverable resources failed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"resource discovery failed in {path}: {reason}")


class RegistrationConflictError(PatternHubError):
    """Two entries map to the same lookup key."""

    def __init__(self, key: str, existing: str | None = None, incoming: str | None = None):
        self.key = key
        self.existing = existing
        self.incoming = incoming
        detail = f" ({existing} vs {incoming})" if existing and incoming else ""
        super().__init__(f"duplicate registration for '{key}'{detail}")
