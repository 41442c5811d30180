"""
Resource Loader

Lazily invokes content producers and memoizes their output.

Each cache slot holds the asyncio task of the first load for that key. The
task is installed before it is awaited, so concurrent readers of an
unresolved key share one producer invocation. A successful result stays
cached for the life of the process; a failed attempt clears the slot, is
recorded in a bounded error log and is retried on the next call.
"""

import asyncio
import inspect
from collections import deque
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pattern_hub.mcp_types import (
    ContentCache,
    ContentProducer,
    ErrorLogEntry,
    LoadError,
)

ERROR_LOG_SIZE = 100


class MapContentCache(ContentCache):
    """Simple dict-based content cache. No TTL, no eviction."""

    def __init__(self):
        self.cache: Dict[str, Any] = {}

    def get(self, key: str) -> Optional[Any]:
        return self.cache.get(key)

    def set(self, key: str, value: Any) -> None:
        self.cache[key] = value

    def delete(self, key: str) -> bool:
        return self.cache.pop(key, None) is not None

    def has(self, key: str) -> bool:
        return key in self.cache

    def keys(self) -> List[str]:
        return list(self.cache.keys())


class ResourceLoader:
    """Single-flight, memoizing producer invoker."""

    def __init__(self, logger, cache: Optional[ContentCache] = None, error_log_size: int = ERROR_LOG_SIZE):
        self.logger = logger
        self.cache = cache if cache is not None else MapContentCache()
        self._error_log: deque[ErrorLogEntry] = deque(maxlen=error_log_size)

    async def load(self, identifier: str, producer: ContentProducer) -> str:
        """
        Return the content for `identifier`, invoking `producer` at most once.

        Raises:
            LoadError: the producer failed on this attempt
        """
        pending = self.cache.get(identifier)
        if pending is None or pending.cancelled():
            pending = asyncio.ensure_future(self._produce(identifier, producer))
            self.cache.set(identifier, pending)
        # A cancelled caller must not cancel the load other callers wait on
        return await asyncio.shield(pending)

    async def _produce(self, identifier: str, producer: ContentProducer) -> str:
        self.logger.debug(f"Loading resource {identifier} from {producer.describe()}")
        try:
            content = producer.produce()
            if inspect.isawaitable(content):
                content = await content
            if not isinstance(content, str):
                raise TypeError(f"producer returned {type(content).__name__}, expected str")
        except Exception as e:
            self.cache.delete(identifier)
            reason = str(e) or type(e).__name__
            self._record_failure(identifier, reason)
            raise LoadError(identifier, reason) from e

        self.logger.debug(f"Cached resource {identifier} ({len(content)} chars)")
        return content

    def _record_failure(self, identifier: str, reason: str) -> None:
        self._error_log.append(ErrorLogEntry(
            identifier=identifier,
            message=reason,
            timestamp=datetime.now(timezone.utc).isoformat(),
        ))
        self.logger.error(f"Resource loading error for {identifier}: {reason}")

    def is_cached(self, identifier: str) -> bool:
        """True once `identifier` has loaded successfully."""
        pending = self.cache.get(identifier)
        return (
            pending is not None
            and pending.done()
            and not pending.cancelled()
            and pending.exception() is None
        )

    def get_error_log(self) -> List[ErrorLogEntry]:
        """Copy of the error log, oldest first."""
        return list(self._error_log)

    def get_cache_stats(self) -> Dict[str, Any]:
        keys = [key for key in self.cache.keys() if self.is_cached(key)]
        return {
            "size": len(keys),
            "keys": keys,
            "errors": len(self._error_log),
        }
