"""Base store protocol for cache entry backends."""

from typing import Protocol, runtime_checkable

from depcache.types import CacheEntry


@runtime_checkable
class AsyncStore(Protocol):
    """Async key-value store holding one cache entry per key."""

    async def get(self, key: str) -> CacheEntry | None:
        """Get a cache entry by key."""
        ...

    async def put(self, key: str, entry: CacheEntry) -> None:
        """Store a cache entry, replacing any previous one."""
        ...
