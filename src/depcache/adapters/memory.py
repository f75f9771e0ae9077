"""In-memory store (async only)."""

import asyncio

from depcache.types import CacheEntry


class AsyncMemoryStore:
    """Async in-memory store. Entries live as long as the instance."""

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> CacheEntry | None:
        """Get a cache entry by key."""
        async with self._lock:
            return self._entries.get(key)

    async def put(self, key: str, entry: CacheEntry) -> None:
        """Store a cache entry."""
        async with self._lock:
            self._entries[key] = entry

    def __len__(self) -> int:
        return len(self._entries)
