"""Redis store."""

from __future__ import annotations

from typing import Any

from depcache.codec import decode_entry, encode_entry
from depcache.types import CacheEntry


class AsyncRedisStore:
    """Async Redis store. Entries are written without expiry."""

    def __init__(
        self,
        client: Any,  # redis.asyncio.Redis
        *,
        prefix: str = "depcache",
    ) -> None:
        self._client = client
        self._prefix = prefix

    def _entry_key(self, key: str) -> str:
        """Generate full Redis key for cache entries."""
        return f"{self._prefix}:versions:{key}"

    async def get(self, key: str) -> CacheEntry | None:
        """Get a cache entry by key."""
        data = await self._client.get(self._entry_key(key))
        if data is None:
            return None
        return decode_entry(data)

    async def put(self, key: str, entry: CacheEntry) -> None:
        """Store a cache entry."""
        await self._client.set(self._entry_key(key), encode_entry(entry))

    async def disconnect(self) -> None:
        """Close the Redis connection."""
        await self._client.aclose()
