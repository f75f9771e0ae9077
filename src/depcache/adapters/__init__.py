"""Stores for depcache cache entries (async only)."""

from contextlib import suppress

from depcache.adapters.base import AsyncStore
from depcache.adapters.json_file import AsyncJsonFileStore
from depcache.adapters.memory import AsyncMemoryStore

# Optional stores - only available when dependencies are installed
with suppress(ImportError):
    from depcache.adapters.redis import AsyncRedisStore

__all__ = [
    "AsyncJsonFileStore",
    "AsyncMemoryStore",
    "AsyncRedisStore",
    "AsyncStore",
]
