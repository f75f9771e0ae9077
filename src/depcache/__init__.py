"""depcache - Cached lookup of dependency versions for Python."""

from contextlib import suppress

# Stores (async only)
from depcache.adapters import (
    AsyncJsonFileStore,
    AsyncMemoryStore,
    AsyncStore,
)

# Versions cache
from depcache.cache import VersionsCache
from depcache.clock import Clock, SystemClock
from depcache.codec import decode_entry, encode_entry

# Duration parsing
from depcache.duration import parse_duration
from depcache.keys import cache_key

# Resolver clients
from depcache.resolvers import MavenMetadataClient, ResolverError, VersionsClient

# Core types
from depcache.types import (
    CacheEntry,
    Dependency,
    Duration,
    Resolver,
    Version,
)

# Optional store imports - only available when dependencies are installed
with suppress(ImportError):
    from depcache.adapters import AsyncRedisStore

__version__ = "0.1.0"

__all__ = [
    "AsyncJsonFileStore",
    "AsyncMemoryStore",
    "AsyncRedisStore",
    "AsyncStore",
    "CacheEntry",
    "Clock",
    "Dependency",
    "Duration",
    "MavenMetadataClient",
    "Resolver",
    "ResolverError",
    "SystemClock",
    "Version",
    "VersionsCache",
    "VersionsClient",
    "cache_key",
    "decode_entry",
    "encode_entry",
    "parse_duration",
]
