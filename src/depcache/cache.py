"""Async versions cache."""

import asyncio
import logging
from collections.abc import Iterable

from depcache.adapters.base import AsyncStore
from depcache.clock import Clock, SystemClock
from depcache.duration import parse_duration
from depcache.keys import cache_key
from depcache.resolvers.base import VersionsClient
from depcache.types import CacheEntry, Dependency, Duration, Resolver, Version

logger = logging.getLogger(__name__)


class VersionsCache:
    """Cache-aside lookup of dependency versions across resolvers.

    Each (dependency, resolver) pair has its own entry in the store. An
    entry is reused while its age is within ``max_age * stale_factor``;
    otherwise the resolver is queried again. A failed query keeps the
    previously known versions and records the error instead of raising.
    """

    def __init__(
        self,
        store: AsyncStore,
        client: VersionsClient,
        *,
        clock: Clock | None = None,
        default_ttl: Duration = "2h",
    ) -> None:
        self._store = store
        self._client = client
        self._clock = clock or SystemClock()
        self._default_ttl = parse_duration(default_ttl)

    @property
    def default_ttl(self) -> int:
        """Default maximum entry age in milliseconds."""
        return self._default_ttl

    async def get_versions(
        self,
        dependency: Dependency,
        resolvers: Iterable[Resolver],
        max_age: Duration | None = None,
    ) -> list[Version]:
        """Return the versions known by all resolvers, sorted ascending.

        Resolvers are queried concurrently. Versions reported by more than
        one resolver appear once per resolver. Store and clock failures
        propagate; resolver failures do not.
        """
        max_age_ms = (
            parse_duration(max_age) if max_age is not None else self._default_ttl
        )
        results = await asyncio.gather(
            *(
                self._get_versions_impl(dependency, resolver, max_age_ms)
                for resolver in resolvers
            )
        )
        return sorted(version for versions in results for version in versions)

    async def _get_versions_impl(
        self, dependency: Dependency, resolver: Resolver, max_age: int
    ) -> list[Version]:
        """Apply the cache-aside policy for a single resolver."""
        now = await self._clock.now()
        key = cache_key(dependency, resolver)
        entry = await self._store.get(key)

        if entry is not None and entry.age(now) <= max_age * entry.stale_factor:
            logger.debug("Fresh versions for %s (age %d ms)", key, entry.age(now))
            return entry.versions

        try:
            versions = await self._client.fetch_versions(dependency, resolver)
        except Exception as e:
            message = str(e) or type(e).__name__
            versions = entry.versions if entry is not None else []
            logger.warning(
                "Failed to fetch versions of %s:%s from %s: %s",
                dependency.group_id,
                dependency.module_name,
                resolver.name,
                message,
            )
            await self._store.put(
                key, CacheEntry(updated_at=now, versions=versions, last_error=message)
            )
            return versions

        versions = list(versions)
        logger.debug("Refreshed %s with %d versions", key, len(versions))
        await self._store.put(key, CacheEntry(updated_at=now, versions=versions))
        return versions
