"""Resolver client protocol."""

from typing import Protocol, runtime_checkable

from depcache.types import Dependency, Resolver, Version


class ResolverError(RuntimeError):
    """A resolver could not produce the versions of a dependency."""


@runtime_checkable
class VersionsClient(Protocol):
    """Looks up the released versions of a dependency on one resolver."""

    async def fetch_versions(
        self, dependency: Dependency, resolver: Resolver
    ) -> list[Version]:
        """Fetch all known versions, raising on lookup failure."""
        ...
