"""Resolver clients for depcache."""

from depcache.resolvers.base import ResolverError, VersionsClient
from depcache.resolvers.maven import MavenMetadataClient

__all__ = [
    "MavenMetadataClient",
    "ResolverError",
    "VersionsClient",
]
