"""Maven repository client reading ``maven-metadata.xml``."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

import httpx

from depcache.resolvers.base import ResolverError
from depcache.types import Dependency, Resolver, Version

logger = logging.getLogger(__name__)


def metadata_url(dependency: Dependency, resolver: Resolver) -> str:
    """URL of the artifact's metadata document on a Maven repository."""
    return "/".join(
        (
            resolver.location.rstrip("/"),
            dependency.group_id.replace(".", "/"),
            dependency.module_name,
            "maven-metadata.xml",
        )
    )


def parse_metadata(text: str) -> list[Version]:
    """Extract ``versioning/versions/version`` values from metadata XML."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise ResolverError(f"Malformed maven-metadata.xml: {exc}") from exc

    versions: list[Version] = []
    for element in root.findall("versioning/versions/version"):
        if element.text and element.text.strip():
            versions.append(Version(element.text.strip()))
    return versions


class MavenMetadataClient:
    """Async client for Maven-layout repositories."""

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout, follow_redirects=True
        )

    async def fetch_versions(
        self, dependency: Dependency, resolver: Resolver
    ) -> list[Version]:
        """Fetch all versions listed in the artifact's metadata."""
        url = metadata_url(dependency, resolver)
        logger.debug("Fetching %s", url)
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as exc:
            raise ResolverError(f"Request to {url} failed: {exc}") from exc

        if not response.is_success:
            raise ResolverError(f"HTTP {response.status_code} for {url}")
        return parse_metadata(response.text)

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
