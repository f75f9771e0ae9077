"""End-to-end tests: VersionsCache with the file store and Maven client."""

import httpx
import respx

from depcache import (
    AsyncJsonFileStore,
    Dependency,
    MavenMetadataClient,
    Resolver,
    Version,
    VersionsCache,
)

from conftest import FakeClock

CENTRAL = Resolver("public", "https://repo1.maven.org/maven2/")
MIRROR = Resolver("mirror", "https://mirror.example.com/maven2")
DEPENDENCY = Dependency("org.example", "lib")


def metadata(*versions: str) -> str:
    items = "".join(f"<version>{v}</version>" for v in versions)
    return f"<metadata><versioning><versions>{items}</versions></versioning></metadata>"


@respx.mock
async def test_cache_survives_new_instance(tmp_path, clock: FakeClock) -> None:
    """Test that a second cache over the same directory reuses the entries."""
    central = respx.get(
        "https://repo1.maven.org/maven2/org/example/lib/maven-metadata.xml"
    ).mock(return_value=httpx.Response(200, text=metadata("1.0", "1.2")))
    mirror = respx.get(
        "https://mirror.example.com/maven2/org/example/lib/maven-metadata.xml"
    ).mock(return_value=httpx.Response(200, text=metadata("1.1")))

    client = MavenMetadataClient()
    try:
        first = VersionsCache(AsyncJsonFileStore(tmp_path), client, clock=clock)
        assert await first.get_versions(DEPENDENCY, [CENTRAL, MIRROR]) == [
            Version("1.0"),
            Version("1.1"),
            Version("1.2"),
        ]

        second = VersionsCache(AsyncJsonFileStore(tmp_path), client, clock=clock)
        assert len(await second.get_versions(DEPENDENCY, [CENTRAL, MIRROR])) == 3
    finally:
        await client.aclose()

    assert central.call_count == 1
    assert mirror.call_count == 1


@respx.mock
async def test_outage_serves_last_known_versions(tmp_path, clock: FakeClock) -> None:
    """Test that a repository outage falls back to the stored versions."""
    route = respx.get(
        "https://repo1.maven.org/maven2/org/example/lib/maven-metadata.xml"
    )
    route.mock(return_value=httpx.Response(200, text=metadata("1.0")))

    client = MavenMetadataClient()
    try:
        cache = VersionsCache(
            AsyncJsonFileStore(tmp_path), client, clock=clock, default_ttl="1h"
        )
        await cache.get_versions(DEPENDENCY, [CENTRAL])

        clock.advance(3_600_001)
        route.mock(return_value=httpx.Response(503))
        assert await cache.get_versions(DEPENDENCY, [CENTRAL]) == [Version("1.0")]
    finally:
        await client.aclose()

    assert route.call_count == 2
