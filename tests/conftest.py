"""Shared pytest fixtures."""

import pytest

from depcache import (
    AsyncMemoryStore,
    Dependency,
    Resolver,
    ResolverError,
    Version,
)


class FakeClock:
    """Clock returning a manually advanced time."""

    def __init__(self, now: int = 1_000_000) -> None:
        self.current = now

    async def now(self) -> int:
        return self.current

    def advance(self, millis: int) -> None:
        self.current += millis


class FakeVersionsClient:
    """Versions client answering from a per-resolver table."""

    def __init__(self) -> None:
        self.responses: dict[str, list[str] | Exception] = {}
        self.calls: list[tuple[Dependency, Resolver]] = []

    def respond(self, resolver: Resolver, result: list[str] | Exception) -> None:
        self.responses[resolver.name] = result

    async def fetch_versions(
        self, dependency: Dependency, resolver: Resolver
    ) -> list[Version]:
        self.calls.append((dependency, resolver))
        result = self.responses.get(resolver.name, ResolverError("not found"))
        if isinstance(result, Exception):
            raise result
        return [Version(v) for v in result]


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock for each test."""
    return FakeClock()


@pytest.fixture
def client() -> FakeVersionsClient:
    """Create a fake versions client for each test."""
    return FakeVersionsClient()


@pytest.fixture
def store() -> AsyncMemoryStore:
    """Create a fresh AsyncMemoryStore for each test."""
    return AsyncMemoryStore()


@pytest.fixture
def dependency() -> Dependency:
    """A typical cross-built dependency."""
    return Dependency("org.typelevel", "cats-core", cross_name="cats-core_2.13")


@pytest.fixture
def central() -> Resolver:
    """Maven Central resolver."""
    return Resolver("public", "https://repo1.maven.org/maven2/")


@pytest.fixture
def internal() -> Resolver:
    """A second resolver."""
    return Resolver("internal", "https://nexus.example.com/repository/maven/")
