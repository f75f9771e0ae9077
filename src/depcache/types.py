"""Core types for depcache."""

import re
from dataclasses import dataclass, field
from datetime import timedelta
from functools import lru_cache, total_ordering
from typing import Any

from packaging.version import InvalidVersion
from packaging.version import Version as PackagingVersion

_VERSION_TOKEN = re.compile(r"\d+|[A-Za-z]+")
_RELEASE_PREFIX = re.compile(r"^[vV]?(\d+(?:\.\d+)*)(.*)$")


def _natural_key(value: str) -> tuple[tuple[int, int | str], ...]:
    # Numeric runs sort before alphabetic runs at the same position.
    return tuple(
        (0, int(token)) if token.isdigit() else (1, token.lower())
        for token in _VERSION_TOKEN.findall(value)
    )


@lru_cache(maxsize=4096)
def _version_key(value: str) -> tuple[Any, ...]:
    """Sort key: PEP 440 order, Maven qualifiers as development releases.

    ``2.0.0-M1`` is not PEP 440, so it ranks as ``2.0.0.dev0`` and sorts
    below ``2.0.0-RC1`` (``2.0.0rc1``) and ``2.0.0``. Values without a
    numeric release sort first, naturally. The raw value breaks ties.
    """
    try:
        return (1, PackagingVersion(value), (), value)
    except InvalidVersion:
        pass
    match = _RELEASE_PREFIX.match(value)
    if match is None:
        return (0, _natural_key(value), value)
    release, qualifier = match.groups()
    return (1, PackagingVersion(release + ".dev0"), _natural_key(qualifier), value)


@total_ordering
@dataclass(frozen=True, slots=True)
class Version:
    """A single release identifier ("1.9" < "1.10", "2.0-RC1" < "2.0")."""

    value: str

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return _version_key(self.value) < _version_key(other.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Resolver:
    """A remote source of version information."""

    name: str
    location: str

    @property
    def path(self) -> str:
        """Stable identifier used as the first segment of cache keys."""
        location = self.location
        for marker in ("[", "("):
            location = location.split(marker, 1)[0]
        return location.rstrip("/").replace(":", "")


@dataclass(frozen=True, slots=True)
class Dependency:
    """A library identified by group, artifact and optional qualifiers."""

    group_id: str
    artifact_id: str
    cross_name: str | None = None
    language_version: str | None = None
    build_tool_version: str | None = None

    def __post_init__(self) -> None:
        if not self.group_id or not self.artifact_id:
            raise ValueError("group_id and artifact_id must not be empty")
        for name in (
            "group_id",
            "artifact_id",
            "cross_name",
            "language_version",
            "build_tool_version",
        ):
            value = getattr(self, name)
            if value is not None and "/" in value:
                raise ValueError(f"{name} must not contain '/': {value!r}")

    @property
    def artifact_cross_name(self) -> str:
        return self.cross_name or self.artifact_id

    @property
    def module_name(self) -> str:
        """Artifact cross name followed by the qualifier suffixes."""
        name = self.artifact_cross_name
        if self.language_version is not None:
            name += "_" + self.language_version
        if self.build_tool_version is not None:
            name += "_" + self.build_tool_version
        return name


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """Versions observed for one dependency on one resolver."""

    updated_at: int  # Unix timestamp ms
    versions: list[Version] = field(default_factory=list)
    last_error: str | None = None

    def age(self, now: int) -> int:
        """Milliseconds elapsed since the entry was written."""
        return now - self.updated_at

    @property
    def stale_factor(self) -> int:
        """Multiplier for the freshness window.

        An erroring resolver that has never produced versions is retried
        four times less often.
        """
        if self.last_error is not None and not self.versions:
            return 4
        return 1


# Duration type alias
Duration = str | int | timedelta  # "30s", "5m", "2h", "1d", milliseconds or timedelta
