"""Store key construction."""

from depcache.types import Dependency, Resolver


def cache_key(dependency: Dependency, resolver: Resolver) -> str:
    """Build the store key for a dependency on a resolver.

    Example: ``https//repo1.maven.org/maven2/org/typelevel/cats-core_2.13``

    The key mirrors the repository layout, so pairs that address the same
    artifact location share a key: ``lib_2.13`` and ``lib`` with language
    version ``2.13``, or resolver ``https://h/a`` with group ``b`` and
    resolver ``https://h`` with group ``a.b``. Such pairs read the same
    metadata and share one entry.
    """
    return (
        resolver.path
        + "/"
        + dependency.group_id.replace(".", "/")
        + "/"
        + dependency.module_name
    )
