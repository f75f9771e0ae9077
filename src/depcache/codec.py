"""JSON encoding of cache entries."""

import json
from typing import Any

from depcache.types import CacheEntry, Version

FORMAT_VERSION = 1


def encode_entry(entry: CacheEntry) -> str:
    """Serialize a cache entry to JSON."""
    return json.dumps(
        {
            "format": FORMAT_VERSION,
            "updatedAt": entry.updated_at,
            "versions": [version.value for version in entry.versions],
            "maybeError": entry.last_error,
        }
    )


def decode_entry(data: bytes | str) -> CacheEntry:
    """Deserialize JSON to a cache entry.

    Documents without a ``format`` field are read as format 1.
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    try:
        obj: Any = json.loads(data)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Cache entry is not valid JSON: {exc}") from exc
    if not isinstance(obj, dict):
        raise ValueError("Cache entry must be a JSON object")

    fmt = obj.get("format", FORMAT_VERSION)
    if fmt != FORMAT_VERSION:
        raise ValueError(f"Unsupported cache entry format: {fmt!r}")

    try:
        updated_at = obj["updatedAt"]
        versions = obj["versions"]
        error = obj.get("maybeError")
    except KeyError as exc:
        raise ValueError(f"Cache entry is missing field {exc}") from exc
    if not isinstance(updated_at, int) or isinstance(updated_at, bool):
        raise ValueError(f"Invalid updatedAt: {updated_at!r}")
    if not isinstance(versions, list) or not all(
        isinstance(v, str) for v in versions
    ):
        raise ValueError(f"Invalid versions: {versions!r}")
    if error is not None and not isinstance(error, str):
        raise ValueError(f"Invalid maybeError: {error!r}")

    return CacheEntry(
        updated_at=updated_at,
        versions=[Version(v) for v in versions],
        last_error=error,
    )
