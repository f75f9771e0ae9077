"""File-system store writing one JSON document per key."""

from __future__ import annotations

import asyncio
import os
import tempfile
from pathlib import Path

from depcache.codec import decode_entry, encode_entry
from depcache.types import CacheEntry

ENTRY_FILENAME = "versions.json"


class AsyncJsonFileStore:
    """Stores each entry at ``<root>/<key>/versions.json``.

    Keys contain ``/`` and map onto nested directories. File I/O runs in
    a worker thread.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def _entry_path(self, key: str) -> Path:
        path = (self.root / key / ENTRY_FILENAME).resolve()
        if not path.is_relative_to(self.root.resolve()):
            raise ValueError(f"Key escapes store root: {key!r}")
        return path

    def _read(self, key: str) -> CacheEntry | None:
        path = self._entry_path(key)
        try:
            data = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        return decode_entry(data)

    def _write(self, key: str, entry: CacheEntry) -> None:
        path = self._entry_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(encode_entry(entry) + "\n")
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    async def get(self, key: str) -> CacheEntry | None:
        """Get a cache entry by key."""
        return await asyncio.to_thread(self._read, key)

    async def put(self, key: str, entry: CacheEntry) -> None:
        """Store a cache entry."""
        await asyncio.to_thread(self._write, key, entry)
