"""Time sources."""

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Supplies the current time in milliseconds since the Unix epoch."""

    async def now(self) -> int:
        """Get the current time in milliseconds."""
        ...


class SystemClock:
    """Wall-clock time from the operating system."""

    async def now(self) -> int:
        """Get the current wall-clock time in milliseconds."""
        return int(time.time() * 1000)
