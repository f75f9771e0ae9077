"""Duration parsing utilities."""

import re
from datetime import timedelta

from depcache.types import Duration

_DURATION_PATTERN = re.compile(r"^(\d+)(ms|s|m|h|d)$")
_UNITS: dict[str, int] = {
    "ms": 1,
    "s": 1000,
    "m": 60_000,
    "h": 3_600_000,
    "d": 86_400_000,
}


def parse_duration(duration: Duration) -> int:
    """Parse a duration to milliseconds. Passthrough if already int."""
    if isinstance(duration, timedelta):
        millis = int(duration.total_seconds() * 1000)
    elif isinstance(duration, int) and not isinstance(duration, bool):
        millis = duration
    elif isinstance(duration, str):
        match = _DURATION_PATTERN.match(duration)
        if not match:
            raise ValueError(f"Invalid duration: {duration!r}")
        value, unit = match.groups()
        millis = int(value) * _UNITS[unit]
    else:
        raise ValueError(f"Invalid duration: {duration!r}")

    if millis < 0:
        raise ValueError(f"Invalid duration: {duration!r} is negative")
    return millis
