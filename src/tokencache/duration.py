"""Duration parsing for max_age policies.

Every duration resolves to whole milliseconds added to the clock at fetch
completion. A result of zero or less yields an entry that is already expired,
so the value is handed to the waiting callers but never served from cache.
"""

import math
import re

from tokencache.types import Duration

_DURATION_PATTERN = re.compile(r"^(\d+)(ms|s|m|h|d)$")
_UNITS: dict[str, int] = {
    "ms": 1,
    "s": 1000,
    "m": 60_000,
    "h": 3_600_000,
    "d": 86_400_000,
}


def parse_duration(duration: Duration) -> int:
    """Convert a duration to integer milliseconds.

    Accepts ``"<digits><unit>"`` strings (ms, s, m, h, d) or a number of
    milliseconds. Floats are floored, so ``99.9`` becomes ``99``; negative
    numbers pass through and mean "already expired".

    Raises:
        TypeError: for bools and anything that is not a str, int or float
        ValueError: for malformed strings and non-finite floats
    """
    if isinstance(duration, bool):
        raise TypeError(f"Invalid duration type: {type(duration).__name__}")
    if isinstance(duration, int):
        return duration
    if isinstance(duration, float):
        if not math.isfinite(duration):
            raise ValueError(f"Invalid duration: {duration!r}")
        return math.floor(duration)
    if not isinstance(duration, str):
        raise TypeError(f"Invalid duration type: {type(duration).__name__}")

    match = _DURATION_PATTERN.match(duration)
    if match is None:
        raise ValueError(f"Invalid duration: {duration!r}")

    amount, unit = match.groups()
    return int(amount) * _UNITS[unit]
