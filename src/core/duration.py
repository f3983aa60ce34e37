"""Duration string parsing for token lifetimes.

Token expiry settings are written as short duration strings ("15m", "7d"),
the same notation used in deployment env files.

Supported units:
    s: seconds
    m: minutes
    h: hours
    d: days

A bare integer is read as seconds.
"""

import re
from datetime import timedelta

_DURATION_PATTERN = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")

_UNIT_SECONDS = {
    "": 1,
    "s": 1,
    "m": 60,
    "h": 60 * 60,
    "d": 24 * 60 * 60,
}


def parse_duration(value: str) -> timedelta:
    """Parse a duration string into a timedelta.

    Args:
        value: Duration such as "15m", "7d", "3600s" or "3600".

    Returns:
        Equivalent timedelta.

    Raises:
        ValueError: If the string is not a positive duration.

    Example:
        >>> parse_duration("15m")
        datetime.timedelta(seconds=900)
        >>> parse_duration("7d").days
        7
    """
    match = _DURATION_PATTERN.match(value.lower())
    if match is None:
        raise ValueError(f"Invalid duration: {value!r} (expected e.g. '15m', '7d')")

    amount = int(match.group(1))
    if amount <= 0:
        raise ValueError(f"Duration must be positive: {value!r}")

    return timedelta(seconds=amount * _UNIT_SECONDS[match.group(2)])
