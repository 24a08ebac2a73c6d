"""Compact duration strings such as ``15m`` or ``24h``."""

import re

DURATION_REGEX = re.compile(r"^(\d+)([smhd])$")

UNIT_SECONDS = {
    "s": 1,
    "m": 60,
    "h": 3600,
    "d": 86400,
}


def parse_duration(value: str | int | None, default: int) -> int:
    """
    Convert a ``<digits><unit>`` duration into seconds.

    Integers are taken as seconds. ``None``, malformed strings and
    non-positive results fall back to ``default``.

    Example:
        >>> parse_duration("15m", default=86400)
        900
        >>> parse_duration("tomorrow", default=86400)
        86400
    """
    if value is None:
        return default

    if isinstance(value, int):
        return value if value > 0 else default

    match = DURATION_REGEX.fullmatch(value.strip())
    if not match:
        return default

    amount, unit = match.groups()
    seconds = int(amount) * UNIT_SECONDS[unit]
    return seconds if seconds > 0 else default
