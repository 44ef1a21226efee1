"""Human-readable duration parsing.

Turns maximum-age expressions such as ``7d``, ``12h``, ``30minutes`` or
the clock-style ``1.02:30:00`` into ``timedelta`` values.

Unparseable input yields :data:`INVALID_DURATION` rather than raising,
so callers can tell "no usable threshold" apart from a zero age.
"""

import math
import re
from datetime import timedelta

# Sentinel for "no valid age threshold supplied"
INVALID_DURATION: timedelta = timedelta.max

# Longest suffix first so "days" is never read as a number ending in "d"
_UNIT_SUFFIXES: tuple[tuple[str, str], ...] = (
    ("minutes", "minutes"),
    ("hours", "hours"),
    ("days", "days"),
    ("d", "days"),
    ("h", "hours"),
    ("m", "minutes"),
)

# [d.]hh:mm[:ss[.fraction]]
# No leading sign: a negative age would make every file eligible
_CLOCK_PATTERN = re.compile(
    r"^(?:(?P<days>\d+)\.)?"
    r"(?P<hours>\d{1,2}):(?P<minutes>\d{1,2})"
    r"(?::(?P<seconds>\d{1,2})(?:\.(?P<fraction>\d{1,7}))?)?$"
)

_DAYS_PATTERN = re.compile(r"^\d+$")


def parse_duration(token: str) -> timedelta:
    """Parse a duration expression.

    Recognized forms (case-insensitive, surrounding whitespace ignored):

    - ``<number>d`` / ``<number>days``
    - ``<number>h`` / ``<number>hours``
    - ``<number>m`` / ``<number>minutes``
    - ``[days.]hours:minutes[:seconds[.fraction]]`` or a bare day count

    The numeric portion of a suffixed value may be fractional,
    e.g. ``1.5d`` is 36 hours.

    Args:
        token: Duration expression to parse.

    Returns:
        The parsed duration, or INVALID_DURATION if the token is empty,
        malformed, negative, or out of range.
    """
    text = token.strip()
    if not text:
        return INVALID_DURATION

    lowered = text.lower()
    for suffix, unit in _UNIT_SUFFIXES:
        if lowered.endswith(suffix):
            return _parse_with_unit(text[: -len(suffix)], unit)

    return _parse_clock(text)


def is_valid_duration(value: timedelta) -> bool:
    """Check whether a parsed duration is usable as an age threshold."""
    return value != INVALID_DURATION


def _parse_with_unit(number: str, unit: str) -> timedelta:
    """Build a timedelta from a numeric string and a timedelta keyword."""
    try:
        amount = float(number)
    except ValueError:
        return INVALID_DURATION

    # Negative amounts are rejected; a negative age would make every file eligible
    if not math.isfinite(amount) or amount < 0:
        return INVALID_DURATION

    try:
        return timedelta(**{unit: amount})
    except OverflowError:
        return INVALID_DURATION


def _parse_clock(text: str) -> timedelta:
    """Parse a clock-style duration literal or a bare day count."""
    try:
        if _DAYS_PATTERN.match(text):
            return timedelta(days=int(text))

        match = _CLOCK_PATTERN.match(text)
        if match is None:
            return INVALID_DURATION

        hours = int(match["hours"])
        minutes = int(match["minutes"])
        seconds = int(match["seconds"] or 0)
        if hours > 23 or minutes > 59 or seconds > 59:
            return INVALID_DURATION

        fraction = float(f"0.{match['fraction']}") if match["fraction"] else 0.0

        return timedelta(
            days=int(match["days"] or 0),
            hours=hours,
            minutes=minutes,
            seconds=seconds + fraction,
        )
    except (OverflowError, ValueError):
        return INVALID_DURATION
