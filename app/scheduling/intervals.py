import re

MINUTES_PER_DAY = 24 * 60

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


class InvalidTimeError(ValueError):
    """Raised for strings that are not a 24-hour "HH:MM" time."""


def is_valid_time(value: str) -> bool:
    return isinstance(value, str) and _TIME_RE.match(value) is not None


def time_to_minutes(value: str) -> int:
    """Convert "HH:MM" to minutes since midnight."""
    match = _TIME_RE.match(value) if isinstance(value, str) else None
    if match is None:
        raise InvalidTimeError(f"Invalid time {value!r}, expected HH:MM")
    return int(match.group(1)) * 60 + int(match.group(2))


def minutes_to_time(minutes: int) -> str:
    """Format minutes since midnight as "HH:MM". Values past 23:59 are not wrapped."""
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def add_minutes(value: str, minutes: int) -> str:
    """End time of a booking starting at `value` and lasting `minutes`."""
    return minutes_to_time(time_to_minutes(value) + minutes)


def contains(outer_start: int, outer_end: int, inner_start: int, inner_end: int) -> bool:
    # Strict containment: partial overlap is not enough.
    return outer_start <= inner_start and inner_end <= outer_end


def overlaps(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    """Half-open [start, end) ranges share at least one minute."""
    return a_start < b_end and b_start < a_end
