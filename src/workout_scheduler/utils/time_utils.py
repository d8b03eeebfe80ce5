"""Wall-clock time helpers shared by the models and the scheduling engine.

Times of day travel as ``HH:MM`` strings at the edges of the system and as
``datetime.time`` values inside it. Timestamps are wall-clock local time;
timezone-aware values are converted to the local zone and made naive.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Union

_HHMM_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def parse_hhmm(value: Union[str, time]) -> time:
    """Parse an ``HH:MM`` string into a time.

    Raises:
        ValueError: If the value is not a valid 24-hour ``HH:MM`` string.
    """
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0, tzinfo=None)
    match = _HHMM_RE.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise ValueError(f"Invalid time {value!r}, expected HH:MM")
    return time(int(match.group(1)), int(match.group(2)))


def format_hhmm(value: time) -> str:
    """Format a time as ``HH:MM``."""
    return value.strftime("%H:%M")


def to_local_naive(value: datetime) -> datetime:
    """Return ``value`` as naive local wall-clock time."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def at(day: date, clock_time: time) -> datetime:
    """Combine a calendar date and a time of day."""
    return datetime.combine(day, clock_time)


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from ``start`` to ``end``."""
    return int((end - start) / timedelta(minutes=1))


@dataclass(frozen=True)
class Interval:
    """A half-open wall-clock interval ``[start, end)``."""

    start: datetime
    end: datetime

    def overlaps(self, other: "Interval") -> bool:
        """Check whether this (candidate) interval collides with ``other``.

        A collision is this interval's start or end falling strictly inside
        ``other``, or this interval containing ``other`` (bounds inclusive).
        Intervals that merely touch do not collide.
        """
        starts_inside = other.start < self.start < other.end
        ends_inside = other.start < self.end < other.end
        contains = self.start <= other.start and self.end >= other.end
        return starts_inside or ends_inside or contains


def day_of_week(day: date) -> int:
    """Day index with 0=Sunday .. 6=Saturday."""
    return (day.weekday() + 1) % 7
