"""
Open-slot discovery for a single day.

Two modes:
- The user declared preferred windows for this weekday: walk each window in
  30-minute steps, offering every conflict-free 30-minute start with a
  baseline score of 1.0.
- No windows for this weekday: scan the working day in 30-minute steps with
  60-minute checks, offering conflict-free starts at a weaker 0.5 baseline.
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import Iterable, List, Sequence

from ..models.schedule import CalendarEvent, SchedulePreference, TimeSlot
from ..models.suggestions import AvailabilitySlot
from ..utils.time_utils import Interval, at, day_of_week, minutes_between

logger = logging.getLogger(__name__)

STEP = timedelta(minutes=30)
PREFERRED_CHECK_WINDOW = timedelta(minutes=30)
GENERIC_CHECK_WINDOW = timedelta(minutes=60)
MAX_SLOT_DURATION_MIN = 120

PREFERRED_BASELINE_SCORE = 1.0
GENERIC_BASELINE_SCORE = 0.5

DEFAULT_WORKING_HOURS_START = time(6, 0)
DEFAULT_WORKING_HOURS_END = time(22, 0)


def has_conflict(candidate: Interval, busy: Sequence[Interval]) -> bool:
    """Check a candidate window against every busy interval."""
    return any(candidate.overlaps(interval) for interval in busy)


def _busy_intervals(events: Iterable[CalendarEvent]) -> List[Interval]:
    return [Interval(event.start_time, event.end_time) for event in events]


def _scan(
    day: date,
    window_start: datetime,
    window_end: datetime,
    check_window: timedelta,
    busy: Sequence[Interval],
    baseline: float,
) -> List[AvailabilitySlot]:
    """Step through one window, emitting a slot at every conflict-free start."""
    slots: List[AvailabilitySlot] = []
    current = window_start

    while current < window_end:
        check_end = current + check_window
        if check_end > window_end:
            break

        if not has_conflict(Interval(current, check_end), busy):
            slots.append(
                AvailabilitySlot(
                    date=day,
                    start_time=current.time(),
                    end_time=check_end.time(),
                    duration_minutes=min(
                        minutes_between(current, window_end), MAX_SLOT_DURATION_MIN
                    ),
                    score=baseline,
                )
            )

        current += STEP

    return slots


def find_preferred_slots(
    day: date,
    windows: Iterable[TimeSlot],
    events: Iterable[CalendarEvent],
) -> List[AvailabilitySlot]:
    """Open 30-minute starts inside the user's declared windows for ``day``."""
    busy = _busy_intervals(events)
    slots: List[AvailabilitySlot] = []
    for window in windows:
        slots.extend(
            _scan(
                day,
                at(day, window.start_time),
                at(day, window.end_time),
                PREFERRED_CHECK_WINDOW,
                busy,
                PREFERRED_BASELINE_SCORE,
            )
        )
    return slots


def find_generic_slots(
    day: date,
    events: Iterable[CalendarEvent],
    working_hours_start: time = DEFAULT_WORKING_HOURS_START,
    working_hours_end: time = DEFAULT_WORKING_HOURS_END,
) -> List[AvailabilitySlot]:
    """Open hour-long starts across the working day for ``day``."""
    return _scan(
        day,
        at(day, working_hours_start),
        at(day, working_hours_end),
        GENERIC_CHECK_WINDOW,
        _busy_intervals(events),
        GENERIC_BASELINE_SCORE,
    )


def find_available_slots(
    day: date,
    events: Iterable[CalendarEvent],
    preferences: SchedulePreference,
    working_hours_start: time = DEFAULT_WORKING_HOURS_START,
    working_hours_end: time = DEFAULT_WORKING_HOURS_END,
) -> List[AvailabilitySlot]:
    """
    Enumerate candidate slots for one date.

    Args:
        day: The calendar date to search.
        events: Busy blocks for that date.
        preferences: The user's schedule preferences.
        working_hours_start: Start of the generic scan window.
        working_hours_end: End of the generic scan window.

    Returns:
        Slots in chronological order per window; may be empty.
    """
    events = list(events)
    windows = preferences.slots_for_day(day_of_week(day))

    if not windows:
        slots = find_generic_slots(day, events, working_hours_start, working_hours_end)
        logger.debug("%s: no preferred windows, %d generic slots", day, len(slots))
        return slots

    slots = find_preferred_slots(day, windows, events)
    logger.debug("%s: %d slots in %d preferred windows", day, len(slots), len(windows))
    return slots
