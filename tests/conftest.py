"""Pytest configuration and fixtures."""

from datetime import date, datetime, time, timedelta
from typing import Optional

import pytest

from workout_scheduler.models.activity import Activity, ActivityType
from workout_scheduler.models.schedule import CalendarEvent, SchedulePreference, TimeSlot
from workout_scheduler.models.suggestions import AvailabilitySlot

# 2026-10-19 is a Monday (day_of_week 1 with 0=Sunday)
MONDAY = date(2026, 10, 19)
FIXED_NOW = datetime(2026, 10, 19, 6, 0)


@pytest.fixture
def monday() -> date:
    return MONDAY


@pytest.fixture
def fixed_clock():
    """Clock frozen at 06:00 on the reference Monday."""
    return lambda: FIXED_NOW


@pytest.fixture
def make_activity():
    """Factory for activities."""
    counter = {"n": 0}

    def _make(
        activity_type: ActivityType = ActivityType.RUNNING,
        when: datetime = datetime(2026, 10, 12, 7, 30),
        duration: int = 45,
        completed: bool = True,
        **kwargs,
    ) -> Activity:
        counter["n"] += 1
        return Activity(
            id=kwargs.pop("id", f"act-{counter['n']}"),
            type=activity_type,
            title=kwargs.pop("title", f"{activity_type.label} session"),
            date=when,
            duration=duration,
            completed=completed,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_event():
    """Factory for calendar busy blocks."""

    def _make(day: date, start: time, end: time, title: str = "Busy") -> CalendarEvent:
        return CalendarEvent(
            id=f"{day.isoformat()}-{start.strftime('%H%M')}",
            title=title,
            start_time=datetime.combine(day, start),
            end_time=datetime.combine(day, end),
        )

    return _make


@pytest.fixture
def make_slot():
    """Factory for availability slots."""

    def _make(
        day: date = MONDAY,
        start: time = time(11, 0),
        duration: int = 60,
        score: float = 1.0,
        end: Optional[time] = None,
    ) -> AvailabilitySlot:
        end = end or (datetime.combine(day, start) + timedelta(minutes=30)).time()
        return AvailabilitySlot(
            date=day, start_time=start, end_time=end, duration_minutes=duration, score=score
        )

    return _make


@pytest.fixture
def monday_preference() -> SchedulePreference:
    """Three workouts a week, Monday 08:00-10:00, running for 45 minutes."""
    return SchedulePreference(
        preferred_time_slots=[TimeSlot(day_of_week=1, start_time="08:00", end_time="10:00")],
        workout_durations={ActivityType.RUNNING: 45},
        days_per_week=3,
    )
