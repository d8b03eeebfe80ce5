"""Weekly progress summary over completed activities."""

from datetime import date, timedelta
from typing import Iterable

from ..models.activity import Activity, WeeklyStats


def week_start_for(day: date) -> date:
    """Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def summarize_week(
    activities: Iterable[Activity],
    week_start: date,
    weekly_target: int,
) -> WeeklyStats:
    """
    Totals for the completed activities in the Monday-based week.

    ``week_progress`` is completed workouts against ``weekly_target``,
    as a percentage capped at 100.
    """
    week_end = week_start + timedelta(days=7)
    done = [a for a in activities if a.completed and week_start <= a.day < week_end]

    progress = (len(done) / weekly_target) * 100 if weekly_target > 0 else 0.0
    return WeeklyStats(
        week_start=week_start,
        activities_completed=len(done),
        total_duration=sum(a.duration for a in done),
        total_distance=sum(a.distance or 0.0 for a in done),
        total_calories=sum(a.calories or 0 for a in done),
        week_progress=min(progress, 100.0),
    )
