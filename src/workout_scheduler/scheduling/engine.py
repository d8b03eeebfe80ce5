"""
Workout suggestion engine.

Runs the full pipeline for one user: pattern analysis over the whole
history, slot discovery per day, scoring per activity type, then ranking
and truncation. Every call is a pure function of its inputs apart from the
``created_at`` stamp, which comes from the injected clock.

Example usage:
    service = SchedulingService()
    suggestions = service.generate_suggestions(
        activities, preferences, calendar_events, days_ahead=7,
        start_date=date(2026, 10, 19),
    )
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from ..models.activity import Activity, ActivityType
from ..models.schedule import CalendarEvent, SchedulePreference
from ..models.suggestions import WorkoutSuggestion
from .availability import (
    DEFAULT_WORKING_HOURS_END,
    DEFAULT_WORKING_HOURS_START,
    find_available_slots,
)
from .patterns import analyze_user_patterns
from .reasoning import generate_reasoning
from .scoring import score_slot

logger = logging.getLogger(__name__)

DEFAULT_ACTIVITY_TYPES = (ActivityType.RUNNING, ActivityType.GYM, ActivityType.YOGA)
DEFAULT_TARGET_DURATION_MIN = 45
MIN_SUGGESTION_SCORE = 0.4
DEFAULT_DAYS_AHEAD = 7
WEEKLY_PLAN_DAYS = 7


def suggestion_id(day: date, start: time, activity_type: ActivityType) -> str:
    """Deterministic id: ``{yyyy-MM-dd}-{HH:MM}-{type}``."""
    return f"{day.isoformat()}-{start.strftime('%H:%M')}-{activity_type.value}"


def candidate_activity_types(preferences: SchedulePreference) -> List[ActivityType]:
    """Types to place: the user's configured durations, or a default trio."""
    if preferences.preferred_time_slots:
        return list(preferences.workout_durations.keys())
    return list(DEFAULT_ACTIVITY_TYPES)


def target_duration(preferences: SchedulePreference, activity_type: ActivityType) -> int:
    """Target minutes for a type, falling back to 45."""
    return preferences.workout_durations.get(activity_type) or DEFAULT_TARGET_DURATION_MIN


class SchedulingService:
    """
    Stateless suggestion engine.

    Holds only its configuration: the clock used for creation stamps and
    the working-hours bounds for days without preferred windows.
    """

    def __init__(
        self,
        clock: Optional[Callable[[], datetime]] = None,
        working_hours_start: time = DEFAULT_WORKING_HOURS_START,
        working_hours_end: time = DEFAULT_WORKING_HOURS_END,
    ) -> None:
        self._clock = clock or datetime.now
        self.working_hours_start = working_hours_start
        self.working_hours_end = working_hours_end

    def generate_suggestions(
        self,
        activities: Sequence[Activity],
        preferences: SchedulePreference,
        calendar_events: Iterable[CalendarEvent],
        days_ahead: int = DEFAULT_DAYS_AHEAD,
        start_date: Optional[date] = None,
    ) -> List[WorkoutSuggestion]:
        """
        Produce ranked workout suggestions for the coming days.

        Args:
            activities: The user's full activity history (and planned workouts).
            preferences: The user's schedule preferences.
            calendar_events: Busy blocks over any horizon; only those starting
                on a scanned day are considered for it.
            days_ahead: Number of days to scan, starting at ``start_date``.
            start_date: First day to scan; defaults to the clock's date.

        Returns:
            At most ``days_per_week * 2`` suggestions, best score first.
        """
        activities = list(activities)
        calendar_events = list(calendar_events)
        created_at = self._clock()
        first_day = start_date or created_at.date()

        patterns = analyze_user_patterns(activities)
        activity_types = candidate_activity_types(preferences)

        by_id: Dict[str, WorkoutSuggestion] = {}

        for offset in range(days_ahead):
            day = first_day + timedelta(days=offset)

            day_events = [e for e in calendar_events if e.start_time.date() == day]
            slots = find_available_slots(
                day,
                day_events,
                preferences,
                self.working_hours_start,
                self.working_hours_end,
            )

            existing = [a for a in activities if a.day == day]
            if len(existing) >= preferences.days_per_week:
                logger.debug("%s already has %d workouts, skipping", day, len(existing))
                continue

            for activity_type in activity_types:
                duration = target_duration(preferences, activity_type)
                pattern = patterns.get(activity_type)

                for slot in slots:
                    if slot.duration_minutes < duration:
                        continue

                    score = score_slot(slot, patterns, activity_type, existing)
                    if score < MIN_SUGGESTION_SCORE:
                        continue

                    key = suggestion_id(day, slot.start_time, activity_type)
                    previous = by_id.get(key)
                    if previous is not None and previous.score >= score:
                        continue

                    by_id[key] = WorkoutSuggestion(
                        id=key,
                        suggested_date=day,
                        suggested_time=slot.start_time,
                        duration=duration,
                        activity_type=activity_type,
                        score=score,
                        reasoning=generate_reasoning(slot, activity_type, pattern, len(existing)),
                        accepted=False,
                        created_at=created_at,
                    )

        ranked = sorted(by_id.values(), key=lambda s: s.score, reverse=True)
        limit = preferences.days_per_week * 2
        logger.debug("Generated %d suggestions, returning %d", len(ranked), min(len(ranked), limit))
        return ranked[:limit]

    def optimize_weekly_schedule(
        self,
        activities: Sequence[Activity],
        preferences: SchedulePreference,
        calendar_events: Iterable[CalendarEvent],
        start_date: Optional[date] = None,
    ) -> List[WorkoutSuggestion]:
        """
        Build a one-workout-per-day plan for the next 7 days.

        Takes the best suggestion on each date, in score order, until
        ``days_per_week`` distinct dates are chosen.
        """
        suggestions = self.generate_suggestions(
            activities, preferences, calendar_events,
            days_ahead=WEEKLY_PLAN_DAYS, start_date=start_date,
        )

        week: List[WorkoutSuggestion] = []
        used_dates = set()
        for suggestion in suggestions:
            if len(week) >= preferences.days_per_week:
                break
            if suggestion.suggested_date in used_dates:
                continue
            week.append(suggestion)
            used_dates.add(suggestion.suggested_date)

        return week
