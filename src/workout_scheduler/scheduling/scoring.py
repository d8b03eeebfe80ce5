"""Slot scoring: how good a candidate slot is for one activity type."""

from typing import Dict, Iterable, Optional

from ..models.activity import Activity, ActivityType
from ..models.suggestions import ActivityPattern, AvailabilitySlot

# Historical affinity
HABIT_HOUR_TOLERANCE = 1
HABIT_MATCH_BONUS = 0.3
COMPLETION_RATE_WEIGHT = 0.2

# Same-day load
FREE_DAY_BONUS = 0.2
BUSY_DAY_PENALTY = 0.3
BUSY_DAY_THRESHOLD = 2

# Time of day (inclusive hour ranges)
MORNING_HOURS = (6, 9)
MORNING_BONUS = 0.15
EVENING_HOURS = (17, 19)
EVENING_BONUS = 0.10


def _in_hours(hour: int, hours: tuple) -> bool:
    return hours[0] <= hour <= hours[1]


def habit_adjustment(slot: AvailabilitySlot, pattern: Optional[ActivityPattern]) -> float:
    """Bonus for matching the user's historical start times and reliability."""
    if pattern is None or not pattern.preferred_times:
        return 0.0

    adjustment = 0.0
    slot_hour = slot.start_time.hour
    if any(abs(t.hour - slot_hour) <= HABIT_HOUR_TOLERANCE for t in pattern.preferred_times):
        adjustment += HABIT_MATCH_BONUS
    adjustment += pattern.completion_rate * COMPLETION_RATE_WEIGHT
    return adjustment


def load_adjustment(slot: AvailabilitySlot, existing_workouts: Iterable[Activity]) -> float:
    """Favor empty days, penalize days that already hold two or more workouts."""
    same_day = sum(1 for workout in existing_workouts if workout.day == slot.date)
    if same_day == 0:
        return FREE_DAY_BONUS
    if same_day >= BUSY_DAY_THRESHOLD:
        return -BUSY_DAY_PENALTY
    return 0.0


def time_of_day_adjustment(slot: AvailabilitySlot) -> float:
    """Small bonus for early-morning and after-work starts."""
    hour = slot.start_time.hour
    if _in_hours(hour, MORNING_HOURS):
        return MORNING_BONUS
    if _in_hours(hour, EVENING_HOURS):
        return EVENING_BONUS
    return 0.0


def score_slot(
    slot: AvailabilitySlot,
    patterns: Dict[ActivityType, ActivityPattern],
    activity_type: ActivityType,
    existing_workouts: Iterable[Activity],
) -> float:
    """
    Combine baseline, habit, load and time-of-day signals into one score.

    Args:
        slot: Candidate slot with its baseline score.
        patterns: Output of ``analyze_user_patterns``.
        activity_type: Activity type being placed.
        existing_workouts: The user's activities; only those on the slot's
            date affect the load adjustment.

    Returns:
        Score clamped into [0, 1].
    """
    score = slot.score
    score += habit_adjustment(slot, patterns.get(activity_type))
    score += load_adjustment(slot, existing_workouts)
    score += time_of_day_adjustment(slot)
    return max(0.0, min(1.0, score))
