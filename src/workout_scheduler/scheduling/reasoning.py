"""Human-readable explanations attached to workout suggestions."""

from typing import List, Optional

from ..models.activity import ActivityType
from ..models.suggestions import ActivityPattern, AvailabilitySlot

FALLBACK_REASON = "Good time slot based on your schedule"
RELIABLE_COMPLETION_RATE = 0.7
EXTENDED_SLOT_MIN = 90


def _period_reason(hour: int) -> Optional[str]:
    if 6 <= hour <= 9:
        return "Morning workout to start your day energized"
    if 12 <= hour <= 14:
        return "Midday session to break up your day"
    if 17 <= hour <= 19:
        return "Evening workout after work hours"
    return None


def _percent(rate: float) -> int:
    # half-up
    return int(rate * 100 + 0.5)


def generate_reasoning(
    slot: AvailabilitySlot,
    activity_type: ActivityType,
    pattern: Optional[ActivityPattern] = None,
    workouts_today: int = 0,
) -> str:
    """
    Explain why a slot is being suggested.

    Clauses, in order: time-of-day period, a strong completion record for
    this type, the day being still free, and an extended open window.
    """
    reasons: List[str] = []

    period = _period_reason(slot.start_time.hour)
    if period:
        reasons.append(period)

    if pattern is not None and pattern.completion_rate > RELIABLE_COMPLETION_RATE:
        reasons.append(
            f"You have a {_percent(pattern.completion_rate)}% completion rate "
            f"for {activity_type.value}"
        )

    if workouts_today == 0:
        reasons.append("First workout of the day")

    if slot.duration_minutes >= EXTENDED_SLOT_MIN:
        reasons.append("Extended time slot available for a longer session")

    return ". ".join(reasons) or FALLBACK_REASON
