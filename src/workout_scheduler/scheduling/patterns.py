"""
Historical pattern analysis for workout scheduling.

Instead of asking the user when they like to train, the scheduler reads it
from their activity log: for each activity type with at least one completed
workout it records the start times of those workouts, how reliably that type
gets completed, and how long the sessions usually last.
"""

import logging
import statistics
from collections import defaultdict
from typing import Dict, Iterable, List

from ..models.activity import Activity, ActivityType
from ..models.suggestions import ActivityPattern

logger = logging.getLogger(__name__)

DEFAULT_AVERAGE_DURATION_MIN = 45.0


def analyze_user_patterns(activities: Iterable[Activity]) -> Dict[ActivityType, ActivityPattern]:
    """
    Derive per-type preferences from a user's activity history.

    Args:
        activities: All logged activities, completed or not.

    Returns:
        Mapping of activity type to its pattern. Types with no completed
        activity are absent rather than present with zero values.
    """
    logged_counts: Dict[ActivityType, int] = defaultdict(int)
    completed: Dict[ActivityType, List[Activity]] = defaultdict(list)

    for activity in activities:
        logged_counts[activity.type] += 1
        if activity.completed:
            completed[activity.type].append(activity)

    patterns: Dict[ActivityType, ActivityPattern] = {}
    for activity_type, done in completed.items():
        # A type only gets here with at least one completed entry, so the
        # logged count is never zero.
        durations = [a.duration for a in done]
        patterns[activity_type] = ActivityPattern(
            activity_type=activity_type,
            preferred_times=[a.date.time().replace(second=0, microsecond=0) for a in done],
            completion_rate=len(done) / logged_counts[activity_type],
            average_duration=(
                statistics.fmean(durations) if durations else DEFAULT_AVERAGE_DURATION_MIN
            ) or DEFAULT_AVERAGE_DURATION_MIN,
        )

    logger.debug("Derived patterns for %d activity types", len(patterns))
    return patterns
