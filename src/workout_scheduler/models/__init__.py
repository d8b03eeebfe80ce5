"""Data models for the Workout Scheduler."""

from .activity import Activity, ActivityType, ActivityUpdate, WeeklyStats
from .schedule import (
    CalendarEvent,
    CalendarIntegration,
    CalendarProviderType,
    PriorityMode,
    SchedulePreference,
    SchedulePreferenceInput,
    TimeSlot,
)
from .suggestions import ActivityPattern, AvailabilitySlot, WorkoutSuggestion

__all__ = [
    "Activity",
    "ActivityType",
    "ActivityUpdate",
    "WeeklyStats",
    "CalendarEvent",
    "CalendarIntegration",
    "CalendarProviderType",
    "PriorityMode",
    "SchedulePreference",
    "SchedulePreferenceInput",
    "TimeSlot",
    "ActivityPattern",
    "AvailabilitySlot",
    "WorkoutSuggestion",
]
