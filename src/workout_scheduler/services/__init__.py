"""Services coordinating the scheduling engine with its collaborators."""

from .assistant import AssistantService
from .base import ActivityStore, BaseService, SchedulePreferenceStore, SuggestionStore
from .notifications import (
    InMemoryNotificationBackend,
    NotificationBackend,
    ReminderService,
    WorkoutReminder,
)
from .progress import summarize_week, week_start_for
from .stores import (
    InMemoryActivityStore,
    InMemorySchedulePreferenceStore,
    InMemorySuggestionStore,
)

__all__ = [
    "AssistantService",
    "ActivityStore",
    "BaseService",
    "SchedulePreferenceStore",
    "SuggestionStore",
    "InMemoryNotificationBackend",
    "NotificationBackend",
    "ReminderService",
    "WorkoutReminder",
    "summarize_week",
    "week_start_for",
    "InMemoryActivityStore",
    "InMemorySchedulePreferenceStore",
    "InMemorySuggestionStore",
]
