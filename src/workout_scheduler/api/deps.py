"""Dependency injection for API routes."""

from functools import lru_cache

from ..config import get_settings
from ..integrations.calendar import CalendarProvider
from ..scheduling.engine import SchedulingService
from ..services.assistant import AssistantService
from ..services.notifications import InMemoryNotificationBackend, ReminderService
from ..services.stores import (
    InMemoryActivityStore,
    InMemorySchedulePreferenceStore,
    InMemorySuggestionStore,
)
from ..utils.time_utils import parse_hhmm


@lru_cache
def get_activity_store() -> InMemoryActivityStore:
    """Get the activity store instance."""
    return InMemoryActivityStore()


@lru_cache
def get_preference_store() -> InMemorySchedulePreferenceStore:
    """Get the schedule preference store instance."""
    return InMemorySchedulePreferenceStore()


@lru_cache
def get_suggestion_store() -> InMemorySuggestionStore:
    """Get the suggestion store instance."""
    return InMemorySuggestionStore()


@lru_cache
def get_calendar_provider() -> CalendarProvider:
    """Get the calendar provider instance."""
    settings = get_settings()
    return CalendarProvider(
        api_url=settings.google_calendar_api_url,
        timeout=settings.http_timeout_seconds,
    )


@lru_cache
def get_reminder_service() -> ReminderService:
    """Get the reminder service instance."""
    settings = get_settings()
    return ReminderService(
        InMemoryNotificationBackend(),
        offset_hours=settings.reminder_offset_hours,
    )


def get_assistant_service() -> AssistantService:
    """Build the assistant service over the shared collaborators."""
    settings = get_settings()
    scheduler = SchedulingService(
        working_hours_start=parse_hhmm(settings.working_hours_start),
        working_hours_end=parse_hhmm(settings.working_hours_end),
    )
    return AssistantService(
        activity_store=get_activity_store(),
        preference_store=get_preference_store(),
        suggestion_store=get_suggestion_store(),
        calendar_provider=get_calendar_provider(),
        reminders=get_reminder_service(),
        scheduler=scheduler,
    )
