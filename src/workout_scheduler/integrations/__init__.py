"""External integrations."""

from .calendar import CalendarProvider, map_google_event, mock_calendar_events

__all__ = ["CalendarProvider", "map_google_event", "mock_calendar_events"]
