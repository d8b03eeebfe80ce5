"""
Workout reminders.

Turns an accepted workout (or a pending suggestion) into a reminder fixed
at an offset before its start. Delivery is delegated to a
``NotificationBackend``; the in-memory backend records reminders so the
rest of the system can be exercised without a push service.
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional, Protocol, runtime_checkable

from ..models.activity import Activity
from ..models.suggestions import WorkoutSuggestion

logger = logging.getLogger(__name__)

DEFAULT_REMINDER_OFFSET_HOURS = 1


@dataclass
class WorkoutReminder:
    """A reminder to be delivered at ``remind_at``."""
    title: str
    body: str
    remind_at: datetime
    data: Dict[str, str] = field(default_factory=dict)
    id: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "body": self.body,
            "remind_at": self.remind_at.isoformat(),
            "data": dict(self.data),
        }


@runtime_checkable
class NotificationBackend(Protocol):
    """Schedules and cancels reminders on some delivery channel."""

    async def schedule(self, reminder: WorkoutReminder) -> str:
        """Schedule a reminder and return its id."""
        ...

    async def cancel(self, reminder_id: str) -> None:
        ...

    async def cancel_all(self) -> None:
        ...

    async def list_scheduled(self) -> List[WorkoutReminder]:
        ...


class InMemoryNotificationBackend:
    """Backend that keeps scheduled reminders in a dict."""

    def __init__(self) -> None:
        self._scheduled: Dict[str, WorkoutReminder] = {}

    async def schedule(self, reminder: WorkoutReminder) -> str:
        reminder.id = reminder.id or str(uuid.uuid4())
        self._scheduled[reminder.id] = reminder
        return reminder.id

    async def cancel(self, reminder_id: str) -> None:
        self._scheduled.pop(reminder_id, None)

    async def cancel_all(self) -> None:
        self._scheduled.clear()

    async def list_scheduled(self) -> List[WorkoutReminder]:
        return sorted(self._scheduled.values(), key=lambda r: r.remind_at)


class ReminderService:
    """Builds workout reminders and hands them to a backend."""

    def __init__(
        self,
        backend: NotificationBackend,
        clock: Optional[Callable[[], datetime]] = None,
        offset_hours: int = DEFAULT_REMINDER_OFFSET_HOURS,
    ) -> None:
        self._backend = backend
        self._clock = clock or datetime.now
        self.offset_hours = offset_hours

    async def _schedule_if_future(self, reminder: WorkoutReminder) -> Optional[str]:
        if reminder.remind_at <= self._clock():
            logger.info("Reminder time %s is in the past, skipping", reminder.remind_at)
            return None
        reminder_id = await self._backend.schedule(reminder)
        logger.info("Scheduled reminder %s for %s", reminder_id, reminder.remind_at)
        return reminder_id

    async def schedule_workout_reminder(self, activity: Activity) -> Optional[str]:
        """
        Remind the user ``offset_hours`` before an activity starts.

        Returns:
            The reminder id, or None when the reminder time already passed.
        """
        hours = self.offset_hours
        reminder = WorkoutReminder(
            title="Workout Reminder",
            body=f"{activity.title} starts in {hours} hour{'s' if hours > 1 else ''}! "
                 "Get ready to crush it!",
            remind_at=activity.date - timedelta(hours=hours),
            data={"activity_id": activity.id, "type": "workout_reminder"},
        )
        return await self._schedule_if_future(reminder)

    async def schedule_suggestion_reminder(
        self,
        suggestion: WorkoutSuggestion,
        hours_before_workout: Optional[int] = None,
    ) -> Optional[str]:
        """Remind the user ahead of a suggested workout."""
        hours = hours_before_workout or self.offset_hours
        reminder = WorkoutReminder(
            title="Scheduled Workout",
            body=f"{suggestion.activity_type.label} Workout starts in {hours} "
                 f"hour{'s' if hours > 1 else ''}! Time to get moving!",
            remind_at=suggestion.starts_at - timedelta(hours=hours),
            data={"suggestion_id": suggestion.id, "type": "suggestion_reminder"},
        )
        return await self._schedule_if_future(reminder)

    async def cancel_reminder(self, reminder_id: str) -> None:
        await self._backend.cancel(reminder_id)

    async def cancel_all_reminders(self) -> None:
        await self._backend.cancel_all()

    async def get_scheduled_reminders(self) -> List[WorkoutReminder]:
        return await self._backend.list_scheduled()
