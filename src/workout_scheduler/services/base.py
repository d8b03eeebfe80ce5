"""
Collaborator protocols for the scheduling assistant.

The scheduling engine performs no I/O; everything it reads is handed in by
these collaborators and everything it produces is written back through
them. Implementations may be remote and can fail independently; callers
catch, log and surface those failures.
"""

import logging
from typing import List, Optional, Protocol, runtime_checkable

from ..models.activity import Activity, ActivityUpdate
from ..models.schedule import SchedulePreference, SchedulePreferenceInput
from ..models.suggestions import WorkoutSuggestion


@runtime_checkable
class ActivityStore(Protocol):
    """Persistence for a user's logged and planned activities."""

    async def get_activities(self, user_id: str) -> List[Activity]:
        """All activities for a user, newest first."""
        ...

    async def get_activity(self, user_id: str, activity_id: str) -> Optional[Activity]:
        ...

    async def create_activity(self, user_id: str, activity: Activity) -> Activity:
        """Store a new activity and return it with its assigned id."""
        ...

    async def update_activity(
        self, user_id: str, activity_id: str, updates: ActivityUpdate
    ) -> Activity:
        ...

    async def delete_activity(self, user_id: str, activity_id: str) -> None:
        ...


@runtime_checkable
class SchedulePreferenceStore(Protocol):
    """Persistence for the single schedule preference per user."""

    async def get_schedule_preference(self, user_id: str) -> Optional[SchedulePreference]:
        ...

    async def upsert_schedule_preference(
        self, user_id: str, preference: SchedulePreferenceInput
    ) -> SchedulePreference:
        ...


@runtime_checkable
class SuggestionStore(Protocol):
    """Persistence for the latest generated suggestion set."""

    async def get_workout_suggestions(
        self, user_id: str, limit: int = 10
    ) -> List[WorkoutSuggestion]:
        """Stored suggestions, highest score first."""
        ...

    async def get_workout_suggestion(
        self, user_id: str, suggestion_id: str
    ) -> Optional[WorkoutSuggestion]:
        ...

    async def create_workout_suggestions(
        self, user_id: str, suggestions: List[WorkoutSuggestion]
    ) -> None:
        ...

    async def update_workout_suggestion(
        self, user_id: str, suggestion_id: str, accepted: bool
    ) -> WorkoutSuggestion:
        ...

    async def delete_workout_suggestion(self, user_id: str, suggestion_id: str) -> None:
        ...

    async def clear_workout_suggestions(self, user_id: str) -> None:
        ...


class BaseService:
    """
    Base class for services that coordinate collaborators.

    Provides a per-class logger that can be overridden for tests.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(self.__class__.__module__)

    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        return self._logger
