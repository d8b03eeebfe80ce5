"""
In-memory implementations of the collaborator stores.

Used by the API's default dependencies and by tests. Each store keeps data
per user; returned models are copies, so callers cannot mutate stored state.
"""

import uuid
from datetime import datetime
from typing import Callable, Dict, List, Optional

from ..exceptions import ActivityNotFoundError, SuggestionNotFoundError
from ..models.activity import Activity, ActivityUpdate
from ..models.schedule import SchedulePreference, SchedulePreferenceInput
from ..models.suggestions import WorkoutSuggestion


class InMemoryActivityStore:
    """Activity store backed by a dict per user."""

    def __init__(self) -> None:
        self._activities: Dict[str, Dict[str, Activity]] = {}

    async def get_activities(self, user_id: str) -> List[Activity]:
        activities = self._activities.get(user_id, {}).values()
        return [a.model_copy() for a in sorted(activities, key=lambda a: a.date, reverse=True)]

    async def get_activity(self, user_id: str, activity_id: str) -> Optional[Activity]:
        activity = self._activities.get(user_id, {}).get(activity_id)
        return activity.model_copy() if activity else None

    async def create_activity(self, user_id: str, activity: Activity) -> Activity:
        created = activity.model_copy(update={"id": str(uuid.uuid4())})
        self._activities.setdefault(user_id, {})[created.id] = created
        return created.model_copy()

    async def update_activity(
        self, user_id: str, activity_id: str, updates: ActivityUpdate
    ) -> Activity:
        current = self._activities.get(user_id, {}).get(activity_id)
        if current is None:
            raise ActivityNotFoundError(activity_id)
        updated = current.model_copy(update=updates.model_dump(exclude_none=True))
        self._activities[user_id][activity_id] = updated
        return updated.model_copy()

    async def delete_activity(self, user_id: str, activity_id: str) -> None:
        if self._activities.get(user_id, {}).pop(activity_id, None) is None:
            raise ActivityNotFoundError(activity_id)


class InMemorySchedulePreferenceStore:
    """Preference store keeping at most one preference per user."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or datetime.now
        self._preferences: Dict[str, SchedulePreference] = {}

    async def get_schedule_preference(self, user_id: str) -> Optional[SchedulePreference]:
        preference = self._preferences.get(user_id)
        return preference.model_copy(deep=True) if preference else None

    async def upsert_schedule_preference(
        self, user_id: str, preference: SchedulePreferenceInput
    ) -> SchedulePreference:
        now = self._clock()
        existing = self._preferences.get(user_id)
        stored = SchedulePreference(
            **preference.model_dump(),
            id=existing.id if existing else str(uuid.uuid4()),
            user_id=user_id,
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )
        self._preferences[user_id] = stored
        return stored.model_copy(deep=True)


class InMemorySuggestionStore:
    """Suggestion store; generation replaces a user's set wholesale."""

    def __init__(self) -> None:
        self._suggestions: Dict[str, Dict[str, WorkoutSuggestion]] = {}

    async def get_workout_suggestions(
        self, user_id: str, limit: int = 10
    ) -> List[WorkoutSuggestion]:
        suggestions = self._suggestions.get(user_id, {}).values()
        ranked = sorted(suggestions, key=lambda s: s.score, reverse=True)
        return [s.model_copy() for s in ranked[:limit]]

    async def get_workout_suggestion(
        self, user_id: str, suggestion_id: str
    ) -> Optional[WorkoutSuggestion]:
        suggestion = self._suggestions.get(user_id, {}).get(suggestion_id)
        return suggestion.model_copy() if suggestion else None

    async def create_workout_suggestions(
        self, user_id: str, suggestions: List[WorkoutSuggestion]
    ) -> None:
        bucket = self._suggestions.setdefault(user_id, {})
        for suggestion in suggestions:
            bucket[suggestion.id] = suggestion.model_copy(update={"user_id": user_id})

    async def update_workout_suggestion(
        self, user_id: str, suggestion_id: str, accepted: bool
    ) -> WorkoutSuggestion:
        current = self._suggestions.get(user_id, {}).get(suggestion_id)
        if current is None:
            raise SuggestionNotFoundError(suggestion_id)
        updated = current.model_copy(update={"accepted": accepted})
        self._suggestions[user_id][suggestion_id] = updated
        return updated.model_copy()

    async def delete_workout_suggestion(self, user_id: str, suggestion_id: str) -> None:
        if self._suggestions.get(user_id, {}).pop(suggestion_id, None) is None:
            raise SuggestionNotFoundError(suggestion_id)

    async def clear_workout_suggestions(self, user_id: str) -> None:
        self._suggestions.pop(user_id, None)
