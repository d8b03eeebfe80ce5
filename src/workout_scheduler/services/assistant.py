"""
Scheduling assistant: the flow around the suggestion engine.

Reads a user's preference, history and calendar from collaborators, runs
the engine, and replaces the stored suggestion set wholesale. Accepting a
suggestion turns it into a planned activity with a reminder.
"""

from datetime import date, datetime
from typing import Callable, List, Optional

from ..exceptions import (
    PreferenceValidationError,
    SetupRequiredError,
    SuggestionAlreadyAcceptedError,
    SuggestionNotFoundError,
)
from ..integrations.calendar import CalendarProvider
from ..models.activity import Activity, WeeklyStats
from ..models.schedule import SchedulePreference, SchedulePreferenceInput
from ..models.suggestions import WorkoutSuggestion
from ..scheduling.engine import DEFAULT_DAYS_AHEAD, WEEKLY_PLAN_DAYS, SchedulingService
from .base import ActivityStore, BaseService, SchedulePreferenceStore, SuggestionStore
from .notifications import ReminderService
from .progress import summarize_week, week_start_for


class AssistantService(BaseService):
    """
    Coordinates stores, calendar, engine and reminders for one request.

    Holds no per-user state; every call re-reads its inputs and
    suggestions are regenerated rather than patched.
    """

    def __init__(
        self,
        activity_store: ActivityStore,
        preference_store: SchedulePreferenceStore,
        suggestion_store: SuggestionStore,
        calendar_provider: CalendarProvider,
        reminders: ReminderService,
        scheduler: Optional[SchedulingService] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        super().__init__()
        self._activities = activity_store
        self._preferences = preference_store
        self._suggestions = suggestion_store
        self._calendar = calendar_provider
        self._reminders = reminders
        self._clock = clock or datetime.now
        self._scheduler = scheduler or SchedulingService(clock=self._clock)

    async def _require_preference(self, user_id: str) -> SchedulePreference:
        preference = await self._preferences.get_schedule_preference(user_id)
        if preference is None:
            raise SetupRequiredError(user_id)
        return preference

    # === Preferences ===

    async def get_preferences(self, user_id: str) -> SchedulePreference:
        """The user's preference; raises SetupRequiredError if none saved."""
        return await self._require_preference(user_id)

    async def save_preferences(
        self, user_id: str, preference: SchedulePreferenceInput
    ) -> SchedulePreference:
        """Create or replace the user's preference."""
        if not preference.preferred_time_slots:
            raise PreferenceValidationError(
                "Please add at least one preferred time slot.",
                field="preferred_time_slots",
            )
        saved = await self._preferences.upsert_schedule_preference(user_id, preference)
        self.logger.info("Saved schedule preference for user %s", user_id)
        return saved

    # === Suggestions ===

    async def generate_suggestions(
        self,
        user_id: str,
        days_ahead: int = DEFAULT_DAYS_AHEAD,
        start_date: Optional[date] = None,
    ) -> List[WorkoutSuggestion]:
        """
        Regenerate and store the user's suggestions.

        Raises:
            SetupRequiredError: If the user has no schedule preference.
        """
        preference = await self._require_preference(user_id)
        start_date = start_date or self._clock().date()

        activities = await self._activities.get_activities(user_id)
        events = await self._calendar.get_calendar_events(
            preference.calendar_integration, days_ahead, start_date
        )

        suggestions = [
            s.model_copy(update={"user_id": user_id})
            for s in self._scheduler.generate_suggestions(
                activities, preference, events, days_ahead, start_date
            )
        ]

        await self._suggestions.clear_workout_suggestions(user_id)
        await self._suggestions.create_workout_suggestions(user_id, suggestions)

        self.logger.info(
            "Generated %d suggestions for user %s (%d activities, %d calendar events)",
            len(suggestions), user_id, len(activities), len(events),
        )
        return suggestions

    async def get_suggestions(self, user_id: str, limit: int = 10) -> List[WorkoutSuggestion]:
        """Stored suggestions, best first."""
        return await self._suggestions.get_workout_suggestions(user_id, limit)

    async def accept_suggestion(self, user_id: str, suggestion_id: str) -> Activity:
        """
        Turn a suggestion into a planned activity and set a reminder.

        Raises:
            SuggestionNotFoundError: If the suggestion is not stored.
            SuggestionAlreadyAcceptedError: If it was already accepted.
        """
        suggestion = await self._suggestions.get_workout_suggestion(user_id, suggestion_id)
        if suggestion is None:
            raise SuggestionNotFoundError(suggestion_id)
        if suggestion.accepted:
            raise SuggestionAlreadyAcceptedError(suggestion_id)

        activity = await self._activities.create_activity(
            user_id,
            Activity(
                type=suggestion.activity_type,
                title=f"{suggestion.activity_type.label} Workout",
                date=suggestion.starts_at,
                duration=suggestion.duration,
                completed=False,
            ),
        )
        await self._suggestions.update_workout_suggestion(user_id, suggestion_id, accepted=True)
        await self._reminders.schedule_workout_reminder(activity)

        self.logger.info("User %s accepted suggestion %s", user_id, suggestion_id)
        return activity

    async def decline_suggestion(self, user_id: str, suggestion_id: str) -> None:
        """Drop a suggestion the user does not want."""
        await self._suggestions.delete_workout_suggestion(user_id, suggestion_id)

    async def get_weekly_plan(
        self, user_id: str, start_date: Optional[date] = None
    ) -> List[WorkoutSuggestion]:
        """One best suggestion per day for the next week, up to the weekly target."""
        preference = await self._require_preference(user_id)
        start_date = start_date or self._clock().date()

        activities = await self._activities.get_activities(user_id)
        events = await self._calendar.get_calendar_events(
            preference.calendar_integration, WEEKLY_PLAN_DAYS, start_date
        )
        return self._scheduler.optimize_weekly_schedule(
            activities, preference, events, start_date
        )

    # === Progress ===

    async def get_weekly_stats(
        self, user_id: str, day: Optional[date] = None
    ) -> WeeklyStats:
        """Progress for the week containing ``day`` (default today)."""
        preference = await self._preferences.get_schedule_preference(user_id)
        target = preference.days_per_week if preference else 0
        activities = await self._activities.get_activities(user_id)
        week_start = week_start_for(day or self._clock().date())
        return summarize_week(activities, week_start, target)
