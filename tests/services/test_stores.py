"""Tests for the in-memory collaborator stores."""

from datetime import date, datetime

import pytest

from workout_scheduler.exceptions import ActivityNotFoundError, SuggestionNotFoundError
from workout_scheduler.models import (
    ActivityType,
    ActivityUpdate,
    SchedulePreferenceInput,
    TimeSlot,
    WorkoutSuggestion,
)
from workout_scheduler.services.base import (
    ActivityStore,
    SchedulePreferenceStore,
    SuggestionStore,
)
from workout_scheduler.services.stores import (
    InMemoryActivityStore,
    InMemorySchedulePreferenceStore,
    InMemorySuggestionStore,
)


def _suggestion(suggestion_id: str, score: float) -> WorkoutSuggestion:
    return WorkoutSuggestion(
        id=suggestion_id,
        suggested_date=date(2026, 10, 19),
        suggested_time="08:00",
        duration=45,
        activity_type=ActivityType.RUNNING,
        score=score,
        reasoning="First workout of the day",
        created_at=datetime(2026, 10, 19, 6, 0),
    )


class TestProtocols:
    """The in-memory stores satisfy the collaborator protocols."""

    def test_runtime_checks(self):
        assert isinstance(InMemoryActivityStore(), ActivityStore)
        assert isinstance(InMemorySchedulePreferenceStore(), SchedulePreferenceStore)
        assert isinstance(InMemorySuggestionStore(), SuggestionStore)


class TestInMemoryActivityStore:
    """Tests for the activity store."""

    @pytest.mark.asyncio
    async def test_create_assigns_id(self, make_activity):
        store = InMemoryActivityStore()

        created = await store.create_activity("u1", make_activity(id=""))

        assert created.id
        assert await store.get_activity("u1", created.id) == created
        assert await store.get_activities("u2") == []

    @pytest.mark.asyncio
    async def test_newest_first(self, make_activity):
        store = InMemoryActivityStore()
        await store.create_activity("u1", make_activity(when=datetime(2026, 10, 1, 7, 0)))
        await store.create_activity("u1", make_activity(when=datetime(2026, 10, 9, 7, 0)))

        activities = await store.get_activities("u1")

        assert [a.date.day for a in activities] == [9, 1]

    @pytest.mark.asyncio
    async def test_update_toggles_completion(self, make_activity):
        store = InMemoryActivityStore()
        created = await store.create_activity("u1", make_activity(completed=False))

        updated = await store.update_activity("u1", created.id, ActivityUpdate(completed=True))

        assert updated.completed is True
        assert updated.title == created.title

    @pytest.mark.asyncio
    async def test_returned_copies_are_detached(self, make_activity):
        store = InMemoryActivityStore()
        created = await store.create_activity("u1", make_activity(title="Tempo"))

        created.title = "Changed"

        assert (await store.get_activity("u1", created.id)).title == "Tempo"

    @pytest.mark.asyncio
    async def test_missing_activity(self):
        store = InMemoryActivityStore()

        with pytest.raises(ActivityNotFoundError):
            await store.update_activity("u1", "nope", ActivityUpdate(completed=True))
        with pytest.raises(ActivityNotFoundError):
            await store.delete_activity("u1", "nope")


class TestInMemorySchedulePreferenceStore:
    """Tests for the preference store."""

    @pytest.mark.asyncio
    async def test_upsert_keeps_identity(self):
        times = iter([datetime(2026, 10, 1, 8, 0), datetime(2026, 10, 2, 8, 0)])
        store = InMemorySchedulePreferenceStore(clock=lambda: next(times))
        first_input = SchedulePreferenceInput(
            preferred_time_slots=[TimeSlot(day_of_week=1, start_time="07:00", end_time="08:00")],
        )

        first = await store.upsert_schedule_preference("u1", first_input)
        second = await store.upsert_schedule_preference(
            "u1", first_input.model_copy(update={"days_per_week": 5})
        )

        assert second.id == first.id
        assert second.user_id == "u1"
        assert second.created_at == datetime(2026, 10, 1, 8, 0)
        assert second.updated_at == datetime(2026, 10, 2, 8, 0)
        assert (await store.get_schedule_preference("u1")).days_per_week == 5

    @pytest.mark.asyncio
    async def test_default_clock_is_naive_local(self):
        store = InMemorySchedulePreferenceStore()
        preference = SchedulePreferenceInput(
            preferred_time_slots=[TimeSlot(day_of_week=1, start_time="07:00", end_time="08:00")],
        )

        saved = await store.upsert_schedule_preference("u1", preference)

        assert saved.created_at.tzinfo is None
        assert saved.updated_at == saved.created_at

    @pytest.mark.asyncio
    async def test_missing_preference(self):
        assert await InMemorySchedulePreferenceStore().get_schedule_preference("u1") is None


class TestInMemorySuggestionStore:
    """Tests for the suggestion store."""

    @pytest.mark.asyncio
    async def test_ranked_and_limited(self):
        store = InMemorySuggestionStore()
        await store.create_workout_suggestions(
            "u1", [_suggestion("a", 0.5), _suggestion("b", 0.9), _suggestion("c", 0.7)]
        )

        suggestions = await store.get_workout_suggestions("u1", limit=2)

        assert [s.id for s in suggestions] == ["b", "c"]
        assert all(s.user_id == "u1" for s in suggestions)

    @pytest.mark.asyncio
    async def test_update_and_delete(self):
        store = InMemorySuggestionStore()
        await store.create_workout_suggestions("u1", [_suggestion("a", 0.5)])

        updated = await store.update_workout_suggestion("u1", "a", accepted=True)
        assert updated.accepted is True

        await store.delete_workout_suggestion("u1", "a")
        assert await store.get_workout_suggestion("u1", "a") is None

        with pytest.raises(SuggestionNotFoundError):
            await store.update_workout_suggestion("u1", "a", accepted=True)
        with pytest.raises(SuggestionNotFoundError):
            await store.delete_workout_suggestion("u1", "a")

    @pytest.mark.asyncio
    async def test_clear_is_per_user(self):
        store = InMemorySuggestionStore()
        await store.create_workout_suggestions("u1", [_suggestion("a", 0.5)])
        await store.create_workout_suggestions("u2", [_suggestion("a", 0.5)])

        await store.clear_workout_suggestions("u1")

        assert await store.get_workout_suggestions("u1") == []
        assert len(await store.get_workout_suggestions("u2")) == 1
