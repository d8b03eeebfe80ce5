"""Tests for slot scoring."""

from datetime import date, datetime, time

import pytest

from workout_scheduler.models.activity import ActivityType
from workout_scheduler.models.suggestions import ActivityPattern
from workout_scheduler.scheduling.scoring import (
    habit_adjustment,
    load_adjustment,
    score_slot,
    time_of_day_adjustment,
)

RUNNING = ActivityType.RUNNING


def _pattern(*times, rate=1.0, activity_type=RUNNING):
    return ActivityPattern(activity_type=activity_type, preferred_times=list(times), completion_rate=rate)


class TestHabitAdjustment:
    """Historical affinity bonus."""

    def test_no_pattern(self, make_slot):
        assert habit_adjustment(make_slot(), None) == 0.0

    def test_pattern_without_times(self, make_slot):
        assert habit_adjustment(make_slot(), _pattern(rate=1.0)) == 0.0

    def test_hour_within_one(self, make_slot):
        """A stored time one hour away matches and adds the rate term."""
        slot = make_slot(start=time(11, 0))

        assert habit_adjustment(slot, _pattern(time(10, 15), rate=0.5)) == pytest.approx(0.4)

    def test_hour_too_far(self, make_slot):
        """Only the completion-rate term applies without a time match."""
        slot = make_slot(start=time(11, 0))

        assert habit_adjustment(slot, _pattern(time(15, 0), rate=0.5)) == pytest.approx(0.1)


class TestLoadAdjustment:
    """Same-day load bonus and penalty."""

    def test_free_day(self, make_slot):
        assert load_adjustment(make_slot(), []) == pytest.approx(0.2)

    def test_one_workout(self, make_slot, make_activity, monday):
        workouts = [make_activity(when=datetime.combine(monday, time(7, 0)))]

        assert load_adjustment(make_slot(day=monday), workouts) == 0.0

    def test_two_workouts(self, make_slot, make_activity, monday):
        workouts = [
            make_activity(when=datetime.combine(monday, time(7, 0))),
            make_activity(when=datetime.combine(monday, time(19, 0))),
        ]

        assert load_adjustment(make_slot(day=monday), workouts) == pytest.approx(-0.3)

    def test_other_days_ignored(self, make_slot, make_activity, monday):
        """Workouts on other dates count as a free day."""
        workouts = [make_activity(when=datetime(2026, 10, 18, 7, 0)) for _ in range(3)]

        assert load_adjustment(make_slot(day=monday), workouts) == pytest.approx(0.2)


class TestTimeOfDayAdjustment:
    """Morning and evening bonuses."""

    @pytest.mark.parametrize(
        "start,expected",
        [
            (time(5, 30), 0.0),
            (time(6, 0), 0.15),
            (time(9, 30), 0.15),
            (time(10, 0), 0.0),
            (time(16, 30), 0.0),
            (time(17, 0), 0.10),
            (time(19, 30), 0.10),
            (time(20, 0), 0.0),
        ],
    )
    def test_bonus_by_hour(self, make_slot, start, expected):
        assert time_of_day_adjustment(make_slot(start=start)) == pytest.approx(expected)


class TestScoreSlot:
    """Combined score."""

    def test_preferred_morning_clamps_to_one(self, make_slot):
        """A preferred morning slot on a free day exceeds 1 before clamping."""
        slot = make_slot(start=time(8, 0), score=1.0)

        assert score_slot(slot, {}, RUNNING, []) == 1.0

    def test_generic_midday_free_day(self, make_slot):
        slot = make_slot(start=time(11, 0), score=0.5)

        assert score_slot(slot, {}, RUNNING, []) == pytest.approx(0.7)

    def test_busy_day_penalty(self, make_slot, make_activity, monday):
        """Two workouts already on the day pull a generic slot down."""
        workouts = [
            make_activity(when=datetime.combine(monday, time(7, 0))),
            make_activity(when=datetime.combine(monday, time(12, 0))),
        ]

        midday = make_slot(day=monday, start=time(11, 0), score=0.5)
        morning = make_slot(day=monday, start=time(8, 0), score=0.5)

        assert score_slot(midday, {}, RUNNING, workouts) == pytest.approx(0.2)
        assert score_slot(morning, {}, RUNNING, workouts) == pytest.approx(0.35)

    def test_all_signals_combined(self, make_slot, make_activity, monday):
        workouts = [
            make_activity(when=datetime.combine(monday, time(7, 0))),
            make_activity(when=datetime.combine(monday, time(12, 0))),
        ]
        patterns = {RUNNING: _pattern(time(10, 15), rate=0.5)}
        slot = make_slot(day=monday, start=time(11, 0), score=0.5)

        # 0.5 + 0.3 + 0.1 - 0.3
        assert score_slot(slot, patterns, RUNNING, workouts) == pytest.approx(0.6)

    def test_pattern_of_other_type_ignored(self, make_slot):
        """Only the pattern of the type being placed matters."""
        patterns = {RUNNING: _pattern(time(11, 0), rate=1.0)}
        slot = make_slot(start=time(11, 0), score=0.5)

        assert score_slot(slot, patterns, ActivityType.YOGA, []) == pytest.approx(0.7)
        assert score_slot(slot, patterns, RUNNING, []) == 1.0

    def test_clamped_at_zero(self, make_slot, make_activity, monday):
        workouts = [make_activity(when=datetime.combine(monday, time(h, 0))) for h in (7, 12)]
        slot = make_slot(day=monday, start=time(11, 0), score=0.0)

        assert score_slot(slot, {}, RUNNING, workouts) == 0.0

    def test_always_within_unit_interval(self, make_slot, make_activity):
        """No combination of inputs escapes [0, 1]."""
        day = date(2026, 10, 21)
        patterns = {RUNNING: _pattern(time(7, 0), time(18, 0), rate=1.0)}
        loads = [
            [],
            [make_activity(when=datetime.combine(day, time(6, 0)))],
            [make_activity(when=datetime.combine(day, time(h, 0))) for h in (6, 12, 20)],
        ]

        for hour in range(6, 22):
            for baseline in (0.0, 0.5, 1.0):
                for workouts in loads:
                    slot = make_slot(day=day, start=time(hour, 0), score=baseline)
                    for use_patterns in ({}, patterns):
                        score = score_slot(slot, use_patterns, RUNNING, workouts)
                        assert 0.0 <= score <= 1.0
