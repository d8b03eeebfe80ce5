"""Tests for wall-clock time helpers."""

from datetime import date, datetime, time, timedelta, timezone

import pytest

from workout_scheduler.utils.time_utils import (
    Interval,
    day_of_week,
    format_hhmm,
    minutes_between,
    parse_hhmm,
    to_local_naive,
)


def _interval(start: str, end: str) -> Interval:
    day = date(2026, 10, 19)
    return Interval(
        datetime.combine(day, parse_hhmm(start)),
        datetime.combine(day, parse_hhmm(end)),
    )


class TestParseHHMM:
    """Tests for HH:MM parsing."""

    @pytest.mark.parametrize(
        "text,expected",
        [("00:00", time(0, 0)), ("07:05", time(7, 5)), ("23:59", time(23, 59)), (" 18:30 ", time(18, 30))],
    )
    def test_valid(self, text, expected):
        assert parse_hhmm(text) == expected

    @pytest.mark.parametrize("text", ["24:00", "7:30", "07:60", "0730", "", "morning", "07:30:00"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_hhmm(text)

    def test_non_string(self):
        with pytest.raises(ValueError):
            parse_hhmm(730)

    def test_time_passthrough_drops_seconds(self):
        assert parse_hhmm(time(6, 15, 42)) == time(6, 15)

    def test_format(self):
        assert format_hhmm(time(6, 5)) == "06:05"


class TestDates:
    """Tests for date helpers."""

    def test_day_of_week_starts_sunday(self):
        assert day_of_week(date(2026, 10, 18)) == 0
        assert day_of_week(date(2026, 10, 19)) == 1
        assert day_of_week(date(2026, 10, 24)) == 6

    def test_minutes_between(self):
        start = datetime(2026, 10, 19, 8, 0)
        assert minutes_between(start, start + timedelta(hours=2, minutes=15)) == 135

    def test_naive_unchanged(self):
        value = datetime(2026, 10, 19, 8, 0)
        assert to_local_naive(value) is value

    def test_aware_made_naive(self):
        value = datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc)

        result = to_local_naive(value)

        assert result.tzinfo is None
        assert result == value.astimezone().replace(tzinfo=None)


class TestIntervalOverlaps:
    """Collision rules between a candidate and a busy block."""

    def test_start_inside(self):
        assert _interval("09:30", "10:30").overlaps(_interval("09:00", "10:00"))

    def test_end_inside(self):
        assert _interval("08:30", "09:30").overlaps(_interval("09:00", "10:00"))

    def test_contains(self):
        assert _interval("08:00", "11:00").overlaps(_interval("09:00", "10:00"))

    def test_identical(self):
        assert _interval("09:00", "10:00").overlaps(_interval("09:00", "10:00"))

    def test_contained_in_event(self):
        assert _interval("09:15", "09:45").overlaps(_interval("09:00", "10:00"))

    def test_touching_is_free(self):
        assert not _interval("08:00", "09:00").overlaps(_interval("09:00", "10:00"))
        assert not _interval("10:00", "11:00").overlaps(_interval("09:00", "10:00"))

    def test_disjoint(self):
        assert not _interval("06:00", "07:00").overlaps(_interval("09:00", "10:00"))
