"""Scheduling models: availability slots, activity patterns and suggestions."""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Dict, List

from pydantic import BaseModel, Field, field_serializer, field_validator

from ..utils.time_utils import format_hhmm, parse_hhmm
from .activity import ActivityType


@dataclass(frozen=True)
class AvailabilitySlot:
    """
    A candidate window on one date, produced within a single generation pass.

    ``duration_minutes`` is the open time from ``start_time`` to the end of
    the enclosing window, capped at 120; ``score`` is the baseline
    desirability (1.0 inside a preferred window, 0.5 for a generic offer).
    """
    date: date
    start_time: time
    end_time: time
    duration_minutes: int
    score: float

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "date": self.date.isoformat(),
            "start_time": format_hhmm(self.start_time),
            "end_time": format_hhmm(self.end_time),
            "duration_minutes": self.duration_minutes,
            "score": self.score,
        }


@dataclass
class ActivityPattern:
    """
    Historical habits for one activity type, derived from completed workouts.

    Recomputed on every generation call; only types with at least one
    completed activity get a pattern.
    """
    activity_type: ActivityType
    preferred_times: List[time] = field(default_factory=list)
    completion_rate: float = 0.0  # completed / logged, 0-1
    average_duration: float = 45.0  # minutes

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "activity_type": self.activity_type.value,
            "preferred_times": [format_hhmm(t) for t in self.preferred_times],
            "completion_rate": round(self.completion_rate, 3),
            "average_duration": round(self.average_duration, 1),
        }


class WorkoutSuggestion(BaseModel):
    """A scored, explained candidate workout offered to the user."""
    id: str
    user_id: str = ""
    suggested_date: date
    suggested_time: time
    duration: int  # minutes
    activity_type: ActivityType
    score: float = Field(ge=0.0, le=1.0)
    reasoning: str
    accepted: bool = False
    created_at: datetime

    @field_validator("suggested_time", mode="before")
    @classmethod
    def _parse_time(cls, value):
        return parse_hhmm(value)

    @field_serializer("suggested_time")
    def _serialize_time(self, value: time) -> str:
        return format_hhmm(value)

    @property
    def starts_at(self) -> datetime:
        """Wall-clock start of the suggested workout."""
        return datetime.combine(self.suggested_date, self.suggested_time)
