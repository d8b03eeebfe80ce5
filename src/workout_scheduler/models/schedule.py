"""Schedule preference and calendar models.

Preferences are validated on the way in: a preferred window must be a
well-formed ``HH:MM`` pair with the end strictly after the start, so the
scheduling engine never sees an inverted or zero-length window.
"""

from datetime import datetime, time
from enum import Enum
from typing import Dict, List, Optional

from pydantic import (
    BaseModel,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

from ..utils.time_utils import format_hhmm, parse_hhmm, to_local_naive
from .activity import ActivityType


class PriorityMode(str, Enum):
    """How strictly the user wants to keep to the plan."""
    MUST_DO = "must-do"
    FLEXIBLE = "flexible"


class CalendarProviderType(str, Enum):
    """Where busy blocks come from."""
    MANUAL = "manual"
    MOCK = "mock"
    GOOGLE = "google"


class TimeSlot(BaseModel):
    """A recurring weekly availability window."""
    day_of_week: int = Field(ge=0, le=6)  # 0=Sunday .. 6=Saturday
    start_time: time
    end_time: time

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _parse_time(cls, value):
        return parse_hhmm(value)

    @model_validator(mode="after")
    def _end_after_start(self) -> "TimeSlot":
        if self.end_time <= self.start_time:
            raise ValueError(
                f"end_time {format_hhmm(self.end_time)} must be after "
                f"start_time {format_hhmm(self.start_time)}"
            )
        return self

    @field_serializer("start_time", "end_time")
    def _serialize_time(self, value: time) -> str:
        return format_hhmm(value)


class CalendarIntegration(BaseModel):
    """Descriptor of the user's calendar source."""
    provider: CalendarProviderType = CalendarProviderType.MANUAL
    access_token: Optional[str] = Field(default=None, repr=False)
    calendar_id: str = "primary"


class SchedulePreferenceInput(BaseModel):
    """Fields a user saves; identity and timestamps are store-managed."""
    preferred_time_slots: List[TimeSlot] = Field(default_factory=list)
    workout_durations: Dict[ActivityType, int] = Field(default_factory=dict)  # minutes
    priority: PriorityMode = PriorityMode.FLEXIBLE
    days_per_week: int = Field(default=3, ge=1, le=7)
    calendar_integration: Optional[CalendarIntegration] = None

    @field_validator("workout_durations")
    @classmethod
    def _positive_durations(cls, value: Dict[ActivityType, int]) -> Dict[ActivityType, int]:
        for activity_type, minutes in value.items():
            if minutes <= 0:
                raise ValueError(f"duration for {activity_type.value} must be positive")
        return value


class SchedulePreference(SchedulePreferenceInput):
    """A user's stored scheduling preferences (at most one per user)."""
    id: str = ""
    user_id: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def slots_for_day(self, day_of_week: int) -> List[TimeSlot]:
        """Preferred windows declared for a day (0=Sunday)."""
        return [slot for slot in self.preferred_time_slots if slot.day_of_week == day_of_week]


class CalendarEvent(BaseModel):
    """A busy block read from the user's calendar."""
    id: str
    title: str
    start_time: datetime
    end_time: datetime
    all_day: bool = False

    @field_validator("start_time", "end_time")
    @classmethod
    def _local_wall_clock(cls, value: datetime) -> datetime:
        return to_local_naive(value)
