"""Activity models: logged or planned workouts."""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..utils.time_utils import to_local_naive


class ActivityType(str, Enum):
    """Supported workout types."""
    RUNNING = "running"
    CYCLING = "cycling"
    SWIMMING = "swimming"
    GYM = "gym"
    YOGA = "yoga"
    HIKING = "hiking"
    PILATES = "pilates"
    STRENGTH = "strength"
    HIIT = "hiit"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Capitalized name used in titles ("Running", "Hiit")."""
        return self.value.capitalize()


class Activity(BaseModel):
    """A historical or planned workout owned by a user."""
    id: str = ""
    type: ActivityType
    title: str
    date: datetime  # wall-clock start
    duration: int = Field(ge=0)  # minutes
    distance: Optional[float] = None  # km
    calories: Optional[int] = None
    notes: Optional[str] = None
    workout_link: Optional[str] = None
    completed: bool = False

    @field_validator("date")
    @classmethod
    def _local_wall_clock(cls, value: datetime) -> datetime:
        return to_local_naive(value)

    @property
    def day(self) -> date:
        """Calendar date the activity falls on."""
        return self.date.date()


class ActivityUpdate(BaseModel):
    """Partial update for an activity (completion toggling and edits)."""
    title: Optional[str] = None
    date: Optional[datetime] = None
    duration: Optional[int] = Field(default=None, ge=0)
    distance: Optional[float] = None
    calories: Optional[int] = None
    notes: Optional[str] = None
    workout_link: Optional[str] = None
    completed: Optional[bool] = None

    @field_validator("date")
    @classmethod
    def _local_wall_clock(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_local_naive(value) if value is not None else None


class WeeklyStats(BaseModel):
    """Aggregated progress for one week of activities."""
    week_start: date
    activities_completed: int = 0
    total_duration: int = 0  # minutes
    total_distance: float = 0.0  # km
    total_calories: int = 0
    week_progress: float = 0.0  # percent of the weekly target, 0-100
