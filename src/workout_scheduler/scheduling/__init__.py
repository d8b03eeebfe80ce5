"""Workout scheduling engine: patterns, availability, scoring, suggestions."""

from .availability import find_available_slots, find_generic_slots, find_preferred_slots
from .engine import SchedulingService, suggestion_id
from .patterns import analyze_user_patterns
from .reasoning import generate_reasoning
from .scoring import score_slot

__all__ = [
    "SchedulingService",
    "analyze_user_patterns",
    "find_available_slots",
    "find_generic_slots",
    "find_preferred_slots",
    "generate_reasoning",
    "score_slot",
    "suggestion_id",
]
