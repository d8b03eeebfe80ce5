"""Workout suggestion routes.

- POST /suggestions/generate - Regenerate suggestions from current data
- GET /suggestions - Stored suggestions, best first
- GET /suggestions/weekly-plan - One workout per day for the coming week
- POST /suggestions/{suggestion_id}/accept - Schedule the workout
- POST /suggestions/{suggestion_id}/decline - Drop the suggestion
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from ...config import get_settings
from ...models.activity import Activity
from ...models.suggestions import WorkoutSuggestion
from ...services.assistant import AssistantService
from ..deps import get_assistant_service

router = APIRouter()


@router.post("/generate", response_model=List[WorkoutSuggestion])
async def generate_suggestions(
    user_id: str,
    days_ahead: Optional[int] = Query(default=None, ge=1, le=31),
    start_date: Optional[date] = None,
    service: AssistantService = Depends(get_assistant_service),
):
    """Regenerate the user's workout suggestions."""
    days = days_ahead or get_settings().default_days_ahead
    return await service.generate_suggestions(user_id, days, start_date)


@router.get("", response_model=List[WorkoutSuggestion])
async def list_suggestions(
    user_id: str,
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    service: AssistantService = Depends(get_assistant_service),
):
    """List stored suggestions ordered by score."""
    return await service.get_suggestions(user_id, limit or get_settings().suggestion_list_limit)


@router.get("/weekly-plan", response_model=List[WorkoutSuggestion])
async def weekly_plan(
    user_id: str,
    start_date: Optional[date] = None,
    service: AssistantService = Depends(get_assistant_service),
):
    """Best suggestion per day, up to the weekly target."""
    return await service.get_weekly_plan(user_id, start_date)


@router.post("/{suggestion_id}/accept", response_model=Activity, status_code=status.HTTP_201_CREATED)
async def accept_suggestion(
    user_id: str,
    suggestion_id: str,
    service: AssistantService = Depends(get_assistant_service),
):
    """Accept a suggestion, creating a planned activity."""
    return await service.accept_suggestion(user_id, suggestion_id)


@router.post("/{suggestion_id}/decline", status_code=status.HTTP_204_NO_CONTENT)
async def decline_suggestion(
    user_id: str,
    suggestion_id: str,
    service: AssistantService = Depends(get_assistant_service),
):
    """Decline a suggestion."""
    await service.decline_suggestion(user_id, suggestion_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
