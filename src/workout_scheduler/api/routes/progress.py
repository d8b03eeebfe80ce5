"""Progress routes.

- GET /stats/week - Completed-workout totals for a Monday-based week
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends

from ...models.activity import WeeklyStats
from ...services.assistant import AssistantService
from ..deps import get_assistant_service

router = APIRouter()


@router.get("/week", response_model=WeeklyStats)
async def weekly_stats(
    user_id: str,
    day: Optional[date] = None,
    service: AssistantService = Depends(get_assistant_service),
):
    """Weekly totals for the week containing ``day`` (default today)."""
    return await service.get_weekly_stats(user_id, day)
