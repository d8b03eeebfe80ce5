"""Schedule preference routes.

- GET /preferences - Current schedule preference (409 until one is saved)
- PUT /preferences - Create or replace the schedule preference
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ...models.schedule import SchedulePreference, SchedulePreferenceInput
from ...services.assistant import AssistantService
from ..deps import get_assistant_service

router = APIRouter()


def _public(preference: SchedulePreference) -> Dict[str, Any]:
    return preference.model_dump(
        mode="json", exclude={"calendar_integration": {"access_token"}}
    )


@router.get("")
async def get_preferences(
    user_id: str,
    service: AssistantService = Depends(get_assistant_service),
):
    """Get the user's schedule preference."""
    return _public(await service.get_preferences(user_id))


@router.put("")
async def save_preferences(
    user_id: str,
    request: SchedulePreferenceInput,
    service: AssistantService = Depends(get_assistant_service),
):
    """Save the user's schedule preference."""
    return _public(await service.save_preferences(user_id, request))
