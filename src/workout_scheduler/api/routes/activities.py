"""Activity routes: the log the scheduler learns from.

- GET /activities - List activities, newest first
- POST /activities - Log an activity
- PATCH /activities/{activity_id} - Edit or toggle completion
- DELETE /activities/{activity_id} - Delete an activity
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from ...models.activity import Activity, ActivityUpdate
from ...services.base import ActivityStore
from ..deps import get_activity_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[Activity])
async def list_activities(
    user_id: str,
    store: ActivityStore = Depends(get_activity_store),
):
    """List the user's activities."""
    return await store.get_activities(user_id)


@router.post("", response_model=Activity, status_code=status.HTTP_201_CREATED)
async def create_activity(
    user_id: str,
    activity: Activity,
    store: ActivityStore = Depends(get_activity_store),
):
    """Log a new activity."""
    created = await store.create_activity(user_id, activity)
    logger.info("Logged %s activity %s for user %s", created.type.value, created.id, user_id)
    return created


@router.patch("/{activity_id}", response_model=Activity)
async def update_activity(
    user_id: str,
    activity_id: str,
    updates: ActivityUpdate,
    store: ActivityStore = Depends(get_activity_store),
):
    """Update an activity, e.g. mark it completed."""
    return await store.update_activity(user_id, activity_id, updates)


@router.delete("/{activity_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_activity(
    user_id: str,
    activity_id: str,
    store: ActivityStore = Depends(get_activity_store),
):
    """Delete an activity."""
    await store.delete_activity(user_id, activity_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
