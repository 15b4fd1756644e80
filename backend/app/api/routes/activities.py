"""Activity endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from backend.app.api.routes.trips import SuccessResponse
from backend.app.db.engine import get_trip_repository
from backend.app.db.repositories import TripRepository
from backend.app.models.trips import Activity, ActivityUpdate

router = APIRouter(prefix="/activities", tags=["activities"])

Repo = Annotated[TripRepository, Depends(get_trip_repository)]


@router.patch("/{activity_id}", response_model=Activity)
async def update_activity(activity_id: str, request: ActivityUpdate, repo: Repo) -> Activity:
    """Update an activity."""
    activity = await repo.update_activity(activity_id, request)
    if activity is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Activity not found")
    return activity


@router.delete("/{activity_id}", response_model=SuccessResponse)
async def delete_activity(activity_id: str, repo: Repo) -> SuccessResponse:
    """Delete an activity and the transport legs linked to it."""
    if not await repo.delete_activity(activity_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Activity not found")
    return SuccessResponse()
