"""Day endpoints - delete a day, add activities and transport legs to it."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from backend.app.api.routes.trips import SuccessResponse
from backend.app.db.engine import get_trip_repository
from backend.app.db.repositories import TripRepository
from backend.app.models.common import StoredModel
from backend.app.models.trips import (
    Activity,
    ActivityCreate,
    Transportation,
    TransportationCreate,
)

router = APIRouter(prefix="/days", tags=["days"])

Repo = Annotated[TripRepository, Depends(get_trip_repository)]


class ReorderActivitiesRequest(StoredModel):
    """Request body for PATCH /days/{day_id}/activities/reorder."""

    activity_ids: list[str]


def _day_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Day not found")


@router.delete("/{day_id}", response_model=SuccessResponse)
async def delete_day(day_id: str, repo: Repo) -> SuccessResponse:
    """Delete a day with its activities and transport legs."""
    if not await repo.delete_day(day_id):
        raise _day_not_found()
    return SuccessResponse()


@router.get("/{day_id}/activities", response_model=list[Activity])
async def list_activities(day_id: str, repo: Repo) -> list[Activity]:
    """List a day's activities in order."""
    if await repo.get_day(day_id) is None:
        raise _day_not_found()
    return await repo.get_activities_for_day(day_id)


@router.post(
    "/{day_id}/activities", response_model=Activity, status_code=status.HTTP_201_CREATED
)
async def add_activity(day_id: str, request: ActivityCreate, repo: Repo) -> Activity:
    """Add an activity to a day."""
    activity = await repo.add_activity(day_id, request)
    if activity is None:
        raise _day_not_found()
    return activity


@router.patch("/{day_id}/activities/reorder", response_model=SuccessResponse)
async def reorder_activities(
    day_id: str, request: ReorderActivitiesRequest, repo: Repo
) -> SuccessResponse:
    """Reassign activity order within a day."""
    if not await repo.reorder_activities(day_id, request.activity_ids):
        raise _day_not_found()
    return SuccessResponse()


@router.post(
    "/{day_id}/transports", response_model=Transportation, status_code=status.HTTP_201_CREATED
)
async def add_transportation(
    day_id: str, request: TransportationCreate, repo: Repo
) -> Transportation:
    """Add a transport leg to a day."""
    transport = await repo.add_transportation(day_id, request)
    if transport is None:
        raise _day_not_found()
    return transport
