"""Trip endpoints - trips and their days."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from backend.app.db.engine import get_trip_repository
from backend.app.db.repositories import TripRepository
from backend.app.features.budget import summarize_budget
from backend.app.models.budget import BudgetSummary
from backend.app.models.common import StoredModel
from backend.app.models.trips import Day, DayCreate, Trip, TripCreate, TripDataUpdate

router = APIRouter(prefix="/trips", tags=["trips"])

Repo = Annotated[TripRepository, Depends(get_trip_repository)]


class ReorderDaysRequest(StoredModel):
    """Request body for PATCH /trips/{trip_id}/days/reorder."""

    day_ids: list[str]


class SuccessResponse(BaseModel):
    """Acknowledgement for deletes and reorders."""

    success: bool = True


def _trip_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Trip not found")


@router.get("", response_model=list[Trip])
async def list_trips(repo: Repo) -> list[Trip]:
    """List all trips."""
    return await repo.get_all_trips()


@router.post("", response_model=Trip, status_code=status.HTTP_201_CREATED)
async def create_trip(request: TripCreate, repo: Repo) -> Trip:
    """Create a trip."""
    return await repo.create_trip(request)


@router.get("/{trip_id}", response_model=Trip)
async def get_trip(trip_id: str, repo: Repo) -> Trip:
    """Get a trip with its days, activities and transports."""
    trip = await repo.get_trip_by_id(trip_id)
    if trip is None:
        raise _trip_not_found()
    return trip


@router.patch("/{trip_id}", response_model=Trip)
async def update_trip(trip_id: str, request: TripDataUpdate, repo: Repo) -> Trip:
    """Merge fields, nested arrays included, over a trip."""
    trip = await repo.update_trip_with_data(trip_id, request)
    if trip is None:
        raise _trip_not_found()
    return trip


@router.delete("/{trip_id}", response_model=SuccessResponse)
async def delete_trip(trip_id: str, repo: Repo) -> SuccessResponse:
    """Delete a trip."""
    if not await repo.delete_trip(trip_id):
        raise _trip_not_found()
    return SuccessResponse()


@router.get("/{trip_id}/budget", response_model=BudgetSummary)
async def get_trip_budget(trip_id: str, repo: Repo) -> BudgetSummary:
    """Cost totals for a trip."""
    trip = await repo.get_trip_by_id(trip_id)
    if trip is None:
        raise _trip_not_found()
    return summarize_budget(trip)


@router.post("/{trip_id}/days", response_model=Day, status_code=status.HTTP_201_CREATED)
async def add_day(trip_id: str, request: DayCreate, repo: Repo) -> Day:
    """Add a day to a trip."""
    day = await repo.add_day(trip_id, request)
    if day is None:
        raise _trip_not_found()
    return day


@router.patch("/{trip_id}/days/reorder", response_model=SuccessResponse)
async def reorder_days(trip_id: str, request: ReorderDaysRequest, repo: Repo) -> SuccessResponse:
    """Reassign day indexes from the supplied order."""
    if not await repo.reorder_days(trip_id, request.day_ids):
        raise _trip_not_found()
    return SuccessResponse()
