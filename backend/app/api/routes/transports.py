"""Transport leg endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from backend.app.api.routes.trips import SuccessResponse
from backend.app.db.engine import get_trip_repository
from backend.app.db.repositories import TripRepository
from backend.app.models.trips import Transportation, TransportationUpdate

router = APIRouter(prefix="/transports", tags=["transports"])

Repo = Annotated[TripRepository, Depends(get_trip_repository)]


@router.patch("/{transport_id}", response_model=Transportation)
async def update_transportation(
    transport_id: str, request: TransportationUpdate, repo: Repo
) -> Transportation:
    """Update a transport leg."""
    transport = await repo.update_transportation(transport_id, request)
    if transport is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transport not found")
    return transport


@router.delete("/{transport_id}", response_model=SuccessResponse)
async def delete_transportation(transport_id: str, repo: Repo) -> SuccessResponse:
    """Delete a transport leg."""
    if not await repo.delete_transportation(transport_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transport not found")
    return SuccessResponse()
