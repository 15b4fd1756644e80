"""Place search endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from backend.app.adapters.places import search_places
from backend.app.config import Settings, get_settings
from backend.app.db.engine import get_place_repository
from backend.app.db.repositories import PlaceRepository
from backend.app.models.places import Place

router = APIRouter(prefix="/places", tags=["places"])


@router.get("/search", response_model=list[Place])
async def search(
    repo: Annotated[PlaceRepository, Depends(get_place_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
    q: Annotated[str, Query(max_length=200)] = "",
) -> list[Place]:
    """Search cached places, falling back to sample places."""
    return await search_places(repo, q, api_key=settings.opentripmap_api_key)
