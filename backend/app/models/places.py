"""Place models - cached points of interest."""

from typing import Any

from pydantic import Field

from backend.app.models.common import PlaceProvider, StoredModel


class Place(StoredModel):
    """Point of interest, either from an external provider or user-entered."""

    id: str
    external_id: str | None = None
    name: str
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    address: str | None = None
    provider: PlaceProvider
    metadata: Any = None


class PlacesCache(StoredModel):
    """Contents of the places cache file."""

    version: int = 1
    items: list[Place] = Field(default_factory=list)
