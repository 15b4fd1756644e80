"""Models package - re-exports for convenience."""

from backend.app.models.budget import BudgetSummary
from backend.app.models.common import PlaceProvider, StoredModel, TimeOfDay, TransportMode
from backend.app.models.places import Place, PlacesCache
from backend.app.models.settings import SettingsDocument, SettingsUpdate
from backend.app.models.trips import (
    Activity,
    ActivityCreate,
    ActivityTransport,
    ActivityUpdate,
    Day,
    DayCreate,
    Location,
    Transportation,
    TransportationCreate,
    TransportationUpdate,
    Trip,
    TripCreate,
    TripDataUpdate,
    TripsCollection,
    TripUpdate,
)

__all__ = [
    # Common
    "StoredModel",
    "TimeOfDay",
    "TransportMode",
    "PlaceProvider",
    # Trips
    "Trip",
    "TripsCollection",
    "Day",
    "Activity",
    "ActivityTransport",
    "Location",
    "Transportation",
    "TripCreate",
    "TripUpdate",
    "TripDataUpdate",
    "DayCreate",
    "ActivityCreate",
    "ActivityUpdate",
    "TransportationCreate",
    "TransportationUpdate",
    # Places
    "Place",
    "PlacesCache",
    # Settings
    "SettingsDocument",
    "SettingsUpdate",
    # Budget
    "BudgetSummary",
]
