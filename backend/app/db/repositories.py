"""Repository protocol interfaces for data access."""

from typing import Protocol

from backend.app.models.places import Place
from backend.app.models.settings import SettingsDocument, SettingsUpdate
from backend.app.models.trips import (
    Activity,
    ActivityCreate,
    ActivityUpdate,
    Day,
    DayCreate,
    Transportation,
    TransportationCreate,
    TransportationUpdate,
    Trip,
    TripCreate,
    TripUpdate,
)


class TripRepository(Protocol):
    """Repository for the trip aggregate and its nested entities.

    Not-found conditions are reported as None/False, never raised.
    """

    async def get_all_trips(self) -> list[Trip]:
        """Get all trips."""
        ...

    async def get_trip_by_id(self, trip_id: str) -> Trip | None:
        """Get trip by ID.

        Args:
            trip_id: Trip ID

        Returns:
            Trip or None if not found
        """
        ...

    async def get_day(self, day_id: str) -> Day | None:
        """Get day by ID."""
        ...

    async def get_activities_for_day(self, day_id: str) -> list[Activity]:
        """Get a day's activities sorted by order."""
        ...

    async def create_trip(self, data: TripCreate) -> Trip:
        """Create a new trip.

        Args:
            data: Trip fields

        Returns:
            Created trip with generated ID and timestamps
        """
        ...

    async def update_trip(self, trip_id: str, updates: TripUpdate) -> Trip | None:
        """Update a trip's own fields."""
        ...

    async def update_trip_with_data(self, trip_id: str, updates: TripUpdate) -> Trip | None:
        """Merge fields, nested arrays included, over a trip.

        Args:
            trip_id: Trip ID
            updates: Fields to merge; only explicitly set fields are applied

        Returns:
            Updated trip or None if not found
        """
        ...

    async def delete_trip(self, trip_id: str) -> bool:
        """Delete a trip. Returns whether a trip was removed."""
        ...

    async def add_day(self, trip_id: str, data: DayCreate) -> Day | None:
        """Add a day to a trip."""
        ...

    async def delete_day(self, day_id: str) -> bool:
        """Delete a day, cascading to its activities and transport legs."""
        ...

    async def reorder_days(self, trip_id: str, day_ids: list[str]) -> bool:
        """Reassign day indexes from their position in day_ids."""
        ...

    async def add_activity(self, day_id: str, data: ActivityCreate) -> Activity | None:
        """Add an activity to a day."""
        ...

    async def update_activity(self, activity_id: str, updates: ActivityUpdate) -> Activity | None:
        """Update an activity."""
        ...

    async def delete_activity(self, activity_id: str) -> bool:
        """Delete an activity, cascading to transport legs that reference it."""
        ...

    async def reorder_activities(self, day_id: str, activity_ids: list[str]) -> bool:
        """Reassign activity order within a day from their position in activity_ids."""
        ...

    async def add_transportation(
        self, day_id: str, data: TransportationCreate
    ) -> Transportation | None:
        """Add a transport leg to a day."""
        ...

    async def update_transportation(
        self, transport_id: str, updates: TransportationUpdate
    ) -> Transportation | None:
        """Update a transport leg."""
        ...

    async def delete_transportation(self, transport_id: str) -> bool:
        """Delete a transport leg."""
        ...


class PlaceRepository(Protocol):
    """Repository for cached places."""

    async def get_all_places(self) -> list[Place]:
        """Get all cached places."""
        ...

    async def get_place_by_id(self, place_id: str) -> Place | None:
        """Get cached place by ID."""
        ...

    async def upsert_place(self, place: Place) -> Place:
        """Insert or replace a place by ID."""
        ...

    async def search_places(self, query: str) -> list[Place]:
        """Search cached places by name or address."""
        ...


class SettingsRepository(Protocol):
    """Repository for the settings singleton."""

    async def get_settings(self) -> SettingsDocument:
        """Get settings, initializing defaults on first access."""
        ...

    async def update_settings(self, updates: SettingsUpdate) -> SettingsDocument:
        """Merge updates into settings."""
        ...
