"""JSON-file implementation of TripRepository.

All trips live in one collection file. Days, activities and transport legs are
nested inside their trip, so every nested change rewrites the owning trip
under a single serialized mutation of the trips file. Owner lookup happens
inside that mutation, so concurrent changes to the same trip are never lost.
"""

import uuid
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from backend.app.db.json_store import JsonStore
from backend.app.models.common import merge_fields
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
    TripsCollection,
    TripUpdate,
)

TRIPS_FILE = "trips.json"


def new_id() -> str:
    """Generate an entity identifier."""
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(UTC)


class JsonTripRepository:
    """Trip aggregate repository backed by a JSON collection file."""

    def __init__(self, store: JsonStore, filename: str = TRIPS_FILE) -> None:
        self._store = store
        self._filename = filename

    async def init_trips_file(self) -> TripsCollection:
        """Create the trips file with an empty collection if it is missing."""
        return await self._store.ensure(self._filename, TripsCollection())

    async def get_all_trips(self) -> list[Trip]:
        """Get all trips. Plain read, not queued behind pending mutations."""
        collection = await self._store.read(self._filename, TripsCollection)
        if collection is None:
            await self.init_trips_file()
            return []
        return collection.items

    async def get_trip_by_id(self, trip_id: str) -> Trip | None:
        """Get trip by ID."""
        trips = await self.get_all_trips()
        return next((t for t in trips if t.id == trip_id), None)

    async def get_day(self, day_id: str) -> Day | None:
        """Get a day by ID from whichever trip holds it."""
        for trip in await self.get_all_trips():
            for day in trip.days:
                if day.id == day_id:
                    return day
        return None

    async def get_activities_for_day(self, day_id: str) -> list[Activity]:
        """Get the activities of a day sorted by their order."""
        for trip in await self.get_all_trips():
            if any(d.id == day_id for d in trip.days):
                activities = [a for a in trip.activities if a.day_id == day_id]
                return sorted(activities, key=lambda a: a.order)
        return []

    # Trips

    async def create_trip(self, data: TripCreate) -> Trip:
        """Create a new trip with empty days, activities and transports."""
        now = _now()
        trip = Trip(
            **data.model_dump(),
            id=new_id(),
            created_at=now,
            updated_at=now,
        )

        await self._mutate(lambda items: [*items, trip])
        return trip

    async def update_trip(self, trip_id: str, updates: TripUpdate) -> Trip | None:
        """Update a trip's own fields."""
        return await self.update_trip_with_data(trip_id, updates)

    async def update_trip_with_data(self, trip_id: str, updates: TripUpdate) -> Trip | None:
        """Merge fields (nested arrays included) over a trip.

        The ID is immutable and updated_at is refreshed.

        Returns:
            Updated trip, or None if no trip has this ID
        """
        updated: Trip | None = None

        def apply(items: list[Trip]) -> list[Trip]:
            nonlocal updated
            result = []
            for trip in items:
                if trip.id == trip_id:
                    updated = merge_fields(trip, updates, id=trip.id, updated_at=_now())
                    result.append(updated)
                else:
                    result.append(trip)
            return result

        await self._mutate(apply)
        return updated

    async def delete_trip(self, trip_id: str) -> bool:
        """Delete a trip and everything nested in it.

        Returns:
            True if a trip was removed
        """
        deleted = False

        def apply(items: list[Trip]) -> list[Trip]:
            nonlocal deleted
            remaining = [t for t in items if t.id != trip_id]
            deleted = len(remaining) != len(items)
            return remaining

        await self._mutate(apply)
        return deleted

    # Days

    async def add_day(self, trip_id: str, data: DayCreate) -> Day | None:
        """Append a day to a trip. Returns None if the trip does not exist."""
        day = Day(**data.model_dump(), id=new_id(), trip_id=trip_id)

        trip = await self._update_owner(
            lambda t: t.id == trip_id,
            lambda t: {"days": [*t.days, day]},
        )
        return day if trip else None

    async def delete_day(self, day_id: str) -> bool:
        """Delete a day together with its activities and transport legs."""
        trip = await self._update_owner(
            lambda t: any(d.id == day_id for d in t.days),
            lambda t: {
                "days": [d for d in t.days if d.id != day_id],
                "activities": [a for a in t.activities if a.day_id != day_id],
                "transports": [tr for tr in t.transports if tr.day_id != day_id],
            },
        )
        return trip is not None

    async def reorder_days(self, trip_id: str, day_ids: list[str]) -> bool:
        """Set each day's index to its position in day_ids.

        Unknown IDs are skipped; days missing from day_ids are dropped from the trip.
        """

        def reorder(trip: Trip) -> dict[str, Any]:
            by_id = {d.id: d for d in trip.days}
            days: list[Day] = []
            seen: set[str] = set()
            for index, day_id in enumerate(day_ids):
                if day_id in by_id and day_id not in seen:
                    seen.add(day_id)
                    days.append(by_id[day_id].model_copy(update={"index": index}))
            return {"days": days}

        trip = await self._update_owner(lambda t: t.id == trip_id, reorder)
        return trip is not None

    # Activities

    async def add_activity(self, day_id: str, data: ActivityCreate) -> Activity | None:
        """Add an activity to a day. Returns None if the day does not exist."""
        activity = Activity(**data.model_dump(), id=new_id(), day_id=day_id)

        trip = await self._update_owner(
            lambda t: any(d.id == day_id for d in t.days),
            lambda t: {"activities": [*t.activities, activity]},
        )
        return activity if trip else None

    async def update_activity(self, activity_id: str, updates: ActivityUpdate) -> Activity | None:
        """Merge fields over an activity. Returns None if it does not exist."""
        trip = await self._update_owner(
            lambda t: any(a.id == activity_id for a in t.activities),
            lambda t: {
                "activities": [
                    merge_fields(a, updates, id=a.id) if a.id == activity_id else a
                    for a in t.activities
                ]
            },
        )
        if trip is None:
            return None
        return next((a for a in trip.activities if a.id == activity_id), None)

    async def delete_activity(self, activity_id: str) -> bool:
        """Delete an activity and the transport legs that start or end at it.

        Transport records embedded in other activities are left alone.
        """
        trip = await self._update_owner(
            lambda t: any(a.id == activity_id for a in t.activities),
            lambda t: {
                "activities": [a for a in t.activities if a.id != activity_id],
                "transports": [
                    tr
                    for tr in t.transports
                    if tr.from_activity_id != activity_id and tr.to_activity_id != activity_id
                ],
            },
        )
        return trip is not None

    async def reorder_activities(self, day_id: str, activity_ids: list[str]) -> bool:
        """Set order of the day's activities to their position in activity_ids.

        Activities of the day missing from activity_ids keep their order.
        """
        positions: dict[str, int] = {}
        for position, activity_id in enumerate(activity_ids):
            positions.setdefault(activity_id, position)

        trip = await self._update_owner(
            lambda t: any(d.id == day_id for d in t.days),
            lambda t: {
                "activities": [
                    a.model_copy(update={"order": positions[a.id]})
                    if a.day_id == day_id and a.id in positions
                    else a
                    for a in t.activities
                ]
            },
        )
        return trip is not None

    # Transportation

    async def add_transportation(
        self, day_id: str, data: TransportationCreate
    ) -> Transportation | None:
        """Add a transport leg to a day. Returns None if the day does not exist."""
        transport = Transportation(**data.model_dump(), id=new_id(), day_id=day_id)

        trip = await self._update_owner(
            lambda t: any(d.id == day_id for d in t.days),
            lambda t: {"transports": [*t.transports, transport]},
        )
        return transport if trip else None

    async def update_transportation(
        self, transport_id: str, updates: TransportationUpdate
    ) -> Transportation | None:
        """Merge fields over a transport leg. Returns None if it does not exist."""
        trip = await self._update_owner(
            lambda t: any(tr.id == transport_id for tr in t.transports),
            lambda t: {
                "transports": [
                    merge_fields(tr, updates, id=tr.id) if tr.id == transport_id else tr
                    for tr in t.transports
                ]
            },
        )
        if trip is None:
            return None
        return next((tr for tr in trip.transports if tr.id == transport_id), None)

    async def delete_transportation(self, transport_id: str) -> bool:
        """Delete a transport leg."""
        trip = await self._update_owner(
            lambda t: any(tr.id == transport_id for tr in t.transports),
            lambda t: {"transports": [tr for tr in t.transports if tr.id != transport_id]},
        )
        return trip is not None

    # Internals

    async def _mutate(self, apply: Callable[[list[Trip]], list[Trip]]) -> TripsCollection:
        """Replace the trip list under one serialized mutation, bumping the version."""

        def transform(current: TripsCollection | None) -> TripsCollection:
            collection = current or TripsCollection()
            return TripsCollection(version=collection.version + 1, items=apply(collection.items))

        return await self._store.update(self._filename, TripsCollection, transform)

    async def _update_owner(
        self,
        owns: Callable[[Trip], bool],
        change: Callable[[Trip], dict[str, Any]],
    ) -> Trip | None:
        """Apply change to the first trip matching owns.

        Both the lookup and the change run inside the serialized mutation, on
        the freshly read collection.

        Returns:
            The updated trip, or None if no trip matched
        """
        # Skip the write entirely when nothing can match
        if not any(owns(t) for t in await self.get_all_trips()):
            return None

        updated: Trip | None = None

        def apply(items: list[Trip]) -> list[Trip]:
            nonlocal updated
            result = []
            for trip in items:
                if updated is None and owns(trip):
                    updated = trip.model_copy(update={**change(trip), "updated_at": _now()})
                    result.append(updated)
                else:
                    result.append(trip)
            return result

        await self._mutate(apply)
        return updated
