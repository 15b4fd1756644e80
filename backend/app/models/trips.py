"""Trip aggregate models - trips with their days, activities and transport legs."""

from datetime import date, datetime
from typing import Annotated

from pydantic import Field, ValidationInfo, field_validator

from backend.app.models.common import StoredModel, TimeOfDay, TransportMode

NonEmptyStr = Annotated[str, Field(min_length=1)]


class Day(StoredModel):
    """Calendar day inside a trip."""

    id: str
    trip_id: str
    date: date
    index: int


class Location(StoredModel):
    """Where an activity happens."""

    name: str | None = None
    lat: float | None = Field(None, ge=-90, le=90)
    lng: float | None = Field(None, ge=-180, le=180)
    address: str | None = None
    map_link: str | None = None


class ActivityTransport(StoredModel):
    """How the traveller gets to an activity.

    Embedded in the activity itself, unrelated to standalone Transportation legs.
    """

    mode: TransportMode | None = None
    provider: str | None = None
    depart_time: TimeOfDay | None = None
    arrive_time: TimeOfDay | None = None
    distance_km: float | None = None
    duration_min: int | None = None
    cost: float | None = None
    notes: str | None = None


class Activity(StoredModel):
    """Single activity on a day."""

    id: str
    day_id: str
    title: NonEmptyStr
    notes: str | None = None
    start_time: TimeOfDay | None = None
    end_time: TimeOfDay | None = None
    cost: float | None = None
    category: str | None = None
    place_id: str | None = None
    order: int
    location: Location | None = None
    transport: ActivityTransport | None = None


class Transportation(StoredModel):
    """Standalone transport leg on a day, optionally linking two activities."""

    id: str
    day_id: str
    from_activity_id: str | None = None
    to_activity_id: str | None = None
    mode: TransportMode
    provider: str | None = None
    depart_time: TimeOfDay | None = None
    arrive_time: TimeOfDay | None = None
    distance_km: float | None = None
    duration_min: int | None = None
    cost: float | None = None
    notes: str | None = None


class Trip(StoredModel):
    """Trip aggregate root. Days, activities and transports live inside it."""

    id: str
    title: NonEmptyStr
    destination: NonEmptyStr
    start_date: date
    end_date: date
    currency: str = "USD"
    created_at: datetime
    updated_at: datetime
    days: list[Day] = Field(default_factory=list)
    activities: list[Activity] = Field(default_factory=list)
    transports: list[Transportation] = Field(default_factory=list)


class TripsCollection(StoredModel):
    """Contents of the trips collection file."""

    version: int = 1
    items: list[Trip] = Field(default_factory=list)


# Create/update payloads


class TripCreate(StoredModel):
    """Fields supplied when creating a trip."""

    title: NonEmptyStr
    destination: NonEmptyStr
    start_date: date
    end_date: date
    currency: str = "USD"

    @field_validator("end_date")
    @classmethod
    def validate_end_after_start(cls, v: date, info: ValidationInfo) -> date:
        """Ensure end_date >= start_date."""
        if "start_date" in info.data and v < info.data["start_date"]:
            raise ValueError("end_date must be >= start_date")
        return v


class TripUpdate(StoredModel):
    """Partial update of a trip's own fields."""

    title: NonEmptyStr | None = None
    destination: NonEmptyStr | None = None
    start_date: date | None = None
    end_date: date | None = None
    currency: str | None = None


class TripDataUpdate(TripUpdate):
    """Partial update of a trip including its nested arrays."""

    days: list[Day] | None = None
    activities: list[Activity] | None = None
    transports: list[Transportation] | None = None


class DayCreate(StoredModel):
    """Fields supplied when adding a day to a trip."""

    date: date
    index: int = 0


class ActivityCreate(StoredModel):
    """Fields supplied when adding an activity to a day."""

    title: NonEmptyStr
    notes: str | None = None
    start_time: TimeOfDay | None = None
    end_time: TimeOfDay | None = None
    cost: float | None = None
    category: str | None = None
    place_id: str | None = None
    order: int = 0
    location: Location | None = None
    transport: ActivityTransport | None = None


class ActivityUpdate(StoredModel):
    """Partial update of an activity."""

    day_id: str | None = None
    title: NonEmptyStr | None = None
    notes: str | None = None
    start_time: TimeOfDay | None = None
    end_time: TimeOfDay | None = None
    cost: float | None = None
    category: str | None = None
    place_id: str | None = None
    order: int | None = None
    location: Location | None = None
    transport: ActivityTransport | None = None


class TransportationCreate(StoredModel):
    """Fields supplied when adding a transport leg to a day."""

    from_activity_id: str | None = None
    to_activity_id: str | None = None
    mode: TransportMode
    provider: str | None = None
    depart_time: TimeOfDay | None = None
    arrive_time: TimeOfDay | None = None
    distance_km: float | None = None
    duration_min: int | None = None
    cost: float | None = None
    notes: str | None = None


class TransportationUpdate(StoredModel):
    """Partial update of a transport leg."""

    from_activity_id: str | None = None
    to_activity_id: str | None = None
    mode: TransportMode | None = None
    provider: str | None = None
    depart_time: TimeOfDay | None = None
    arrive_time: TimeOfDay | None = None
    distance_km: float | None = None
    duration_min: int | None = None
    cost: float | None = None
    notes: str | None = None
