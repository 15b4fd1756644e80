"""Tests for stored model validation, aliases and merging."""

from datetime import UTC, date, datetime

import pytest
from pydantic import ValidationError

from backend.app.models.common import merge_fields
from backend.app.models.settings import SettingsDocument, SettingsUpdate
from backend.app.models.trips import (
    Activity,
    ActivityCreate,
    ActivityUpdate,
    Transportation,
    TransportationCreate,
    Trip,
    TripCreate,
)


def _activity(**overrides: object) -> Activity:
    data: dict[str, object] = {"id": "a1", "day_id": "d1", "title": "Museum", "order": 0}
    data.update(overrides)
    return Activity.model_validate(data)


def test_trip_serializes_with_camel_case_keys() -> None:
    """Test on-disk keys keep the camelCase layout."""
    now = datetime(2025, 5, 1, tzinfo=UTC)
    trip = Trip(
        id="t1",
        title="Vietnam",
        destination="Hanoi",
        start_date=date(2025, 6, 1),
        end_date=date(2025, 6, 3),
        created_at=now,
        updated_at=now,
    )

    data = trip.model_dump(mode="json", by_alias=True)

    assert data["startDate"] == "2025-06-01"
    assert data["endDate"] == "2025-06-03"
    assert "createdAt" in data
    assert data["days"] == []
    assert data["currency"] == "USD"


def test_models_accept_camel_case_and_snake_case() -> None:
    """Test both key styles populate the same fields."""
    camel = Transportation.model_validate(
        {"id": "x", "dayId": "d1", "fromActivityId": "a1", "mode": "walk"}
    )
    snake = Transportation.model_validate(
        {"id": "x", "day_id": "d1", "from_activity_id": "a1", "mode": "walk"}
    )

    assert camel == snake
    assert camel.from_activity_id == "a1"


def test_activity_title_required_non_empty() -> None:
    """Test empty titles are rejected."""
    with pytest.raises(ValidationError):
        ActivityCreate(title="")


def test_time_of_day_must_be_hhmm() -> None:
    """Test start/end times are validated as HH:MM."""
    assert ActivityCreate(title="Lunch", start_time="12:30").start_time == "12:30"

    with pytest.raises(ValidationError):
        ActivityCreate(title="Lunch", start_time="25:00")


def test_transport_mode_is_enumerated() -> None:
    """Test unknown modes are rejected."""
    with pytest.raises(ValidationError):
        TransportationCreate.model_validate({"mode": "rocket"})


def test_trip_create_rejects_end_before_start() -> None:
    """Test date range validation."""
    with pytest.raises(ValidationError):
        TripCreate(
            title="Backwards",
            destination="Nowhere",
            start_date=date(2025, 6, 3),
            end_date=date(2025, 6, 1),
        )


def test_merge_fields_applies_only_set_fields() -> None:
    """Test unset fields keep their stored value."""
    activity = _activity(notes="Bring ticket", cost=12.5)

    merged = merge_fields(activity, ActivityUpdate(cost=20))

    assert merged.cost == 20
    assert merged.notes == "Bring ticket"
    assert merged.title == "Museum"


def test_merge_fields_explicit_none_clears_optional() -> None:
    """Test None clears optional fields but not required ones."""
    activity = _activity(notes="Bring ticket")

    merged = merge_fields(activity, ActivityUpdate(notes=None, title=None))

    assert merged.notes is None
    assert merged.title == "Museum"


def test_merge_fields_pins_fixed_values() -> None:
    """Test fixed overrides win over updates."""
    activity = _activity()

    merged = merge_fields(activity, ActivityUpdate(order=3), id="a1", order=7)

    assert merged.id == "a1"
    assert merged.order == 7


def test_merge_fields_ignores_none_for_defaulted_field() -> None:
    """Test None does not wipe a field whose default is a value."""
    settings = SettingsDocument(default_currency="EUR")

    merged = merge_fields(settings, SettingsUpdate(default_currency=None))

    assert merged.default_currency == "EUR"
