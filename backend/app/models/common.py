"""Common types and enums shared across all models."""

from enum import Enum
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Local time of day, 24h clock
HHMM_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

TimeOfDay = Annotated[str, Field(pattern=HHMM_PATTERN)]


class StoredModel(BaseModel):
    """Base for everything persisted in a collection file.

    Attributes are snake_case in Python and camelCase on disk.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TransportMode(str, Enum):
    """Transport mode for a leg between activities."""

    walk = "walk"
    bike = "bike"
    scooter = "scooter"
    car = "car"
    taxi = "taxi"
    bus = "bus"
    train = "train"
    metro = "metro"
    ferry = "ferry"
    flight = "flight"
    other = "other"


class PlaceProvider(str, Enum):
    """Where a cached place came from."""

    opentripmap = "opentripmap"
    custom = "custom"


M = TypeVar("M", bound=BaseModel)


def merge_fields(entity: M, updates: BaseModel, **fixed: Any) -> M:
    """Merge the fields explicitly set on updates over entity.

    An explicit None clears fields whose default is None and is ignored for the rest.
    fixed overrides both (used to pin identifiers and counters).
    """
    model_fields = type(entity).model_fields
    changes = {
        key: value
        for key, value in updates.model_dump(exclude_unset=True).items()
        if key in model_fields and (value is not None or model_fields[key].default is None)
    }
    return type(entity).model_validate({**entity.model_dump(), **changes, **fixed})
