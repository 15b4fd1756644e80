"""Store construction and FastAPI dependencies."""

from functools import lru_cache

from backend.app.config import Settings, get_settings
from backend.app.db.json_store import JsonStore
from backend.app.db.places import JsonPlaceRepository
from backend.app.db.repositories import PlaceRepository, SettingsRepository, TripRepository
from backend.app.db.settings_store import JsonSettingsRepository
from backend.app.db.trips import JsonTripRepository


def create_store_from_settings(settings: Settings) -> JsonStore:
    """Create a JSON store rooted at the configured data directory.

    Each store owns its own mutation queue. Share one store per process so all
    writers of a file go through the same queue.
    """
    return JsonStore(settings.data_dir)


@lru_cache
def get_store() -> JsonStore:
    """Get the process-wide store instance."""
    return create_store_from_settings(get_settings())


def get_trip_repository() -> TripRepository:
    """FastAPI dependency for the trip repository."""
    return JsonTripRepository(get_store(), get_settings().trips_file)


def get_place_repository() -> PlaceRepository:
    """FastAPI dependency for the places repository."""
    return JsonPlaceRepository(get_store(), get_settings().places_file)


def get_settings_repository() -> SettingsRepository:
    """FastAPI dependency for the settings repository."""
    settings = get_settings()
    return JsonSettingsRepository(
        get_store(), settings.settings_file, default_currency=settings.default_currency
    )
