"""Shared pytest fixtures for all test suites."""

from pathlib import Path

import pytest

from backend.app.db.json_store import JsonStore
from backend.app.db.places import JsonPlaceRepository
from backend.app.db.settings_store import JsonSettingsRepository
from backend.app.db.trips import JsonTripRepository


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Data directory that does not exist yet."""
    return tmp_path / "data"


@pytest.fixture
def store(data_dir: Path) -> JsonStore:
    """Independent store with its own mutation queue."""
    return JsonStore(data_dir)


@pytest.fixture
def trip_repo(store: JsonStore) -> JsonTripRepository:
    return JsonTripRepository(store)


@pytest.fixture
def place_repo(store: JsonStore) -> JsonPlaceRepository:
    return JsonPlaceRepository(store)


@pytest.fixture
def settings_repo(store: JsonStore) -> JsonSettingsRepository:
    return JsonSettingsRepository(store)
