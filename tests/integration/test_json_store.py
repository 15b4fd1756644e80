"""Tests for whole-file JSON storage and serialized updates."""

import asyncio
import json
from pathlib import Path

import pytest

from backend.app.db.json_store import CollectionCorruptedError, JsonStore
from backend.app.models.common import StoredModel
from backend.app.models.places import PlacesCache


class Counter(StoredModel):
    """Minimal versioned document for queue tests."""

    version: int = 1
    hit_count: int = 0


@pytest.mark.asyncio
async def test_read_missing_file_returns_none(store: JsonStore) -> None:
    """Test absent files are reported as None, not errors."""
    assert await store.read("missing.json", Counter) is None


@pytest.mark.asyncio
async def test_write_then_read_round_trip(store: JsonStore) -> None:
    """Test a written value reads back equal."""
    value = Counter(version=4, hit_count=12)

    await store.write("counter.json", value)

    assert await store.read("counter.json", Counter) == value


@pytest.mark.asyncio
async def test_data_dir_created_recursively(tmp_path: Path) -> None:
    """Test nested storage directories are created on first use."""
    data_dir = tmp_path / "a" / "b" / "c"
    store = JsonStore(data_dir)

    await store.write("counter.json", Counter())

    assert (data_dir / "counter.json").is_file()

    # Second use is a no-op for the directory
    await store.write("counter.json", Counter(hit_count=1))
    assert (await store.read("counter.json", Counter)) == Counter(hit_count=1)


@pytest.mark.asyncio
async def test_write_is_indented_camel_case_json(store: JsonStore, data_dir: Path) -> None:
    """Test the file is human-diffable with one field per line."""
    await store.write("counter.json", Counter(version=2, hit_count=3))

    content = (data_dir / "counter.json").read_text(encoding="utf-8")

    assert content == '{\n  "version": 2,\n  "hitCount": 3\n}\n'
    assert json.loads(content) == {"version": 2, "hitCount": 3}


@pytest.mark.asyncio
async def test_corrupted_file_raises(store: JsonStore, data_dir: Path) -> None:
    """Test truncated files surface as CollectionCorruptedError."""
    data_dir.mkdir(parents=True)
    (data_dir / "counter.json").write_text('{"version": 2, "hitC', encoding="utf-8")

    with pytest.raises(CollectionCorruptedError) as exc_info:
        await store.read("counter.json", Counter)

    assert exc_info.value.filename == "counter.json"


@pytest.mark.asyncio
async def test_wrong_shape_raises(store: JsonStore, data_dir: Path) -> None:
    """Test valid JSON of the wrong shape is also treated as corrupted."""
    data_dir.mkdir(parents=True)
    (data_dir / "places_cache.json").write_text('{"version": "x", "items": 3}', encoding="utf-8")

    with pytest.raises(CollectionCorruptedError):
        await store.read("places_cache.json", PlacesCache)


@pytest.mark.asyncio
async def test_ensure_writes_default_once(store: JsonStore) -> None:
    """Test ensure initializes absent files and leaves existing ones alone."""
    first = await store.ensure("counter.json", Counter())
    assert first == Counter()

    await store.write("counter.json", Counter(version=9, hit_count=5))

    second = await store.ensure("counter.json", Counter())
    assert second == Counter(version=9, hit_count=5)


@pytest.mark.asyncio
async def test_concurrent_updates_lose_nothing(store: JsonStore) -> None:
    """Test N concurrent increments through the queue leave the counter at N."""

    def increment(current: Counter | None) -> Counter:
        counter = current or Counter()
        return Counter(version=counter.version + 1, hit_count=counter.hit_count + 1)

    await asyncio.gather(*(store.update("counter.json", Counter, increment) for _ in range(50)))

    result = await store.read("counter.json", Counter)
    assert result is not None
    assert result.hit_count == 50
    assert result.version == 51


@pytest.mark.asyncio
async def test_update_accepts_async_transform(store: JsonStore) -> None:
    """Test transforms may be coroutine functions."""

    async def increment(current: Counter | None) -> Counter:
        await asyncio.sleep(0)
        counter = current or Counter()
        return Counter(version=counter.version + 1, hit_count=counter.hit_count + 1)

    await asyncio.gather(*(store.update("counter.json", Counter, increment) for _ in range(10)))

    result = await store.read("counter.json", Counter)
    assert result is not None
    assert result.hit_count == 10


@pytest.mark.asyncio
async def test_failed_transform_writes_nothing_and_releases(store: JsonStore) -> None:
    """Test a raising transform leaves the file untouched and the queue free."""
    await store.write("counter.json", Counter(hit_count=1))

    def explode(current: Counter | None) -> Counter:
        raise ValueError("bad transform")

    with pytest.raises(ValueError, match="bad transform"):
        await store.update("counter.json", Counter, explode)

    assert not store.queue.pending("counter.json")
    assert await store.read("counter.json", Counter) == Counter(hit_count=1)

    updated = await asyncio.wait_for(
        store.update("counter.json", Counter, lambda c: Counter(hit_count=2)), timeout=1
    )
    assert updated.hit_count == 2


@pytest.mark.asyncio
async def test_update_on_corrupted_file_propagates(store: JsonStore, data_dir: Path) -> None:
    """Test corruption is fatal to the mutation and does not hold the queue."""
    data_dir.mkdir(parents=True)
    (data_dir / "counter.json").write_text("not json", encoding="utf-8")

    with pytest.raises(CollectionCorruptedError):
        await store.update("counter.json", Counter, lambda c: Counter())

    assert not store.queue.pending("counter.json")
