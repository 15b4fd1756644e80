"""JSON-file implementation of PlaceRepository."""

from backend.app.db.json_store import JsonStore
from backend.app.models.places import Place, PlacesCache

PLACES_FILE = "places_cache.json"


class JsonPlaceRepository:
    """Places cache backed by a JSON collection file."""

    def __init__(self, store: JsonStore, filename: str = PLACES_FILE) -> None:
        self._store = store
        self._filename = filename

    async def init_places_cache(self) -> PlacesCache:
        """Create the places file with an empty collection if it is missing."""
        return await self._store.ensure(self._filename, PlacesCache())

    async def get_all_places(self) -> list[Place]:
        """Get all cached places."""
        cache = await self._store.read(self._filename, PlacesCache)
        if cache is None:
            await self.init_places_cache()
            return []
        return cache.items

    async def get_place_by_id(self, place_id: str) -> Place | None:
        """Get cached place by ID."""
        places = await self.get_all_places()
        return next((p for p in places if p.id == place_id), None)

    async def upsert_place(self, place: Place) -> Place:
        """Insert a place, or replace the cached place with the same ID."""

        def transform(current: PlacesCache | None) -> PlacesCache:
            cache = current or PlacesCache()
            items = list(cache.items)
            index = next((i for i, p in enumerate(items) if p.id == place.id), None)
            if index is None:
                items.append(place)
            else:
                items[index] = place
            return PlacesCache(version=cache.version + 1, items=items)

        await self._store.update(self._filename, PlacesCache, transform)
        return place

    async def search_places(self, query: str) -> list[Place]:
        """Case-insensitive substring match over name and address."""
        needle = query.lower()
        return [
            p
            for p in await self.get_all_places()
            if needle in p.name.lower() or (p.address is not None and needle in p.address.lower())
        ]
